from __future__ import annotations
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from pydantic import ValidationError

from agrocad.data_access.storage import read_table, write_csv
from agrocad.models import Producer, ProducerForm
from agrocad.utils.config import paths, rejects_path_for
from agrocad.utils.log import get_logger
from agrocad.utils.format import format_cpf_or_cnpj

log = get_logger("agrocad.import")

# coluna canônica -> nomes aceitos na planilha
COLUMN_ALIASES: Dict[str, Iterable[str]] = {
    "cpf_cnpj": ["cpf_cnpj", "cpfCnpj", "cpf/cnpj", "documento", "cpf", "cnpj"],
    "name": ["name", "nome", "produtor"],
}

REJECT_COLUMNS = ["linha", "cpf_cnpj", "name", "motivo"]


@dataclass
class ImportResult:
    producers: List[Producer] = field(default_factory=list)
    rejected: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=REJECT_COLUMNS))

    @property
    def ok(self) -> bool:
        return self.rejected.empty


def _rename_columns(df: pd.DataFrame) -> pd.DataFrame:
    current = {str(c).strip().lower(): c for c in df.columns}
    mapping: Dict[str, str] = {}
    for canon, aliases in COLUMN_ALIASES.items():
        for a in aliases:
            if a.lower() in current:
                mapping[current[a.lower()]] = canon
                break
    return df.rename(columns=mapping)


EXCEL_SUFFIXES = {".xlsx", ".xls"}

_NUMERIC_CELL = re.compile(r"(\d+)(?:\.0+)?")


def _restore_leading_zeros(value: Any) -> Any:
    """
    Célula numérica do Excel: 04252011000110 vira 4252011000110.
    Só dígitos puros (sem máscara) são completados: 9-10 => CPF, 12-13 => CNPJ.
    """
    m = _NUMERIC_CELL.fullmatch(str(value).strip())
    if not m:
        return value
    digits = m.group(1)
    if 9 <= len(digits) < 11:
        return digits.zfill(11)
    if 12 <= len(digits) < 14:
        return digits.zfill(14)
    return digits


def _cell(value: Any) -> Any:
    """Célula vazia (NaN/None/NA) vira "", para o modelo tratar como ausente."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return value

# ------------- Leitura -------------

def load_producers_table(path: Optional[str] = None) -> pd.DataFrame:
    """
    Lê a tabela de produtores (CSV/XLSX). Por padrão usa paths()["PRODUCERS_CSV"].
    Tudo como texto. No XLSX, um CPF/CNPJ salvo como número perde os zeros à
    esquerda; esses são recompostos em _restore_leading_zeros.
    """
    _path = path or paths()["PRODUCERS_CSV"]
    df = read_table(_path, dtype=str, keep_default_na=False)
    if df.empty:
        return pd.DataFrame(columns=list(COLUMN_ALIASES))
    df = _rename_columns(df)
    for col in COLUMN_ALIASES:
        if col not in df.columns:
            df[col] = ""
    if Path(_path).suffix.lower() in EXCEL_SUFFIXES:
        df["cpf_cnpj"] = df["cpf_cnpj"].map(_restore_leading_zeros)
    return df[list(COLUMN_ALIASES)].copy()

# ------------- Importação -------------

def _reason(exc: ValidationError) -> str:
    msgs = []
    for err in exc.errors():
        msg = str(err.get("msg", ""))
        msgs.append(msg.removeprefix("Value error, "))
    return "; ".join(msgs)


def import_producers(df: pd.DataFrame) -> ImportResult:
    """
    Valida cada linha com ProducerForm e rejeita documentos repetidos
    (comparados só pelos dígitos). Linhas são numeradas a partir de 1.
    """
    result = ImportResult()
    seen: Dict[str, int] = {}
    rejects: List[dict] = []

    for i, row in enumerate(df.to_dict(orient="records"), start=1):
        raw_doc = _cell(row.get("cpf_cnpj"))
        raw_name = _cell(row.get("name"))
        try:
            form = ProducerForm(cpf_cnpj=raw_doc, name=raw_name)
        except ValidationError as exc:
            reason = _reason(exc)
            log.warning(f"Linha {i} rejeitada: {reason}")
            rejects.append({"linha": i, "cpf_cnpj": raw_doc, "name": raw_name, "motivo": reason})
            continue

        if form.cpf_cnpj in seen:
            reason = f"CPF/CNPJ já cadastrado (linha {seen[form.cpf_cnpj]})"
            log.warning(f"Linha {i} rejeitada: {format_cpf_or_cnpj(form.cpf_cnpj)} {reason}")
            rejects.append({"linha": i, "cpf_cnpj": raw_doc, "name": raw_name, "motivo": reason})
            continue

        seen[form.cpf_cnpj] = i
        result.producers.append(Producer.from_form(form))

    if rejects:
        result.rejected = pd.DataFrame(rejects, columns=REJECT_COLUMNS)
    log.info(f"Produtores importados: {len(result.producers)} | rejeitados: {len(rejects)}")
    return result


def import_producers_file(path: Optional[str] = None, rejects_path: Optional[str] = None) -> ImportResult:
    """
    Lê + importa. Havendo rejeitados, grava em rejects_path; sem ele, ao lado
    da planilha informada ou em paths()["PRODUCERS_REJECTS_CSV"].
    """
    result = import_producers(load_producers_table(path))
    if not result.ok:
        if not rejects_path:
            rejects_path = rejects_path_for(path) if path else paths()["PRODUCERS_REJECTS_CSV"]
        out = write_csv(result.rejected, rejects_path)
        log.info(f"Rejeitados gravados em {out}")
    return result
