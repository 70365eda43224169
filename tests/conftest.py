from __future__ import annotations
from pathlib import Path
import pytest
import pandas as pd

from agrocad.utils.config import reset_paths


# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def tmpdir_path(tmp_path: Path) -> Path:
    return tmp_path

@pytest.fixture
def producers_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"cpfCnpj": "123.456.789-09", "nome": "João Silva"},
        {"cpfCnpj": "987.654.321-00", "nome": "Maria Santos"},
        {"cpfCnpj": "12.345.678/0001-90", "nome": "Fazendas Reunidas Ltda"},  # DV errado
        {"cpfCnpj": "12345678909", "nome": "João Silva (dup)"},
        {"cpfCnpj": "11.222.333/0001-81", "nome": "Jo"},
        {"cpfCnpj": "11.222.333/0001-81", "nome": "Agropecuária Boa Vista"},
        {"cpfCnpj": "", "nome": "Sem Documento"},
    ])

@pytest.fixture
def tmp_producers_csv(tmpdir_path: Path, producers_df) -> str:
    out = tmpdir_path / "produtores.csv"
    producers_df.to_csv(out, index=False)
    return str(out)

@pytest.fixture
def tmp_producers_xlsx(tmpdir_path: Path, producers_df) -> str:
    out = tmpdir_path / "produtores.xlsx"
    with pd.ExcelWriter(out, engine="openpyxl") as xw:
        producers_df.to_excel(xw, index=False, sheet_name="produtores")
    return str(out)

# ---------- AJUSTES DE AMBIENTE PARA PATHS ----------

@pytest.fixture(autouse=True)
def isolated_paths(tmpdir_path: Path, monkeypatch):
    # Nada de ENV/overrides vazando entre testes
    for key in ("PRODUCERS_CSV", "PRODUCERS_REJECTS_CSV", "DATA_DIR"):
        monkeypatch.delenv(key, raising=False)
    reset_paths()
    yield
    reset_paths()
