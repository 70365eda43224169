from __future__ import annotations
from pathlib import Path
from typing import Any
import os

import pandas as pd

# -------------------- Diretórios & Paths --------------------

def project_root() -> Path:
    # agrocad/data_access/storage.py => sobe 2 níveis
    return Path(__file__).resolve().parents[2]

def data_dir() -> Path:
    # Permite sobrescrever via env DATA_DIR
    base = os.environ.get("DATA_DIR")
    return Path(base).resolve() if base else project_root() / "data"

def resolve(path_or_env: str) -> Path:
    """
    Aceita um path literal ou o nome de uma env var. Se existir arquivo relativo ao projeto, usa.
    Caso contrário, tenta em data/processed e data/.
    """
    if path_or_env.isupper() and path_or_env in os.environ:
        return Path(os.environ[path_or_env]).resolve()

    p = Path(path_or_env)
    if p.exists():
        return p.resolve()

    cand = [data_dir() / "processed" / path_or_env, data_dir() / path_or_env, project_root() / path_or_env]
    for c in cand:
        if c.exists():
            return c.resolve()
    return p  # pode não existir ainda

# -------------------- Leitura --------------------

def read_table(path: str, **kwargs: Any) -> pd.DataFrame:
    """CSV ou XLSX conforme o sufixo; arquivo ausente => DataFrame vazio."""
    p = resolve(path)
    if not p.exists():
        return pd.DataFrame()
    if p.suffix.lower() in {".xlsx", ".xls"}:
        df = pd.read_excel(p, sheet_name=0, engine="openpyxl", **kwargs)
    else:
        df = pd.read_csv(p, **kwargs)
    df.columns = [str(c).strip() for c in df.columns]
    return df

# -------------------- Escrita --------------------

def write_csv(df: pd.DataFrame, path: str, index: bool = False) -> Path:
    p = resolve(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=index)
    return p
