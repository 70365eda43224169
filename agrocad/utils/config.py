from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

PRODUCERS_CSV_DEFAULT = "data/processed/produtores.csv"
REJECTS_SUFFIX = "_rejeitados"

# Chaves reconhecidas. PRODUCERS_REJECTS_CSV, se não configurada,
# é derivada de PRODUCERS_CSV (ver rejects_path_for).
KEYS = ("PRODUCERS_CSV", "PRODUCERS_REJECTS_CSV")

# overrides em tempo de execução (set_paths)
_runtime_overrides: Dict[str, str] = {}

def _coerce(p: str) -> str:
    # normaliza separador e expande ~ e vars
    return str(Path(os.path.expandvars(os.path.expanduser(p))))

def _configured(key: str) -> Optional[str]:
    """ENV tem prioridade; depois override de set_paths(); senão None."""
    env_val = os.environ.get(key)
    if env_val:
        return _coerce(env_val)
    return _runtime_overrides.get(key)

def rejects_path_for(source: str) -> str:
    """
    Arquivo de rejeitados ao lado da planilha importada:
    data/processed/produtores.xlsx -> data/processed/produtores_rejeitados.csv
    """
    src = Path(source)
    return str(src.with_name(f"{src.stem}{REJECTS_SUFFIX}.csv"))

@lru_cache(maxsize=1)
def paths() -> Dict[str, str]:
    """
    Retorna o dicionário de paths do cadastro:
    - PRODUCERS_CSV: ENV > set_paths() > default do projeto
    - PRODUCERS_REJECTS_CSV: ENV > set_paths() > derivado de PRODUCERS_CSV
    """
    producers = _configured("PRODUCERS_CSV") or _coerce(PRODUCERS_CSV_DEFAULT)
    rejects = _configured("PRODUCERS_REJECTS_CSV") or rejects_path_for(producers)
    return {"PRODUCERS_CSV": producers, "PRODUCERS_REJECTS_CSV": rejects}

def set_paths(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de paths().
    """
    unknown = set(overrides or {}) - set(KEYS)
    if unknown:
        raise KeyError(f"Chaves desconhecidas: {', '.join(sorted(unknown))}. Chaves válidas: {', '.join(KEYS)}")
    _runtime_overrides.update({k: _coerce(v) for k, v in (overrides or {}).items()})
    paths.cache_clear()

def reset_paths() -> None:
    _runtime_overrides.clear()
    paths.cache_clear()

def path(key: str) -> str:
    """Atalho: paths()[key] com KeyError amigável."""
    p = paths()
    if key not in p:
        raise KeyError(f"Path '{key}' não configurado. Chaves válidas: {', '.join(sorted(p.keys()))}")
    return p[key]
