from __future__ import annotations
import pytest

from agrocad.utils.config import path, paths, rejects_path_for, set_paths


def test_defaults_present():
    p = paths()
    assert p["PRODUCERS_CSV"].endswith("produtores.csv")
    assert p["PRODUCERS_REJECTS_CSV"].endswith("produtores_rejeitados.csv")

def test_env_beats_runtime_override(monkeypatch, tmpdir_path):
    set_paths({"PRODUCERS_CSV": str(tmpdir_path / "override.csv")})
    assert path("PRODUCERS_CSV").endswith("override.csv")

    monkeypatch.setenv("PRODUCERS_CSV", str(tmpdir_path / "env.csv"))
    set_paths({})  # invalida o cache
    assert path("PRODUCERS_CSV").endswith("env.csv")

def test_rejects_path_follows_producers_file(tmpdir_path):
    set_paths({"PRODUCERS_CSV": str(tmpdir_path / "safra_2023.xlsx")})
    assert path("PRODUCERS_REJECTS_CSV") == str(tmpdir_path / "safra_2023_rejeitados.csv")

    set_paths({"PRODUCERS_REJECTS_CSV": str(tmpdir_path / "erros.csv")})
    assert path("PRODUCERS_REJECTS_CSV") == str(tmpdir_path / "erros.csv")

def test_rejects_path_for():
    assert rejects_path_for("data/produtores.csv").endswith("produtores_rejeitados.csv")
    assert rejects_path_for("x/cadastro.xlsx").endswith("cadastro_rejeitados.csv")

def test_unknown_key_raises():
    with pytest.raises(KeyError) as exc:
        path("NAO_EXISTE")
    assert "PRODUCERS_CSV" in str(exc.value)
    with pytest.raises(KeyError):
        set_paths({"NAO_EXISTE": "x.csv"})
