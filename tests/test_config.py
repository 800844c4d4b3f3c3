import json
import pytest
from maxsat.config import SolverConfig
from maxsat.core.errors import ConfigError

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MAXSAT_ADAPTER", raising=False)
    monkeypatch.delenv("MAXSAT_CONFIG_PATH", raising=False)

def test_defaults():
    cfg = SolverConfig.from_env_or_file()
    assert cfg.adapter == "rc2"
    assert cfg.solver_name == "g3"
    assert cfg.verbose is False

def test_env_adapter(monkeypatch):
    monkeypatch.setenv("MAXSAT_ADAPTER", "rc2-stratified")
    assert SolverConfig.from_env_or_file().adapter == "rc2-stratified"

def test_config_file(monkeypatch, tmp_path):
    path = tmp_path / "solver.json"
    path.write_text(json.dumps({"adapter": "rc2", "solver_name": "m22", "card_encoding": "totalizer"}))
    monkeypatch.setenv("MAXSAT_CONFIG_PATH", str(path))
    cfg = SolverConfig.from_env_or_file()
    assert cfg.solver_name == "m22"
    assert cfg.card_encoding == "totalizer"
    assert cfg.pb_encoding == "best"

def test_missing_config_file(monkeypatch, tmp_path):
    monkeypatch.setenv("MAXSAT_CONFIG_PATH", str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError):
        SolverConfig.from_env_or_file()

def test_invalid_config_file(monkeypatch, tmp_path):
    path = tmp_path / "solver.json"
    path.write_text("{not json")
    monkeypatch.setenv("MAXSAT_CONFIG_PATH", str(path))
    with pytest.raises(ConfigError):
        SolverConfig.from_env_or_file()
