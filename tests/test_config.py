import pytest

from ca_extrapolate.config import RunConfig, build_run_config, load_run_config, save_run_config
from ca_extrapolate.errors import ConfigError


def test_defaults():
    cfg = build_run_config()
    assert cfg.generations == [20, 50_000_000_000]
    assert cfg.extrapolation.confidence == 1
    assert cfg.direct_limit == 1_000


def test_load_with_overrides(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("name: sample\ngenerations: [5, 10]\nextrapolation:\n  confidence: 2\n")
    cfg = load_run_config(path, overrides={"generations": [7], "log_level": "DEBUG"})
    assert cfg.name == "sample"
    assert cfg.generations == [7]
    assert cfg.log_level == "DEBUG"
    assert cfg.extrapolation.confidence == 2


def test_scalar_generations(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("generations: 50000000000\n")
    assert load_run_config(path).generations == [50_000_000_000]


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("")
    assert load_run_config(path) == RunConfig()


def test_save_round_trip(tmp_path):
    cfg = build_run_config({"name": "roundtrip", "extrapolation": {"confidence": 3}})
    path = tmp_path / "nested" / "run.yaml"
    save_run_config(cfg, path)
    assert load_run_config(path) == cfg


def test_unknown_keys(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("extrapolation:\n  patience: 2\n")
    with pytest.raises(ConfigError, match="patience"):
        load_run_config(path)
    with pytest.raises(ConfigError, match="width"):
        build_run_config({"width": 5})


def test_non_mapping(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_run_config(path)


def test_negative_generations():
    with pytest.raises(ConfigError):
        build_run_config({"generations": [10, -1]})


def test_unknown_log_level():
    with pytest.raises(ConfigError, match="log_level"):
        build_run_config({"log_level": "verbose"})
    assert build_run_config({"log_level": "debug"}).log_level == "debug"
