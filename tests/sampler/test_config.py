import json

import pytest

from distributions import InvalidConfigurationError, NormalDistribution
from sampler import DemoConfig, load_demo_config


def _write(tmp_path, obj, name="demo.json"):
    p = tmp_path / name
    p.write_text(obj if isinstance(obj, str) else json.dumps(obj), encoding="utf-8")
    return str(p)


def test_defaults_validate_and_describe_standard_normal_run():
    cfg = DemoConfig()
    cfg.validate()
    assert cfg.as_dict() == {"count": 10, "mean": 0.0, "std_dev": 1.0, "seed": None}
    assert cfg.distribution() == NormalDistribution()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"count": -1},
        {"count": 2.0},
        {"count": True},
        {"std_dev": 0.0},
        {"std_dev": -2.0},
        {"mean": "x"},
        {"seed": -5},
        {"seed": "7"},
    ],
)
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(InvalidConfigurationError):
        DemoConfig(**kwargs).validate()


def test_from_dict_partial_and_unknown_keys():
    cfg = DemoConfig.from_dict({"count": 3, "seed": 42})
    assert (cfg.count, cfg.mean, cfg.std_dev, cfg.seed) == (3, 0.0, 1.0, 42)
    with pytest.raises(InvalidConfigurationError):
        DemoConfig.from_dict({"samples": 3})
    with pytest.raises(InvalidConfigurationError):
        DemoConfig.from_dict([1, 2])


def test_load_demo_config_roundtrip(tmp_path):
    path = _write(tmp_path, {"count": 5, "mean": -1.0, "std_dev": 0.5, "seed": 8})
    cfg = load_demo_config(path)
    assert cfg == DemoConfig(count=5, mean=-1.0, std_dev=0.5, seed=8)


def test_load_demo_config_errors(tmp_path):
    with pytest.raises(InvalidConfigurationError):
        load_demo_config(str(tmp_path / "missing.json"))
    with pytest.raises(InvalidConfigurationError):
        load_demo_config(_write(tmp_path, "{not json", name="bad.json"))
    with pytest.raises(InvalidConfigurationError):
        load_demo_config(_write(tmp_path, {"std_dev": 0}, name="zero.json"))
    with pytest.raises(InvalidConfigurationError):
        load_demo_config("")


def test_load_demo_config_unreadable_inputs(tmp_path):
    p = tmp_path / "bad_utf8.json"
    p.write_bytes(b"\xff\xfe{}")
    with pytest.raises(InvalidConfigurationError):
        load_demo_config(str(p))
    with pytest.raises(InvalidConfigurationError):
        load_demo_config(str(tmp_path))


def test_as_dict_normalizes_distribution_parameters():
    d = DemoConfig(count=3, mean=2, std_dev=1, seed=4).as_dict()
    assert d == {"count": 3, "mean": 2.0, "std_dev": 1.0, "seed": 4}
    assert isinstance(d["mean"], float) and isinstance(d["std_dev"], float)
