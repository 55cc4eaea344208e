import pytest

from milligrad.nn import TrainConfig, build_network


def test_defaults():
    cfg = TrainConfig()
    assert cfg.epochs == 100
    assert cfg.learning_rate == 0.05
    assert cfg.batch_size is None
    assert cfg.log_every == 5
    assert cfg.seed is None


@pytest.mark.parametrize("kwargs", [
    {"epochs": -1},
    {"learning_rate": 0.0},
    {"learning_rate": float("nan")},
    {"batch_size": -2},
    {"log_every": -5},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        TrainConfig(**kwargs)


def test_from_dict_ignores_unknown_keys():
    cfg = TrainConfig.from_dict({"epochs": 10, "seed": 3, "comment": "ignored"})
    assert cfg.epochs == 10
    assert cfg.seed == 3


def test_build_network_is_seeded():
    cfg = TrainConfig(seed=123)
    a = build_network(3, [4, 1], cfg)
    b = build_network(3, [4, 1], cfg)
    assert [float(p.val) for p in a.params()] == [float(p.val) for p in b.params()]
