import math

import pytest

from pairbody import InvalidArgument, MIN_SEPARATION, SimConfig


def test_defaults_match_constants():
    cfg = SimConfig().validate()
    assert cfg.G == 1.0
    assert cfg.body_count == 12
    assert cfg.body_radius == 0.2
    assert cfg.min_separation == MIN_SEPARATION == pytest.approx(0.4)
    assert cfg.spatial_bounds == (-50.0, 50.0)
    assert cfg.initial_velocity_range == 0.7
    assert cfg.default_time_scale == 4.0
    assert cfg.mass_choices == (2.0, 5.0, 7.0)
    assert cfg.force_pass == "pairwise"


def test_min_separation_follows_radius():
    assert SimConfig(body_radius=1.5).min_separation == 3.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"G": 0.0},
        {"G": math.nan},
        {"body_radius": -0.1},
        {"default_time_scale": math.inf},
        {"default_time_scale": 0.0},
        {"body_count": 0},
        {"spatial_bounds": (5.0, -5.0)},
        {"initial_velocity_range": -0.7},
        {"mass_choices": ()},
        {"mass_choices": (2.0, -5.0)},
        {"force_pass": "barnes_hut"},
    ],
)
def test_validate_rejects(kwargs):
    with pytest.raises(InvalidArgument):
        SimConfig(**kwargs).validate()


def test_copy_is_independent():
    cfg = SimConfig(G=2.0)
    other = cfg.copy()
    other.G = 3.0
    assert cfg.G == 2.0
    assert other.body_count == cfg.body_count


@pytest.mark.parametrize(
    "kwargs",
    [
        {"body_count": 2.5},
        {"spatial_bounds": (1.0,)},
        {"spatial_bounds": (-1.0, 0.0, 1.0)},
    ],
)
def test_validate_rejects_malformed_shapes(kwargs):
    with pytest.raises(InvalidArgument):
        SimConfig(**kwargs).validate()
