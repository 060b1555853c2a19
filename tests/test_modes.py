import math

import numpy as np
import pytest

from standingwaves.config import ModeConfig, DEFAULT_CONFIG, MIN_FREQUENCY, MAX_FREQUENCY, SPEED_OF_SOUND
from standingwaves.geometry import Room, Position, Geometry, plane_distances
from standingwaves.modes import StandingWave, standing_waves_for_direction, compute_wave_field
from standingwaves.trig import abs_cos

COARSE = ModeConfig(angle_step=10)


def test_stops_once_above_max_frequency():
    geometry = Geometry(Room(5, 10, 4), Position(2, 3, 1))
    # wall to wall is 5 m: 34.3 Hz per order, order 15 would be 514.5 Hz
    waves = standing_waves_for_direction(geometry, 0, 0, ModeConfig(max_order=1000))
    assert len(waves) == 14
    assert np.abs(waves[0].frequency - 34.3) <= 1e-9
    assert np.abs(waves[-1].frequency - 480.2) <= 1e-9
    assert all(w.frequency <= MAX_FREQUENCY for w in waves)


def test_skips_orders_below_min_frequency():
    geometry = Geometry(Room(20, 30, 25), Position(10, 15, 12.5))
    # wall to wall is 20 m: 8.575 Hz per order, orders 1 and 2 are too low
    waves = standing_waves_for_direction(geometry, 0, 0)
    assert len(waves) == DEFAULT_CONFIG.max_order - 2
    assert np.abs(waves[0].frequency - 3 * 8.575) <= 1e-9
    assert all(w.frequency >= MIN_FREQUENCY for w in waves)


def test_frequencies_increase_with_order():
    geometry = Geometry(Room(3.5, 5.6, 2.5), Position(1.4, 1.6, 1.05))
    waves = standing_waves_for_direction(geometry, 30, -20)
    f = [w.frequency for w in waves]
    assert f == sorted(f)


def test_amplitude_and_weight_axis_aligned():
    geometry = Geometry(Room(5, 10, 4), Position(2, 3, 1))
    first = standing_waves_for_direction(geometry, 0, 0)[0]
    # listener 2 m into a 5 m cavity, half a wavelength of 10 m
    assert np.abs(first.amplitude - abs(math.sin(2 * math.pi * 2 / 10))) <= 1e-12
    assert np.abs(first.weight - (1 / 5) * 1.1 * 1.1) <= 1e-12


def test_diagonal_direction_keeps_floor_weight():
    geometry = Geometry(Room(5, 10, 4), Position(2.5, 5, 2))
    waves = standing_waves_for_direction(geometry, 45, 0)
    assert waves
    wall_to_wall = 2 * 2.5 / abs_cos(45)
    assert np.abs(waves[0].weight - (1 / wall_to_wall) * 0.1 * 1.1) <= 1e-12


def test_short_cavity_is_not_diffusion_boosted():
    # wall to wall below 1 m must not push weight above the angle factor
    geometry = Geometry(Room(0.6, 10, 4), Position(0.3, 5, 2))
    waves = standing_waves_for_direction(geometry, 0, 0)
    assert waves
    assert all(np.abs(w.weight - 1.1 * 1.1) <= 1e-12 for w in waves)


def test_infinite_cavity_yields_nothing():
    # right wall is never reached, so the cavity along this direction is endless
    corridor = Geometry(Room(math.inf, 10, 4), Position(2, 3, 1))
    assert math.isinf(plane_distances(corridor, 0, 0).right)
    assert standing_waves_for_direction(corridor, 0, 0) == []


def test_position_in_corner_does_not_raise():
    corner = Geometry(Room(5, 10, 4), Position(0, 0, 0))
    # zero wall-to-wall distance: infinite frequency, enumeration stops at once
    assert standing_waves_for_direction(corner, 45, 0) == []
    waves = compute_wave_field(corner, COARSE)
    assert all(MIN_FREQUENCY <= w.frequency <= MAX_FREQUENCY for w in waves)


def test_two_globally_nearest_planes_bound_the_cavity():
    # near-cubic room: left/right beat front/back by only a few centimetres
    geometry = Geometry(Room(4.0, 4.1, 3.9), Position(2.0, 2.05, 1.95))
    waves = standing_waves_for_direction(geometry, 45, 0)
    wall_to_wall = 4.0 / abs_cos(45)
    assert np.abs(waves[0].frequency - SPEED_OF_SOUND * 0.5 / wall_to_wall) <= 1e-9


def test_nearest_planes_need_not_be_opposite():
    # close to the floor looking slightly up: floor and a side wall are nearest
    geometry = Geometry(Room(4.0, 4.1, 3.9), Position(2.0, 2.05, 0.4))
    d = plane_distances(geometry, 0, 30)
    assert d.below < d.left < d.above
    waves = standing_waves_for_direction(geometry, 0, 30)
    wall_to_wall = d.below + d.left
    expected = [SPEED_OF_SOUND * (n / 2) / wall_to_wall for n in range(1, 51)]
    expected = [f for f in expected if f <= MAX_FREQUENCY and f >= MIN_FREQUENCY]
    assert len(waves) == len(expected)
    assert np.all(np.abs(np.array([w.frequency for w in waves]) - expected) <= 1e-9)


def test_wave_field_is_sweep_concatenation():
    geometry = Geometry(Room(3.5, 5.6, 2.5), Position(1.4, 1.6, 1.05))
    cfg = ModeConfig(angle_step=90)
    expected = []
    for alpha in (-90, 0, 90):
        for beta in (-90, 0, 90):
            expected.extend(standing_waves_for_direction(geometry, alpha, beta, cfg))
    assert compute_wave_field(geometry, cfg) == expected


def test_wave_field_values_in_range():
    geometry = Geometry(Room(3.5, 5.6, 2.5), Position(1.4, 1.6, 1.05))
    waves = compute_wave_field(geometry)
    assert len(waves) > 0
    assert all(isinstance(w, StandingWave) for w in waves)
    assert all(MIN_FREQUENCY <= w.frequency <= MAX_FREQUENCY for w in waves)
    assert all(0.0 <= w.amplitude <= 1.0 for w in waves)
    assert all(w.weight > 0 for w in waves)


def test_symmetric_relative_to_center_of_room():
    room = Room(6, 10, 4)
    geometry1 = Geometry(room, Position(room.width / 2 - 1, room.depth / 2 - 1, room.height / 2 - 1))
    geometry2 = Geometry(room, Position(room.width / 2 + 1, room.depth / 2 + 1, room.height / 2 + 1))
    assert compute_wave_field(geometry1) == compute_wave_field(geometry2)


@pytest.mark.parametrize("axis", ["left", "front", "floor"])
def test_symmetric_per_axis(axis):
    room = Room(6, 10, 4)
    center = {"left": 3.0, "front": 5.0, "floor": 2.0}
    minus = dict(center)
    plus = dict(center)
    minus[axis] -= 0.75
    plus[axis] += 0.75
    waves1 = compute_wave_field(Geometry(room, Position(**minus)), COARSE)
    waves2 = compute_wave_field(Geometry(room, Position(**plus)), COARSE)
    assert waves1 == waves2


def test_config_validation():
    with pytest.raises(ValueError):
        ModeConfig(angle_step=7)
    with pytest.raises(ValueError):
        ModeConfig(min_frequency=500, max_frequency=20)
    with pytest.raises(ValueError):
        ModeConfig(max_order=0)
    with pytest.raises(ValueError):
        ModeConfig(bucket_width=0)
    assert ModeConfig(*DEFAULT_CONFIG.key()) == DEFAULT_CONFIG
