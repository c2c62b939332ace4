"""Tests for the vehicle cost function."""

import pytest

from services.scoring import (
    OVER_CAPACITY_PENALTY,
    UNDER_CAPACITY_PENALTY,
    score_vehicle,
)
from tests.conftest import make_vehicle, make_zone


class TestScoreVehicle:
    def test_good_fit_has_no_penalty(self):
        zone = make_zone()
        vehicle = make_vehicle(capacity=40)
        cost, dist = score_vehicle(vehicle, zone, needed=30)
        assert dist == 0.0
        assert cost == 0.0

    def test_undersized_vehicle_penalised(self):
        cost, _ = score_vehicle(make_vehicle(capacity=20), make_zone(), needed=30)
        assert cost == UNDER_CAPACITY_PENALTY

    def test_grossly_oversized_vehicle_penalised(self):
        cost, _ = score_vehicle(make_vehicle(capacity=61), make_zone(), needed=30)
        assert cost == OVER_CAPACITY_PENALTY

    def test_exactly_double_is_a_good_fit(self):
        cost, _ = score_vehicle(make_vehicle(capacity=60), make_zone(), needed=30)
        assert cost == 0.0

    def test_exact_capacity_is_a_good_fit(self):
        cost, _ = score_vehicle(make_vehicle(capacity=30), make_zone(), needed=30)
        assert cost == 0.0

    def test_cost_adds_distance(self):
        zone = make_zone(lat=0.0, lon=0.0)
        vehicle = make_vehicle(capacity=10, lat=0.0, lon=1.0)
        cost, dist = score_vehicle(vehicle, zone, needed=50)
        assert dist == pytest.approx(111.19, abs=0.01)
        assert cost == pytest.approx(dist + UNDER_CAPACITY_PENALTY)
