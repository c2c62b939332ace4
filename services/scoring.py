from typing import Tuple

from models import Vehicle, Zone
from utils.geo import distance_km

UNDER_CAPACITY_PENALTY = 10.0
OVER_CAPACITY_PENALTY = 5.0
OVER_CAPACITY_MULTIPLIER = 2


def _capacity_penalty(capacity: int, needed: int) -> float:
    if capacity < needed:
        # another trip will be required
        return UNDER_CAPACITY_PENALTY
    if capacity > needed * OVER_CAPACITY_MULTIPLIER:
        return OVER_CAPACITY_PENALTY
    return 0.0


def score_vehicle(vehicle: Vehicle, zone: Zone, needed: int) -> Tuple[float, float]:
    """
    Cost of sending ``vehicle`` to ``zone`` while ``needed`` people remain there.
    Distance in km plus a flat penalty for an undersized or grossly oversized
    vehicle. Lower is better. Returns (cost, distance_km).
    """
    dist_km = distance_km(vehicle, zone)
    return dist_km + _capacity_penalty(vehicle.capacity, needed), dist_km
