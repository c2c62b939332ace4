from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models import Assignment, Status, Vehicle, Zone
from services.scoring import score_vehicle
from utils.geo import format_eta
import logging

logger = logging.getLogger(__name__)


class VehiclePool:
    """
    Vehicles still free during one planning run. Each vehicle can be taken
    once. Remaining vehicles keep their input order so a linear scan breaks
    score ties in favour of the earliest vehicle.
    """

    def __init__(self, vehicles: Iterable[Vehicle]):
        self._vehicles: List[Vehicle] = list(vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __bool__(self) -> bool:
        return bool(self._vehicles)

    def __iter__(self):
        return iter(self._vehicles)

    def best_for(self, zone: Zone, needed: int) -> Optional[Tuple[int, float]]:
        """Index and distance of the lowest-cost vehicle, or None when empty."""
        best_index: Optional[int] = None
        best_cost = float("inf")
        best_distance = 0.0
        for i, vehicle in enumerate(self._vehicles):
            cost, dist_km = score_vehicle(vehicle, zone, needed)
            if cost < best_cost:
                best_index, best_cost, best_distance = i, cost, dist_km
        if best_index is None:
            return None
        return best_index, best_distance

    def take(self, index: int) -> Vehicle:
        return self._vehicles.pop(index)


def remaining_from_statuses(statuses: Iterable[Status]) -> Dict[str, int]:
    return {s.zone_id: s.remaining_people for s in statuses}


def _zones_by_urgency(zones: Iterable[Zone]) -> List[Zone]:
    # sorted() is stable: equal urgency keeps input order
    return sorted(zones, key=lambda z: z.urgency_level, reverse=True)


def generate_plan(
    zones: List[Zone],
    vehicles: List[Vehicle],
    remaining: Mapping[str, int],
) -> List[Assignment]:
    """
    Greedy allocation of vehicles to zones:
    - Zones are served most urgent first.
    - Each zone repeatedly takes the cheapest free vehicle (see score_vehicle)
      until its remaining need is covered or the pool runs dry.
    - A vehicle serves at most one zone per run.
    A zone missing from ``remaining`` is treated as needing its full population.
    """
    pool = VehiclePool(vehicles)
    assignments: List[Assignment] = []

    for zone in _zones_by_urgency(zones):
        needed = remaining.get(zone.zone_id, zone.number_of_people)
        if needed <= 0:
            continue

        while needed > 0 and pool:
            index, dist_km = pool.best_for(zone, needed)
            vehicle = pool.take(index)

            carry = min(vehicle.capacity, needed)
            needed -= carry
            eta = format_eta(dist_km, vehicle.speed)
            assignments.append(
                Assignment(
                    zone_id=zone.zone_id,
                    vehicle_id=vehicle.vehicle_id,
                    eta=eta,
                    number_of_people=carry,
                )
            )
            logger.debug(
                "assign vehicle=%s zone=%s dist_km=%.3f speed_kmph=%.1f carry=%d eta=%s",
                vehicle.vehicle_id,
                zone.zone_id,
                dist_km,
                vehicle.speed,
                carry,
                eta,
            )

        if needed > 0:
            logger.warning("Zone %s left with %d people unserved: no vehicles available", zone.zone_id, needed)

    return assignments
