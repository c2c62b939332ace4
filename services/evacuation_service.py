import asyncio
from typing import List

from models import Assignment, Status, Vehicle, Zone
from repositories.base import KeyedStore, PlanStore
from services.errors import ConflictError, NotFoundError, ZONE_ALREADY_EXISTS, ZONE_STATUS_NOT_FOUND
from services.planner import generate_plan, remaining_from_statuses
from services.status import advance_status, initial_status
import logging

logger = logging.getLogger(__name__)


class EvacuationService:
    """
    Entry point used by the HTTP layer. Storage is injected so tests and
    deployments can swap backends freely.

    Plan generation is serialized per instance so two concurrent runs cannot
    hand out the same vehicle. Zone registration, status updates and the bulk
    clear share one write lock, so a clear never lands between the read and
    the write of an update. Run a single instance per backing store to keep
    these guarantees.
    """

    def __init__(
        self,
        zones: KeyedStore[Zone],
        vehicles: KeyedStore[Vehicle],
        statuses: KeyedStore[Status],
        plans: PlanStore,
    ):
        self.zones = zones
        self.vehicles = vehicles
        self.statuses = statuses
        self.plans = plans
        self._plan_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    async def add_zone(self, zone: Zone) -> Zone:
        async with self._write_lock:
            if await self.zones.get(zone.zone_id) is not None:
                raise ConflictError(ZONE_ALREADY_EXISTS)
            await self.zones.put(zone)
            await self.statuses.put(initial_status(zone))
        logger.info("Added evacuation zone %s (people=%d urgency=%d)", zone.zone_id, zone.number_of_people, zone.urgency_level)
        return zone

    async def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        await self.vehicles.put(vehicle)
        logger.info("Added vehicle %s (capacity=%d)", vehicle.vehicle_id, vehicle.capacity)
        return vehicle

    async def generate_plan(self) -> List[Assignment]:
        async with self._plan_lock:
            zones, vehicles, statuses = await asyncio.gather(
                self.zones.list_all(),
                self.vehicles.list_all(),
                self.statuses.list_all(),
            )
            assignments = generate_plan(zones, vehicles, remaining_from_statuses(statuses))
            await self.plans.save_plan(assignments)
        logger.info("Generated evacuation plan: %d assignments for %d zones", len(assignments), len(zones))
        return assignments

    async def get_plan(self) -> List[Assignment]:
        return await self.plans.get_plan() or []

    async def list_statuses(self) -> List[Status]:
        return await self.statuses.list_all()

    async def advance_status(self, zone_id: str, vehicle_id: str, evacuees_moved: int) -> Status:
        async with self._write_lock:
            status, zone = await asyncio.gather(self.statuses.get(zone_id), self.zones.get(zone_id))
            if status is None or zone is None:
                raise NotFoundError(ZONE_STATUS_NOT_FOUND)
            updated = advance_status(status, zone, evacuees_moved)
            await self.statuses.put(updated)
        logger.info(
            "Updated evacuation status zone=%s vehicle=%s moved=%d total=%d remaining=%d",
            zone_id,
            vehicle_id,
            evacuees_moved,
            updated.total_evacuated,
            updated.remaining_people,
        )
        return updated

    async def clear_all(self) -> None:
        async with self._plan_lock, self._write_lock:
            await asyncio.gather(
                self.zones.clear(),
                self.vehicles.clear(),
                self.statuses.clear(),
                self.plans.clear(),
            )
        logger.info("Cleared all evacuation data")
