"""Shared fixtures and factories for the test suite."""

import asyncio

import pytest

from models import Status, Vehicle, Zone
from repositories import InMemoryPlanStore, InMemoryStore
from services.evacuation_service import EvacuationService


def make_zone(zone_id="Z1", lat=13.08, lon=80.27, people=100, urgency=3):
    return Zone(zone_id=zone_id, lat=lat, lon=lon, number_of_people=people, urgency_level=urgency)


def make_vehicle(vehicle_id="V1", capacity=40, lat=13.08, lon=80.27, speed=40.0, type="bus"):
    return Vehicle(vehicle_id=vehicle_id, capacity=capacity, type=type, lat=lat, lon=lon, speed=speed)


def make_status(zone_id="Z1", total=0, remaining=100):
    return Status(zone_id=zone_id, total_evacuated=total, remaining_people=remaining)


class SuspendingStore(InMemoryStore):
    """In-memory store that yields to the event loop on every call and logs it."""

    def __init__(self, key_field, items=None, events=None, name="store"):
        super().__init__(key_field, items)
        self.events = events if events is not None else []
        self.name = name

    async def list_all(self):
        self.events.append(f"{self.name}.list_all")
        await asyncio.sleep(0)
        return await super().list_all()

    async def get(self, key):
        self.events.append(f"{self.name}.get")
        await asyncio.sleep(0)
        return await super().get(key)

    async def put(self, item):
        self.events.append(f"{self.name}.put")
        await asyncio.sleep(0)
        await super().put(item)

    async def clear(self):
        self.events.append(f"{self.name}.clear")
        await asyncio.sleep(0)
        await super().clear()


def make_service(zones=(), vehicles=(), statuses=()):
    return EvacuationService(
        zones=InMemoryStore("zone_id", list(zones)),
        vehicles=InMemoryStore("vehicle_id", list(vehicles)),
        statuses=InMemoryStore("zone_id", list(statuses)),
        plans=InMemoryPlanStore(),
    )


@pytest.fixture
def service():
    return make_service()
