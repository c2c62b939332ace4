import json
from pathlib import Path
from typing import List

from models import Zone, Vehicle


def load_zones(path: str) -> List[Zone]:
    with open(path) as f:
        data = json.load(f)
    return [Zone(**zone) for zone in data["zones"]]


def load_vehicles(path: str) -> List[Vehicle]:
    with open(path) as f:
        data = json.load(f)
    return [Vehicle(**vehicle) for vehicle in data["vehicles"]]


def load_seed(seed_dir: Path):
    """Zones and vehicles from ``seed_dir``; a missing file yields an empty list."""
    zones_path = Path(seed_dir) / "zones.json"
    vehicles_path = Path(seed_dir) / "vehicles.json"
    zones = load_zones(str(zones_path)) if zones_path.exists() else []
    vehicles = load_vehicles(str(vehicles_path)) if vehicles_path.exists() else []
    return zones, vehicles
