import math

EARTH_RADIUS_KM = 6371.0
UNKNOWN_ETA = "Unknown"


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    R = EARTH_RADIUS_KM
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return R * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a, b) -> float:
    """Great-circle distance between two objects exposing ``lat``/``lon``."""
    return haversine(a.lat, a.lon, b.lat, b.lon)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_eta(distance: float, speed_kmh: float) -> str:
    """
    Human readable travel time, e.g. "45 minutes", "1 hour", "2 hours 1 minute".
    Returns "Unknown" for a vehicle that cannot move.
    """
    if speed_kmh <= 0:
        return UNKNOWN_ETA

    # half-up on the total, not banker's rounding
    total_minutes = int(math.floor(distance / speed_kmh * 60 + 0.5))
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0:
        return _plural(minutes, "minute")
    if minutes == 0:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"
