from models import Status, Zone


def initial_status(zone: Zone) -> Status:
    return Status(zone_id=zone.zone_id, total_evacuated=0, remaining_people=zone.number_of_people)


def advance_status(status: Status, zone: Zone, evacuees_moved: int) -> Status:
    """
    Record ``evacuees_moved`` more people leaving ``zone``.
    The evacuated total is clamped to the zone's original population, so
    remaining never goes negative. Returns a new Status.
    """
    total = min(status.total_evacuated + evacuees_moved, zone.number_of_people)
    total = max(total, 0)
    return status.model_copy(
        update={"total_evacuated": total, "remaining_people": zone.number_of_people - total}
    )
