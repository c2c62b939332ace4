ZONE_ALREADY_EXISTS = "Zone already exists"
ZONE_STATUS_NOT_FOUND = "Zone status not found"


class EvacuationError(Exception):
    """Base class for failures the caller can act on."""


class NotFoundError(EvacuationError):
    pass


class ConflictError(EvacuationError):
    pass
