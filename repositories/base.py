from typing import List, Optional, Protocol, TypeVar

from models import Assignment

T = TypeVar("T")


class KeyedStore(Protocol[T]):
    """Collection of records addressed by a string id (zones, vehicles, statuses)."""

    async def list_all(self) -> List[T]: ...

    async def get(self, key: str) -> Optional[T]: ...

    async def put(self, item: T) -> None: ...

    async def clear(self) -> None: ...


class PlanStore(Protocol):
    async def get_plan(self) -> Optional[List[Assignment]]: ...

    async def save_plan(self, assignments: List[Assignment]) -> None:
        """Replace the stored plan in full."""
        ...

    async def clear(self) -> None: ...
