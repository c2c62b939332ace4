from typing import Dict, Generic, List, Optional, TypeVar

from models import Assignment

T = TypeVar("T")


class InMemoryStore(Generic[T]):
    def __init__(self, key_field: str, items: Optional[List[T]] = None):
        self._key_field = key_field
        self._items: Dict[str, T] = {}
        for item in items or []:
            self._items[getattr(item, key_field)] = item

    async def list_all(self) -> List[T]:
        return list(self._items.values())

    async def get(self, key: str) -> Optional[T]:
        return self._items.get(key)

    async def put(self, item: T) -> None:
        self._items[getattr(item, self._key_field)] = item

    async def clear(self) -> None:
        self._items.clear()


class InMemoryPlanStore:
    def __init__(self):
        self._plan: Optional[List[Assignment]] = None

    async def get_plan(self) -> Optional[List[Assignment]]:
        return None if self._plan is None else list(self._plan)

    async def save_plan(self, assignments: List[Assignment]) -> None:
        self._plan = list(assignments)

    async def clear(self) -> None:
        self._plan = None
