import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from models import Assignment, Plan

T = TypeVar("T", bound=BaseModel)


def _write_atomic(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=path.name, suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(payload, f, indent=2)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise


class JsonFileStore(Generic[T]):
    """
    Keyed collection persisted as one JSON object ``{id: record}`` per file.
    Every write rewrites the file through a temp file + rename.
    """

    def __init__(self, path: Path, model: Type[T], key_field: str):
        self.path = Path(path)
        self._model = model
        self._key_field = key_field

    def _read(self) -> Dict[str, T]:
        if not self.path.exists():
            return {}
        with open(self.path) as f:
            data = json.load(f)
        return {key: self._model(**item) for key, item in data.items()}

    def _write(self, items: Dict[str, T]) -> None:
        _write_atomic(self.path, {key: item.model_dump() for key, item in items.items()})

    async def list_all(self) -> List[T]:
        return list(self._read().values())

    async def get(self, key: str) -> Optional[T]:
        return self._read().get(key)

    async def put(self, item: T) -> None:
        items = self._read()
        items[getattr(item, self._key_field)] = item
        self._write(items)

    async def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


class JsonPlanStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    async def get_plan(self) -> Optional[List[Assignment]]:
        if not self.path.exists():
            return None
        with open(self.path) as f:
            return Plan(**json.load(f)).assignments

    async def save_plan(self, assignments: List[Assignment]) -> None:
        _write_atomic(self.path, Plan(assignments=assignments).model_dump())

    async def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
