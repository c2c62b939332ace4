from repositories.base import KeyedStore, PlanStore
from repositories.memory import InMemoryStore, InMemoryPlanStore
from repositories.json_store import JsonFileStore, JsonPlanStore
