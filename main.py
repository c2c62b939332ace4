from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from models import Assignment, EvacuationUpdate, Status, Vehicle, Zone
from repositories import InMemoryPlanStore, InMemoryStore, JsonFileStore, JsonPlanStore
from services.errors import ConflictError, NotFoundError
from services.evacuation_service import EvacuationService
from utils.data_loader import load_seed

logger = logging.getLogger(__name__)

router = APIRouter()


def build_service(settings: Settings) -> EvacuationService:
    if settings.STORAGE == "json":
        data_dir = settings.DATA_DIR
        return EvacuationService(
            zones=JsonFileStore(data_dir / "zones.json", Zone, "zone_id"),
            vehicles=JsonFileStore(data_dir / "vehicles.json", Vehicle, "vehicle_id"),
            statuses=JsonFileStore(data_dir / "statuses.json", Status, "zone_id"),
            plans=JsonPlanStore(data_dir / "plan.json"),
        )
    return EvacuationService(
        zones=InMemoryStore("zone_id"),
        vehicles=InMemoryStore("vehicle_id"),
        statuses=InMemoryStore("zone_id"),
        plans=InMemoryPlanStore(),
    )


async def seed_service(service: EvacuationService, settings: Settings) -> None:
    zones, vehicles = load_seed(settings.SEED_DIR)
    for zone in zones:
        if await service.zones.get(zone.zone_id) is None:
            await service.add_zone(zone)
    for vehicle in vehicles:
        await service.add_vehicle(vehicle)
    logger.info("Seeded %d zones and %d vehicles from %s", len(zones), len(vehicles), settings.SEED_DIR)


def _service(request: Request) -> EvacuationService:
    return request.app.state.service


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/api/evacuation-zones", status_code=201)
async def add_zone(zone: Zone, request: Request) -> Zone:
    return await _service(request).add_zone(zone)


@router.post("/api/vehicles", status_code=201)
async def add_vehicle(vehicle: Vehicle, request: Request) -> Vehicle:
    return await _service(request).add_vehicle(vehicle)


@router.post("/api/evacuations/plan")
async def generate_plan(request: Request) -> List[Assignment]:
    return await _service(request).generate_plan()


@router.get("/api/evacuations/plan")
async def get_plan(request: Request) -> List[Assignment]:
    return await _service(request).get_plan()


@router.get("/api/evacuations/status")
async def list_statuses(request: Request) -> List[Status]:
    return await _service(request).list_statuses()


@router.put("/api/evacuations/update")
async def update_status(update: EvacuationUpdate, request: Request) -> Status:
    return await _service(request).advance_status(update.zone_id, update.vehicle_id, update.evacuees_moved)


@router.delete("/api/evacuations/clear", status_code=204)
async def clear_all(request: Request) -> Response:
    await _service(request).clear_all()
    return Response(status_code=204)


async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Validation Error", "details": jsonable_encoder(exc.errors())})


async def _not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _conflict(request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"error": str(exc)})


async def _internal_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) or "An unexpected error occurred."
    return JSONResponse(status_code=500, content={"error": "Internal Server Error", "message": message})


def create_app(service: Optional[EvacuationService] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    service = service or build_service(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.SEED_DIR is not None:
            await seed_service(service, settings)
        logger.info("Evacuation planner ready (storage=%s)", settings.STORAGE)
        yield

    app = FastAPI(title="Evacuation Planner", lifespan=lifespan)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(Exception, _internal_error)
    return app


logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
