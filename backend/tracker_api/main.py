"""FastAPI application entrypoint and HTTP controllers.

Controllers are intentionally thin: they accept requests, delegate to
`services.ResourceService`, and return JSON responses. One router is
built per registered resource; the optional routes are only mounted on
resources that have the matching capability.

Routes per resource (base path `/api/<key>`):
- GET    /              list (filters depend on the resource)
- GET    /{id}
- POST   /              create
- PUT    /{id}          full replace
- DELETE /{id}
- POST   /{id}/favorite toggle favorite
- DELETE /clear
- POST   /seed
- GET    /categories
- POST   /{id}/review   (system design)
- GET    /favorites     (system design, dsa)
- POST   /{id}/attempt  (dsa)
- GET    /needs-review  (dsa)
- POST   /{id}/resolve  (weak areas)
"""

from fastapi import APIRouter, FastAPI, Depends, Request
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services, schemas
from .errors import TrackerError
from .resources import RESOURCES, ResourceSpec
from .config import settings

app = FastAPI(title="Study Tracker API")
logger = logging.getLogger("tracker_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ALLOW_DEV_CORS else settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

create_db_and_tables()


def _request_log(request: Request, req_id: str, started: float, **extra) -> str:
    payload = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        **extra,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    return json.dumps(payload, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        if request.url.path.startswith("/api"):
            logger.exception("request_failed %s", _request_log(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith("/api"):
        logger.info("request_done %s", _request_log(request, req_id, started, status_code=response.status_code))
    return response


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    logger.info("tracker_error code=%s path=%s detail=%s", exc.code, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def build_resource_router(spec: ResourceSpec) -> APIRouter:
    """Create the router serving `spec`.

    Fixed paths (`/clear`, `/seed`, `/categories`, `/favorites`,
    `/needs-review`) are registered before the `/{item_id}` routes so
    they are matched first.
    """
    router = APIRouter(prefix=spec.path, tags=[spec.key])

    def service(db: Session = Depends(get_session)) -> services.ResourceService:
        return services.ResourceService(db, spec)

    @router.get("", response_model=List[spec.model])
    def list_items(filters: spec.filters = Depends(), svc: services.ResourceService = Depends(service)):
        """List rows matching the query filters, in the resource's order."""
        return svc.list(filters)

    @router.post("", status_code=201, response_model=spec.model)
    def create_item(payload: spec.schema, response: Response, svc: services.ResourceService = Depends(service)):
        """Create a row; the server assigns `id` and the creation stamp."""
        item = svc.create(payload)
        response.headers["Location"] = f"{spec.path}/{item.id}"
        return item

    if spec.clearable:
        @router.delete("/clear", response_model=schemas.ClearOut)
        def clear_items(svc: services.ResourceService = Depends(service)):
            """Delete every row and report how many were removed."""
            return svc.clear()

    if spec.seedable:
        @router.post("/seed", response_model=schemas.SeedOut)
        def seed_items(svc: services.ResourceService = Depends(service)):
            """Load the fixed demonstration records."""
            return svc.seed()

    if spec.categories:
        @router.get("/categories", response_model=List[str])
        def list_categories(svc: services.ResourceService = Depends(service)):
            return svc.categories()

    if spec.favorites_view:
        @router.get("/favorites", response_model=List[spec.model])
        def list_favorites(svc: services.ResourceService = Depends(service)):
            """Favorited rows ordered by category then title."""
            return svc.favorites()

    if spec.attempts:
        @router.get("/needs-review", response_model=List[spec.model])
        def list_needs_review(svc: services.ResourceService = Depends(service)):
            """Rows whose next review date has passed, earliest first."""
            return svc.needs_review()

    @router.get("/{item_id}", response_model=spec.model)
    def get_item(item_id: int, svc: services.ResourceService = Depends(service)):
        return svc.get(item_id)

    @router.put("/{item_id}", status_code=204)
    def update_item(item_id: int, payload: spec.schema, svc: services.ResourceService = Depends(service)):
        """Replace the stored row; the body `id` must equal the path id."""
        svc.update(item_id, payload)
        return Response(status_code=204)

    @router.delete("/{item_id}", status_code=204)
    def delete_item(item_id: int, svc: services.ResourceService = Depends(service)):
        svc.delete(item_id)
        return Response(status_code=204)

    if spec.favorites:
        @router.post("/{item_id}/favorite", response_model=spec.model)
        def toggle_favorite(item_id: int, svc: services.ResourceService = Depends(service)):
            return svc.toggle_favorite(item_id)

    if spec.reviews:
        @router.post("/{item_id}/review", response_model=spec.model)
        def record_review(item_id: int, review: schemas.ReviewIn, svc: services.ResourceService = Depends(service)):
            """Record a review: confidence and status always, notes only when non-empty."""
            return svc.record_review(item_id, review)

    if spec.attempts:
        @router.post("/{item_id}/attempt", response_model=spec.model)
        def record_attempt(item_id: int, attempt: schemas.AttemptIn, svc: services.ResourceService = Depends(service)):
            return svc.record_attempt(item_id, attempt)

    if spec.resolves:
        @router.post("/{item_id}/resolve", response_model=spec.model)
        def resolve_item(item_id: int, svc: services.ResourceService = Depends(service)):
            return svc.resolve(item_id)

    return router


for _spec in RESOURCES.values():
    app.include_router(build_resource_router(_spec))


@app.get("/api/resources", response_model=List[schemas.ResourceInfo])
def list_resources():
    """Describe every mounted resource and its optional operations."""
    return [
        schemas.ResourceInfo(
            key=spec.key,
            label=spec.label,
            path=spec.path,
            favorites=spec.favorites,
            clearable=spec.clearable,
            categories=spec.categories,
            seedable=spec.seedable,
            seed_mode=spec.seed_mode if spec.seedable else None,
            reviews=spec.reviews,
            favorites_view=spec.favorites_view,
            attempts=spec.attempts,
            resolves=spec.resolves,
        )
        for spec in RESOURCES.values()
    ]


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
