# liftlog/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from liftlog.errors import NotFoundOrUnauthorized, Unauthorized, ValidationError
from liftlog.routers.auth import router as auth_router
from liftlog.routers.dashboard import router as dashboard_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.templates import router as templates_router
from liftlog.db import SessionLocal  # for healthz DB check
from liftlog.settings import get_settings
from liftlog.views import StaleViewTracker

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="Liftlog API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "dashboard", "description": "Page loaders for the dashboard and workout pages"},
        {"name": "workouts", "description": "Workout mutations"},
        {"name": "exercises", "description": "Exercises and their sets"},
        {"name": "templates", "description": "Exercise reference data"},
    ],
)
app.state.views = StaleViewTracker()


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = get_settings().ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(ValidationError)
async def validation_failed(_request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": "validation failed", "issues": [i.as_dict() for i in exc.issues]},
    )

@app.exception_handler(NotFoundOrUnauthorized)
async def not_found(_request: Request, exc: NotFoundOrUnauthorized):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(Unauthorized)
async def unauthorized(_request: Request, exc: Unauthorized):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.detail},
        headers={"WWW-Authenticate": "Bearer"},
    )

@app.get("/")
def root():
    return {"ok": True, "name": "Liftlog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(workouts_router)
app.include_router(exercises_router)
app.include_router(templates_router)
