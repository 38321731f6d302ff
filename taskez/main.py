import os
import traceback
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from taskez.config import settings
from taskez.database import create_tables, engine
from taskez.errors import TaskEzError
from taskez.routers.auth import router as auth_router
from taskez.routers.tasks import router as tasks_router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true"
}


def log_error(text: str):
    with open("error.log", "a") as f:
        f.write(f"\n[{datetime.now()}] {text}\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
        print(f"[STARTUP {os.getpid()}] Tables ready.")

    yield

    await engine.dispose()


app = FastAPI(
    lifespan=lifespan,
    title="Task Ez API",
    description="Personal task management: accounts, tasks, completion and soft delete",
    version="1.0.0",
)

# Enable CORS for the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskEzError)
async def task_ez_error_handler(request: Request, exc: TaskEzError):
    if exc.status_code >= 500:
        cause = exc.__cause__ or exc
        log_error(f"{exc.status_code} on {request.url.path}: {type(cause).__name__}: {cause}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid input: {field} {first.get('msg', '')}".strip()
    else:
        message = "Invalid input"
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message},
    )


#Global exception handler to ensure CORS headers on failure
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_msg = traceback.format_exc()
    print(f"CRITICAL ERROR: {error_msg}")

    log_error(f"500 Error:\n{error_msg}")

    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Server error"},
        headers=CORS_HEADERS,
    )

app.include_router(auth_router)
app.include_router(tasks_router)

@app.get("/")
def root():
    return {"success": True, "message": "Task Ez Web Server!"}
