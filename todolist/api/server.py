"""FastAPI server for the todolist HTTP API.

Each app built by create_app owns one TaskStore and one TaskService,
reachable from handlers through app.state.
"""

from contextlib import asynccontextmanager
from datetime import date
from typing import Callable

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from todolist import __version__
from todolist.api.http.error_helpers import error_body, request_validation_detail
from todolist.api.http.task_methods import (
    create_task_response,
    delete_task_response,
    list_tasks_response,
)
from todolist.config.schema import Config
from todolist.services.errors import ServiceError
from todolist.services.tasks.mapping import TaskCreateRequest, TaskView
from todolist.services.tasks.task_service import TaskService
from todolist.storage.task_store import InMemoryTaskStore, TaskStore
from todolist.utils.exceptions import classify_exception, sanitize_error_message


def get_task_service(request: Request) -> TaskService:
    """Dependency: the TaskService owned by the running app."""
    return request.app.state.task_service


# API router: all JSON API routes under /api
api_router = APIRouter()


@api_router.post("/tasks", response_model=TaskView, status_code=201)
def create_task(body: TaskCreateRequest, service: TaskService = Depends(get_task_service)):
    """Create a task; 400 on blank/duplicate name or bad end date."""
    return create_task_response(service=service, body=body)


@api_router.get("/tasks", response_model=list[TaskView])
def list_tasks(
    contains_inactive: bool = Query(False, alias="containsInactive"),
    service: TaskService = Depends(get_task_service),
):
    """List active tasks, or every task when containsInactive=true."""
    return list_tasks_response(service=service, contains_inactive=contains_inactive)


@api_router.delete("/tasks/{name}", status_code=204)
def delete_task(name: str, service: TaskService = Depends(get_task_service)):
    """Delete a task by name; 400 if blank or unknown."""
    return delete_task_response(service=service, name=name)


async def service_error_handler(request: Request, exc: ServiceError):
    logger.info("{} {} rejected [{}]: {}", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=400, content=error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    detail = request_validation_detail(exc.errors())
    logger.info("{} {} invalid request: {}", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content=error_body(detail))


async def generic_exception_handler(request: Request, exc: Exception):
    code, _ = classify_exception(exc)
    sanitized = sanitize_error_message(str(exc))
    logger.exception(f"Unhandled exception [{code}]: {sanitized}")
    return JSONResponse(status_code=500, content=error_body("An unexpected error occurred"))


def create_app(
    config: Config | None = None,
    *,
    store: TaskStore | None = None,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    """Create the FastAPI application with its own store and service."""
    config = config or Config()
    store = store if store is not None else InMemoryTaskStore(today=today)
    service = TaskService(store, config.todo.max_end_date, today=today)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting todolist API server (max end date {})", config.todo.max_end_date)
        yield
        logger.info("todolist API server stopped")

    app = FastAPI(
        title="todolist API",
        description="Create, list and delete named to-do tasks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.task_service = service

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"ok": True}

    app.include_router(api_router, prefix="/api")
    return app


def run_server(config: Config, log_level: str = "warning"):
    """Run the API server."""
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=10,
        log_level=log_level,
    )
