import logging
import time
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from api.config import get_settings
from api.schemas import ErrorResponse, TaskCreate, TaskOut, TaskUpdate
from api.validators import summarize_request_errors, task_id_param
from tracker import (
    StorageError,
    TaskNotFoundError,
    TaskService,
    TaskStore,
    TaskValidationError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

app = FastAPI(title="Tasks API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@lru_cache(maxsize=1)
def get_task_service() -> TaskService:
    """Return the process-wide service so every request shares one writer lock."""

    return TaskService(TaskStore(get_settings().data_file))


@app.middleware("http")
async def log_requests(request: Request, call_next):  # type: ignore[override]
    start_time = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start_time) * 1000
    logger.info(
        "%s %s -> %s in %.2f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed,
    )
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = summarize_request_errors(exc.errors())
    logger.info("Rejected request body on %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body", "errors": errors},
    )


@app.exception_handler(TaskValidationError)
async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on path %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "path": request.url.path},
    )


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the single-page task UI."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/api")
async def api_index() -> Dict[str, Any]:
    return {
        "message": "Welcome to the Tasks API",
        "endpoints": {
            "tasks": {
                "GET": "/api/tasks - Get all tasks",
                "POST": "/api/tasks - Create a new task",
                "GET_ONE": "/api/tasks/:id - Get a specific task",
                "PUT": "/api/tasks/:id - Update a task",
                "DELETE": "/api/tasks/:id - Delete a task",
            }
        },
    }


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}


@app.get(
    "/api/tasks",
    response_model=List[TaskOut],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def list_tasks(service: TaskService = Depends(get_task_service)) -> List[Dict[str, Any]]:
    """Return every task, newest first."""
    return [task.to_dict() for task in service.list_all()]


@app.get(
    "/api/tasks/{task_id}",
    response_model=TaskOut,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def get_task(
    task_id: str = Depends(task_id_param),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    return service.get_by_id(task_id).to_dict()


@app.post(
    "/api/tasks",
    response_model=TaskOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_task(body: TaskCreate, service: TaskService = Depends(get_task_service)) -> Dict[str, Any]:
    """Create a task from a title and an optional description."""
    return service.create(body.title, body.description).to_dict()


@app.put(
    "/api/tasks/{task_id}",
    response_model=TaskOut,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def update_task(
    body: TaskUpdate,
    task_id: str = Depends(task_id_param),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    """Apply a partial update; only the fields present in the body change."""
    return service.update(task_id, **body.supplied_changes()).to_dict()


@app.delete(
    "/api/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
def delete_task(
    task_id: str = Depends(task_id_param),
    service: TaskService = Depends(get_task_service),
) -> Response:
    service.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
