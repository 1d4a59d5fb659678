import time
from uuid import uuid4

from fastapi import FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import API_PREFIX, MAZE_CORS_ORIGINS, MAZE_DEFAULT_SIZE, MAZE_HOST, MAZE_PORT
from .engine import generate_maze_request, solve_maze_request
from .logging_utils import get_logger, log_event
from .models import HealthResponse, MazePayload, SolveResponse, SolveStepsResponse


app = FastAPI(title="Maze Solver Service")
logger = get_logger()

app.add_middleware(
    CORSMiddleware,
    allow_origins=MAZE_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _request_id(request: Request, response: Response) -> str:
    request_id = request.headers.get("X-Request-Id") or uuid4().hex[:8]
    response.headers["X-Request-Id"] = request_id
    return request_id


@app.get(f"{API_PREFIX}/health", response_model=HealthResponse)
def health(request: Request, response: Response):
    request_id = _request_id(request, response)
    log_event(logger, "INFO", "health.check", request_id=request_id)
    return {"status": "UP"}


@app.get(f"{API_PREFIX}/generate", response_model=MazePayload)
def generate_maze(
    request: Request,
    response: Response,
    size: int = Query(MAZE_DEFAULT_SIZE),
    seed: int | None = Query(None),
):
    request_id = _request_id(request, response)
    started_at = time.perf_counter()
    log_event(logger, "INFO", "generate.request.received", request_id=request_id, size=size, seed=seed)
    return generate_maze_request(size, seed, logger, request_id, started_at)


@app.post(f"{API_PREFIX}/solve", response_model=SolveResponse)
def solve_maze(payload: MazePayload, request: Request, response: Response):
    request_id = _request_id(request, response)
    started_at = time.perf_counter()
    log_event(
        logger,
        "INFO",
        "solve.request.received",
        request_id=request_id,
        grid_rows=len(payload.grid),
        grid_cols=len(payload.grid[0]) if payload.grid else 0,
        steps=False,
    )
    return solve_maze_request(payload, logger, request_id, started_at, include_steps=False)


@app.post(f"{API_PREFIX}/solve-with-steps", response_model=SolveStepsResponse)
def solve_maze_with_steps(payload: MazePayload, request: Request, response: Response):
    request_id = _request_id(request, response)
    started_at = time.perf_counter()
    log_event(
        logger,
        "INFO",
        "solve.request.received",
        request_id=request_id,
        grid_rows=len(payload.grid),
        grid_cols=len(payload.grid[0]) if payload.grid else 0,
        steps=True,
    )
    return solve_maze_request(payload, logger, request_id, started_at, include_steps=True)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=MAZE_HOST, port=MAZE_PORT)
