import logging
import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}.") from exc


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Environment variable {name} must name a logging level, got {level!r}.")
    return level


MAZE_DEFAULT_SIZE = _int_env("MAZE_DEFAULT_SIZE", 25)
MAZE_MAX_SIZE = _int_env("MAZE_MAX_SIZE", 100)
if MAZE_DEFAULT_SIZE < 1:
    raise RuntimeError(f"MAZE_DEFAULT_SIZE must be at least 1, got {MAZE_DEFAULT_SIZE}.")
if MAZE_MAX_SIZE < MAZE_DEFAULT_SIZE:
    raise RuntimeError(
        f"MAZE_MAX_SIZE ({MAZE_MAX_SIZE}) must not be below MAZE_DEFAULT_SIZE ({MAZE_DEFAULT_SIZE})."
    )
MAZE_CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("MAZE_CORS_ORIGINS", "*").split(",") if origin.strip()
]
MAZE_LOG_LEVEL = _log_level_env("MAZE_LOG_LEVEL", "INFO")
MAZE_HOST = os.getenv("MAZE_HOST", "0.0.0.0")
MAZE_PORT = _int_env("MAZE_PORT", 8080)

API_PREFIX = "/api/maze"
