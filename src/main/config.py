from functools import lru_cache
import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

logger = logging.getLogger(__name__)

DEFAULT_DEMOS = ["singleton", "factory_method", "prototype"]


class AppConfig(BaseModel):
    PROJECT_NAME: str = "creational-patterns"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    TESTING: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_LEVEL_FILE: str = "WARNING"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    DEMOS: list[str] = Field(default_factory=lambda: list(DEFAULT_DEMOS))

    model_config = ConfigDict(extra="ignore")

    @field_validator("DEMOS", mode="before")
    @classmethod
    def parse_demos_list(cls, v: Any) -> list[str]:
        if isinstance(v, list):
            return [str(item).strip() for item in v if str(item).strip()]
        if not isinstance(v, str):
            return v
        if v.strip().startswith("[") and v.strip().endswith("]"):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(item) for item in parsed]
            except json.JSONDecodeError:
                pass
        sep = "," if "," in v else ";"
        return [item.strip() for item in v.split(sep) if item.strip()]

    @field_validator("LOG_LEVEL", "LOG_LEVEL_FILE")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseModel):
    _project_root: Path | None = PrivateAttr(default=None)

    app: AppConfig

    model_config = ConfigDict(extra="ignore")

    @property
    def project_root(self) -> Path:
        if self._project_root is None:
            self._project_root = find_project_root_robust()
        return self._project_root


@lru_cache
def get_settings() -> Config:
    """
    Cached settings factory. Override in tests via monkeypatching or cache_clear().
    """
    env_filename = ".env.test" if os.getenv("TESTING") == "true" else ".env"
    env_file_values = dotenv_values(env_filename)
    merged_env: dict[str, Any] = {
        k: v
        for k, v in {**env_file_values, **dict(os.environ)}.items()
        if v is not None
    }

    return Config(app=AppConfig(**merged_env))


config = get_settings()


# ----- Config utils ----- #
def find_project_root_robust(
    start_path: Path | None = None, max_depth: int = 10
) -> Path:
    """
    Walk up from start_path and return the directory carrying the most
    project markers.

    Args:
        start_path: Starting path to search from (defaults to current working directory)
        max_depth: Maximum number of parent directories to traverse

    Returns:
        Path: The project root directory if found, otherwise the starting path
    """
    if start_path is None:
        start_path = Path.cwd()

    markers = {
        ".git": 100,
        "pyproject.toml": 90,
        "setup.cfg": 75,
        "requirements": 70,
        "README.md": 50,
        "Makefile": 60,
    }

    best_match = None
    best_score = 0

    current_path = start_path
    depth = 0

    while current_path != current_path.parent and depth < max_depth:
        score = sum(
            weight
            for marker, weight in markers.items()
            if (current_path / marker).exists()
        )

        if score > best_score:
            best_score = score
            best_match = current_path

        current_path = current_path.parent
        depth += 1

    if best_match and best_score > 0:
        logger.info(
            "Project root found: %s (confidence score: %s)", best_match, best_score
        )
        return best_match

    logger.error(
        "No project root found within %s parent directories from %s",
        max_depth,
        start_path,
    )
    return start_path
