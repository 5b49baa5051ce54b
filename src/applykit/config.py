"""Runtime settings for applykit."""

import json
import os
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

import annotated_types as at
from pydantic import BaseModel, Field

__all__ = ["Settings", "settings"]

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    PARALLEL: bool = Field(
        False, description="Evaluate element calls on a thread pool by default."
    )
    MAX_WORKERS: Optional[Annotated[int, at.Ge(1)]] = Field(
        None, description="Thread pool size when running in parallel."
    )

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        The file is named by ``APPLYKIT_CONFIG``. Environment variables
        ``APPLYKIT_LOG_LEVEL``, ``APPLYKIT_PARALLEL`` and ``APPLYKIT_MAX_WORKERS``
        override values read from the file.

        Raises:
            FileNotFoundError: If ``APPLYKIT_CONFIG`` points at a missing file.
        """
        values: Dict[str, Any] = {}

        config_path = os.getenv("APPLYKIT_CONFIG")
        if config_path:
            path = Path(config_path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"applykit config file not found at {path}")
            with open(path, "r") as f:
                values.update({key.upper(): value for key, value in json.load(f).items()})

        if (level := os.getenv("APPLYKIT_LOG_LEVEL")) is not None:
            values["LOG_LEVEL"] = level
        if (parallel := os.getenv("APPLYKIT_PARALLEL")) is not None:
            values["PARALLEL"] = parallel.strip().lower() in _TRUE_VALUES
        if (workers := os.getenv("APPLYKIT_MAX_WORKERS")) is not None:
            values["MAX_WORKERS"] = int(workers)

        return cls(**values)


settings = Settings.load()
