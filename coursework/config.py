"""
Simulation settings and loading them from JSON configuration files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.entities import DEFAULT_WORK_DELAY, DEFAULT_GRADING_DELAY
from .core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StudentSettings(BaseModel):
    full_name: str = Field(..., min_length=1)
    email: str


def _default_students() -> List[StudentSettings]:
    return [
        StudentSettings(full_name="Alice Smith", email="alice@example.com"),
        StudentSettings(full_name="Bob Jones", email="bob@example.com"),
    ]


class SimulationSettings(BaseModel):
    """Tunables for a simulation run."""
    work_delay: float = Field(DEFAULT_WORK_DELAY, ge=0)
    grading_delay: float = Field(DEFAULT_GRADING_DELAY, ge=0)
    reminder_delay: float = Field(0.2, ge=0)
    seed: Optional[int] = None
    log_level: str = "WARNING"
    students: List[StudentSettings] = Field(default_factory=_default_students)
    assignments: List[str] = Field(default_factory=lambda: ["A1", "A2"])

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


def build_settings(data: Optional[Dict[str, Any]] = None, **overrides) -> SimulationSettings:
    """Validate a settings mapping, applying non-None overrides on top."""
    merged = dict(data or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return SimulationSettings(**merged)
    except ValidationError as e:
        raise ConfigurationError("Invalid simulation settings",
                                 error_code="invalid_settings",
                                 details={'errors': e.errors()}) from e


def load_settings(path: Union[str, Path], **overrides) -> SimulationSettings:
    """Load settings from a JSON file."""
    path = Path(path)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}",
                                 error_code="unreadable_config") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}",
                                 error_code="malformed_config") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a JSON object",
                                 error_code="malformed_config")

    logger.info("Loaded configuration from %s", path)
    return build_settings(data, **overrides)
