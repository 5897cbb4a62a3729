"""Structured event logging for color engine operations."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from palette_core.config import get_settings


class EventType(str, Enum):
    """Engine operations that emit an event."""

    VARIATIONS_GENERATE = "color.variations.generate"
    HARMONY_GENERATE = "harmony.generate"
    CONTRAST_EVALUATE = "accessibility.contrast"
    PALETTE_ENRICH = "palette.enrich"


class EngineEvent(BaseModel):
    """Structured log entry for one engine operation."""

    timestamp: datetime
    event_type: EventType
    event_data: dict[str, Any]
    duration_ms: int | None = None


class EngineLogger:
    """Emits engine events as JSON lines on the ``palette_core.events`` logger.

    Events go out at DEBUG level and the package only carries a
    ``NullHandler``, so nothing is printed unless the host application
    configures logging.
    """

    def __init__(self, name: str = "palette_core.events") -> None:
        self.logger = logging.getLogger(name)

    @property
    def enabled(self) -> bool:
        return get_settings().log_events and self.logger.isEnabledFor(logging.DEBUG)

    def log(
        self,
        event_type: EventType,
        event_data: dict[str, Any] | None = None,
        duration_ms: int | None = None,
    ) -> EngineEvent | None:
        """Log an engine event. Returns the entry, or None when disabled."""
        if not self.enabled:
            return None

        entry = EngineEvent(
            timestamp=datetime.now(timezone.utc),
            event_type=event_type,
            event_data=event_data or {},
            duration_ms=duration_ms,
        )
        self.logger.debug(entry.model_dump_json())
        return entry

    def log_harmony(self, harmony: str, base_hex: str, hexes: list[str]) -> None:
        """Log a generated harmony with its member colors."""
        self.log(
            event_type=EventType.HARMONY_GENERATE,
            event_data={"harmony": harmony, "base": base_hex, "colors": hexes},
        )

    def log_contrast(self, first: str, second: str, ratio: float) -> None:
        """Log a contrast computation."""
        self.log(
            event_type=EventType.CONTRAST_EVALUATE,
            event_data={"first": first, "second": second, "ratio": round(ratio, 4)},
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts embedding the engine."""
    settings = get_settings()
    logging.basicConfig(
        level=level or ("DEBUG" if settings.debug else settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Global engine logger instance
engine_logger = EngineLogger()
