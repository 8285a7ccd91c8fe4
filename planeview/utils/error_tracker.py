# planeview/utils/error_tracker.py
"""Collect diagnostics emitted while drawing projected triangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from planeview.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Group diagnostic messages by key and log them as they arrive.

    Warnings (e.g. coplanarity) and errors (e.g. unsolvable projections) share
    the same store; ``level`` only controls how each record is logged.
    """

    context: str = "planeview"
    errors: dict[str, list[str]] = field(default_factory=dict)

    def record(self, key: str, message: str, *, level: str = "error") -> None:
        logger = get_logger(self.context)
        getattr(logger, level, logger.error)(f"{key}: {message}")
        self.errors.setdefault(key, []).append(message)

    def count(self, key: str | None = None) -> int:
        if key is not None:
            return len(self.errors.get(key, []))
        return sum(len(messages) for messages in self.errors.values())

    def clear(self) -> None:
        self.errors.clear()

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.debug("No diagnostics recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return {key: list(messages) for key, messages in self.errors.items()}


__all__ = ["ErrorTracker"]
