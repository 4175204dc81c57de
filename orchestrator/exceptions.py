"""Exceptions raised by the orchestrator services."""

from typing import Optional

__all__ = [
    "OrchestratorError",
    "NotFoundError",
    "DuplicateContainerError",
    "ChartExtractionError",
]


class OrchestratorError(Exception):
    """Generic base exception used for this package."""


class NotFoundError(OrchestratorError):
    """Raised when a requested row does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateContainerError(OrchestratorError):
    """Raised when a Create is audited for a container that is already tracked."""

    def __init__(self) -> None:
        super().__init__("container already present in the provided pod")


class ChartExtractionError(OrchestratorError):
    """Raised when a stored chart archive cannot be materialized on disk."""

    def __init__(self, message: str, temporary_folder: Optional[str] = None) -> None:
        super().__init__(message)
        self.temporary_folder = temporary_folder
