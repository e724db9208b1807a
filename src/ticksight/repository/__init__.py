"""File repository layer for dependency injection."""

from ticksight.repository.local import LocalFileRepository
from ticksight.repository.protocol import FileRepositoryProtocol

__all__ = [
    "FileRepositoryProtocol",
    "LocalFileRepository",
]
