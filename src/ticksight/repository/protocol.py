"""Abstract protocol for file repository operations."""

from pathlib import Path
from typing import Protocol, Union


class FileRepositoryProtocol(Protocol):
    """Protocol defining file repository operations.

    Persistent state (the local sightings cache) goes through this interface
    so tests can substitute an in-memory implementation.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists."""
        ...

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        ...

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file, creating parent directories."""
        ...

    def delete_file(self, path: Union[str, Path]) -> None:
        """Delete a file."""
        ...
