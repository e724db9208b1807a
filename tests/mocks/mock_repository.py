"""Mock file repository for testing."""

from pathlib import Path
from typing import Dict, List, Union


class MockFileRepository:
    """Mock implementation of FileRepositoryProtocol for testing.

    Allows tests to simulate file operations without touching the filesystem.
    Set ``fail_writes`` to make every write raise OSError.
    """

    def __init__(self) -> None:
        """Initialize mock repository with empty filesystem."""
        self.files: Dict[str, str] = {}
        self.writes: List[str] = []
        self.fail_writes = False

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file exists."""
        return str(path) in self.files

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        path_str = str(path)
        if path_str not in self.files:
            raise FileNotFoundError(f"File not found: {path}")
        return self.files[path_str]

    def write_text(
        self, path: Union[str, Path], content: str, encoding: str = "utf-8"
    ) -> None:
        """Write text to file."""
        if self.fail_writes:
            raise OSError(f"Read-only filesystem: {path}")
        self.files[str(path)] = content
        self.writes.append(str(path))

    def delete_file(self, path: Union[str, Path]) -> None:
        """Delete a file."""
        path_str = str(path)
        if path_str not in self.files:
            raise FileNotFoundError(f"File not found: {path}")
        del self.files[path_str]
