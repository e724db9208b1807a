"""Local filesystem implementation of FileRepositoryProtocol."""

import os
import tempfile
from pathlib import Path
from typing import Union


class LocalFileRepository:
    """Implementation of FileRepositoryProtocol using local filesystem."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists."""
        return Path(path).exists()

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file atomically (temp file + rename)."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=p.parent, prefix=f".{p.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=encoding) as f:
                f.write(content)
            os.replace(tmp_name, p)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete_file(self, path: Union[str, Path]) -> None:
        """Delete a file."""
        Path(path).unlink()
