# services/base.py
"""
Base class and utilities for all services.
"""

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from ticksight.repository.protocol import FileRepositoryProtocol

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Result object returned by service operations.

    Provides a consistent interface for views to handle operation outcomes.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        data: T = None,
        message: str = None,
        warnings: List[str] = None,
        **metadata,
    ) -> "ServiceResult[T]":
        """Create a successful result."""
        return cls(
            success=True,
            data=data,
            message=message,
            warnings=warnings or [],
            metadata=metadata,
        )

    @classmethod
    def fail(cls, error: str, warnings: List[str] = None, **metadata) -> "ServiceResult[T]":
        """Create a failed result."""
        return cls(
            success=False,
            error=error,
            warnings=warnings or [],
            metadata=metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        result = {
            "success": self.success,
            "message": self.message,
            "error": self.error,
            "warnings": self.warnings,
        }

        if self.data is not None:
            if hasattr(self.data, "to_dict"):
                result["data"] = self.data.to_dict()
            elif is_dataclass(self.data):
                result["data"] = asdict(self.data)
            elif isinstance(self.data, list):
                result["data"] = [
                    item.to_dict() if hasattr(item, "to_dict") else item for item in self.data
                ]
            elif isinstance(self.data, (dict, str, int, float, bool)):
                result["data"] = self.data
            else:
                result["data"] = str(self.data)
        else:
            result["data"] = None

        if self.metadata:
            result["metadata"] = self.metadata

        return result


class BaseService:
    """
    Base class for all services.

    Holds the optional file repository used by services that persist state.
    """

    def __init__(self, file_repository: Optional["FileRepositoryProtocol"] = None) -> None:
        """Initialize the service.

        Args:
            file_repository: Optional file repository for dependency injection.
                           Required for services that persist state, not needed
                           for API/in-memory services.
        """
        self.file_repository = file_repository
