"""
Custom Exception Classes for Sighting Retrieval and Submission

This module defines the exception hierarchy used across ticksight. None of
these errors is fatal to a session: fetch and format errors are recovered by
the retry/fallback path, submission errors by the local cache, and validation
errors are reported back to the user for correction.
"""

from typing import Dict, Optional


class TickSightError(Exception):
    """
    Base class for all ticksight errors.

    Attributes:
        message (str): Explanation of the error
    """

    def __init__(self, message: str = "A ticksight error occurred.") -> None:
        super().__init__(message)
        self.message = message


class FetchError(TickSightError):
    """
    Exception raised when sightings cannot be retrieved from the remote service.

    Covers network failures and non-success HTTP statuses.

    Attributes:
        message (str): Explanation of the error
        url (Optional[str]): The URL that was requested
        status (Optional[int]): HTTP status code, if a response was received
    """

    def __init__(
        self,
        message: str = "Failed to fetch sightings.",
        url: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class FormatError(FetchError):
    """
    Exception raised when the remote service returns an unexpected JSON shape.

    Handled on the same retry/fallback path as FetchError.
    """

    def __init__(
        self,
        message: str = "Invalid data format from API.",
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message, url=url)


class ValidationError(TickSightError):
    """
    Exception raised when a sighting report form fails validation.

    Attributes:
        message (str): Summary banner text
        errors (Dict[str, str]): Field name -> inline error message
    """

    def __init__(
        self,
        errors: Dict[str, str],
        message: str = "Please correct the highlighted fields.",
    ) -> None:
        super().__init__(message)
        self.errors = dict(errors)


class SubmissionError(TickSightError):
    """Exception raised when the remote service rejects or cannot receive a report."""

    def __init__(self, message: str = "API submission failed") -> None:
        super().__init__(message)


class InvalidDateError(TickSightError):
    """
    Exception raised by strict severity classification for an unparseable date.

    Attributes:
        value: The date value that could not be parsed
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid sighting date: {value!r}")
        self.value = value
