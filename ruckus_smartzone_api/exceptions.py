from typing import Any, List, Optional


class SmartZoneControllerError(Exception):
    """Base exception for SmartZoneController errors."""

    pass


class SmartZoneAuthenticationError(SmartZoneControllerError):
    """Raised when there is no valid service ticket or logging in fails."""

    pass


class SmartZoneAPIError(SmartZoneControllerError):
    """Raised when an API call to the SmartZone controller fails."""

    pass


class SmartZoneDataError(SmartZoneControllerError):
    """Raised when there is an error parsing data from the SmartZone controller."""

    pass


class SmartZonePaginationError(SmartZoneControllerError):
    """
    Raised when a page fails while enumerating a paginated endpoint.

    Items decoded from the pages that succeeded before the failure are kept in
    ``partial_results``; the underlying error is available as ``__cause__``.
    """

    def __init__(self, message: str, partial_results: Optional[List[Any]] = None):
        super().__init__(message)
        self.partial_results = partial_results if partial_results is not None else []
