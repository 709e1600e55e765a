"""Exception hierarchy."""


class TideTimesError(Exception):
    """Base class for all tidetimes errors."""


class MalformedSeries(TideTimesError):
    """Sample timestamps are not strictly increasing."""


class TideServiceError(TideTimesError):
    """Tide predictions could not be obtained."""


class InvalidDateRange(TideServiceError):
    """Requested prediction window is empty or reversed."""


class MissingAPIKey(TideServiceError):
    """No WorldTides API key is configured."""


class TideAPIError(TideServiceError):
    """The tide API failed or returned something unusable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LocationSearchError(TideTimesError):
    """Place search failed."""
