"""
Failures of the /search pipeline. Each error knows the HTTP status it maps
to and the message that is safe to show the caller.
"""


class SearchError(Exception):
    status_code = 500
    default_message = "Internal server error while searching RadioFM"

    def __init__(self, message=None, detail=None):
        self.message = message or self.default_message
        # Operator-facing detail, printed but never returned to the caller
        self.detail = detail
        super().__init__(self.message)


class ValidationError(SearchError):
    """The query parameter is missing or blank. No upstream call is made."""
    status_code = 400
    default_message = "Missing required query parameter: query"


class TransportError(SearchError):
    """RadioFM could not be reached, timed out, or answered with a non-2xx status."""
    status_code = 500
    default_message = "Internal server error while searching RadioFM"


class UpstreamShapeError(SearchError):
    """The body is empty, not JSON, or has no nested 'data' object."""
    status_code = 502
    default_message = "Unexpected response from RadioFM API"


class UpstreamApplicationError(SearchError):
    """RadioFM answered with a non-zero ErrorCode."""
    status_code = 502
    default_message = "RadioFM API error"
