"""Error taxonomy for the weather view service.

Every error carries the HTTP status and the terse message shown to the
client. The detail passed to the constructor is only ever logged.
"""


class WeatherServiceError(Exception):
    """Base exception for weather service failures."""

    status_code = 500
    public_message = "Unexpected error"


class ConfigError(WeatherServiceError):
    """Raised when required configuration, such as the API key, is missing."""

    public_message = "The service is not configured correctly"


class LocationError(WeatherServiceError):
    """Raised when the client location could not be resolved."""

    status_code = 502
    public_message = "Your location could not be determined"


class DataContractError(WeatherServiceError):
    """Raised when a decoded weather payload breaks a shape invariant."""

    public_message = "Weather data was incomplete"


class UpstreamError(WeatherServiceError):
    """Raised when the external weather API fails."""

    status_code = 502
    public_message = "Weather lookup failed"


class UpstreamNetworkError(UpstreamError):
    """Raised when the weather API could not be reached."""
    pass


class UpstreamStatusError(UpstreamError):
    """Raised when the weather API answers with a non-2xx status."""

    def __init__(self, message: str, upstream_status: int):
        super().__init__(message)
        self.upstream_status = upstream_status


class UpstreamDecodeError(UpstreamError):
    """Raised when the weather API payload is not the expected JSON."""
    pass


class UpstreamTimeoutError(UpstreamError):
    """Raised when the weather API does not answer in time."""

    status_code = 504
    public_message = "Weather lookup timed out"
