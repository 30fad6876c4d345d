"""Error taxonomy and HTTP status mapping."""

RATE_LIMIT_MARKERS = ("429", "quota", "Too Many Requests")
SERVICE_DISABLED_MARKER = "SERVICE_DISABLED"
TIMEOUT_MARKER = "timeout"

GENERIC_ERROR_MESSAGE = "Internal Server error"


class FitplanError(Exception):
    """Base class for errors raised by fitplan."""

    status_code = 500
    error_type = "unknown"


class ValidationError(FitplanError):
    """Missing or malformed caller input."""

    status_code = 400
    error_type = "validation"


class AuthError(FitplanError):
    """Missing, invalid or expired bearer token."""

    status_code = 401
    error_type = "unauthorized"


class NotFoundError(FitplanError):
    """Unknown user or plan."""

    status_code = 404
    error_type = "not_found"


class UpstreamTransientError(FitplanError):
    """The AI provider rate-limited the call. Retried before surfacing."""

    status_code = 429
    error_type = "rate_limit"


class UpstreamConfigError(FitplanError):
    """The AI provider is disabled or misconfigured for this project."""

    status_code = 503
    error_type = "service_disabled"


class GenerationTimeoutError(FitplanError):
    """Plan generation did not finish before the deadline."""

    status_code = 504
    error_type = "timeout"

    def __init__(self, message: str = "Request timeout - processing is taking too long"):
        super().__init__(message)


class PlanParseError(FitplanError):
    """The AI provider returned text that is not a well-formed JSON object."""


def is_rate_limit_error(exc: BaseException) -> bool:
    """Whether an error textually indicates a rate-limit or quota condition."""
    if isinstance(exc, UpstreamTransientError):
        return True
    message = str(exc)
    return any(marker in message for marker in RATE_LIMIT_MARKERS)


def classify_error(exc: BaseException) -> tuple[int, str, str]:
    """Map an exception to ``(status_code, error_type, message)``.

    Typed errors win; otherwise the message is inspected the same way the
    provider's failures are reported. Server-side failures get generic
    messages, caller-side ones keep their own.
    """
    message = str(exc)

    if isinstance(exc, GenerationTimeoutError) or TIMEOUT_MARKER in message:
        return (
            504,
            "timeout",
            "Request timed out. The fitness plan generation is taking too long. Please try again.",
        )
    if isinstance(exc, UpstreamConfigError) or SERVICE_DISABLED_MARKER in message:
        return 503, "service_disabled", "AI service is not properly configured. Please contact support."
    if is_rate_limit_error(exc):
        return 429, "rate_limit", "Service is temporarily busy. Please try again in a few moments."
    if isinstance(exc, FitplanError) and exc.status_code < 500:
        return exc.status_code, exc.error_type, message
    return 500, "unknown", GENERIC_ERROR_MESSAGE
