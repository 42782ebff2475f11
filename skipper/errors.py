"""Error taxonomy for sailing analysis requests."""


class SkipperError(Exception):
    """Fatal analysis error. The message is safe to show to the end user."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationMissing(SkipperError):
    """Route coordinates or provider credentials are absent."""

    status_code = 400


class RouteNotFound(ConfigurationMissing):
    status_code = 404


class UpstreamUnavailable(SkipperError):
    """Forecast provider unreachable or returned an unusable body."""

    status_code = 502


class NoData(SkipperError):
    """Forecast series contained no points."""

    status_code = 502


class AdvisoryUnavailable(Exception):
    """Text provider failed. Never fatal: the composer degrades to fallback text."""

    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason
