"""Error hierarchy for menu resolution.

Every error is terminal: nothing in the pipeline retries or falls back to a
partial result. The CLI turns any MensarError into a single
``mensar: <message>`` line and a non-zero exit status.
"""


class MensarError(Exception):
    """Base exception for all mensar errors."""

    pass


class FacilityNotFound(MensarError):
    """No facility name contains the user's query.

    The user should retry with ``--list`` or a looser query.
    """

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"could not find facility `{query}`")


class NoDailyMeals(MensarError):
    """The facility has no menu for the requested day.

    Raised when the facility is closed or nothing is published for that date.
    ``reason`` names the narrowing step that came up empty.
    """

    def __init__(self, facility: str, reason: str = "") -> None:
        self.facility = facility
        self.reason = reason
        super().__init__(f"no daily meals for `{facility}`")


class DefaultsError(MensarError):
    """Persisted defaults are corrupt, invalid or cannot be written."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid defaults: {reason}")


class UpstreamError(MensarError):
    """The catalog service could not deliver a usable response."""

    pass


class TransportError(UpstreamError):
    """Network failure or non-success HTTP status.

    Examples: DNS failure, connection refused, timeout, 503 Service Unavailable.
    """

    pass


class DeserializationError(UpstreamError):
    """Response body is not JSON or does not match the expected schema."""

    pass


class ConfigError(MensarError):
    """A MENSAR_* setting (environment or .env file) has an invalid value."""

    pass
