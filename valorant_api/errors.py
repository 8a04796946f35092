class ValorantApiError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ValorantApiError):
    """
    The request did not produce a usable body: connection failures, timeouts
    and non-2xx responses that do not carry a JSON envelope.
    """

    def __init__(self, message: str, url: str, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class MalformedEnvelope(ValorantApiError):
    """The body is JSON but matches neither the success nor the failure shape."""


class SeasonTokenError(ValorantApiError, ValueError):
    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class InvalidLength(SeasonTokenError):
    pass


class InvalidFormat(SeasonTokenError):
    pass


class ConfigError(ValorantApiError, ValueError):
    """A setting is missing or has an unusable value."""
