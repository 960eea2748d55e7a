"""Custom exceptions for the MusicBrainz query client.

Every failure of a lookup, search or browse call surfaces as one of these
types so callers can tell a network problem from a rejected credential, a
service-reported error, an empty reply or a malformed payload.
"""

from __future__ import annotations


class MusicBrainzError(Exception):
    """Base exception for all query errors."""

    pass


class TransportError(MusicBrainzError):
    """Raised when the request could not be completed at the network level.

    The underlying ``requests`` exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class AuthenticationError(MusicBrainzError):
    """Raised when a 401 cannot be resolved by a single Digest retry.

    This is fatal for the call; the client never loops on authentication.
    """

    def __init__(self, message: str = "Authentication failed", *, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class ServiceError(MusicBrainzError):
    """Raised when the web service answers with an error payload."""

    def __init__(self, status: int, message: str, help_text: str | None = None) -> None:
        self.status = status
        self.message = message
        self.help = help_text
        super().__init__(f"MusicBrainz error {status}: {message}")


class EmptyResponseError(MusicBrainzError):
    """Raised when a successful response carries no content."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url
        super().__init__("Query did not produce results.")


class DecodeError(MusicBrainzError):
    """Raised when a payload cannot be turned into typed objects.

    ``path`` lists the property names (and ``[index]`` list positions) leading
    from the root object to the value that failed.
    """

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        self.reason = message
        self.path = path
        super().__init__(message)

    @property
    def location(self) -> str:
        """Render ``path`` as ``relations[0].artist.id``."""

        rendered = ""
        for segment in self.path:
            if segment.startswith("[") or not rendered:
                rendered += segment
            else:
                rendered += f".{segment}"
        return rendered

    def within(self, segment: str) -> DecodeError:
        """Return a copy of this error nested one level deeper."""

        return DecodeError(self.reason, (segment, *self.path))

    def __str__(self) -> str:
        if not self.path:
            return self.reason
        return f"Failed to deserialize the '{self.location}' property: {self.reason}"


__all__ = [
    "AuthenticationError",
    "DecodeError",
    "EmptyResponseError",
    "MusicBrainzError",
    "ServiceError",
    "TransportError",
]
