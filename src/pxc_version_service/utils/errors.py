"""Error types raised while resolving versions against the version service."""

from __future__ import annotations


class VersionServiceError(Exception):
    """Base error for version service failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RequestBuildError(VersionServiceError):
    """The request URL could not be built from the endpoint and query."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"failed to build request for endpoint '{endpoint}': {reason}")


class TransportError(VersionServiceError):
    """The version service could not be reached."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to reach version service at {url}: {reason}")


class BadStatusError(VersionServiceError):
    """The version service answered with a non-200 status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"received bad status code {status}")


class DecodeError(VersionServiceError):
    """The response body is not a well-formed version matrix."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"failed to unmarshal response: {reason}")


class EmptyResultError(VersionServiceError):
    """The version service returned no version entries."""

    def __init__(self) -> None:
        super().__init__("empty versions response")


class ComponentVersionError(VersionServiceError):
    """A component mapping did not narrow down to exactly one version."""

    def __init__(self, component: str, count: int) -> None:
        self.component = component
        self.count = count
        super().__init__(
            f"response has multiple or zero versions for {component}: got {count}"
        )

    @property
    def is_ambiguous(self) -> bool:
        """True when the service offered more than one candidate."""
        return self.count > 1
