"""Utility functions and helpers for the PXC version service client."""

from pxc_version_service.utils.errors import (
    BadStatusError,
    ComponentVersionError,
    DecodeError,
    EmptyResultError,
    RequestBuildError,
    TransportError,
    VersionServiceError,
)

__all__ = [
    "VersionServiceError",
    "RequestBuildError",
    "TransportError",
    "BadStatusError",
    "DecodeError",
    "EmptyResultError",
    "ComponentVersionError",
]
