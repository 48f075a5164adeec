"""Versions domain - exact version resolution against the version service.

Exports:
    Models:
        - Component: Components tracked in the version matrix
        - VersionMeta: Version hints sent with a query
        - VersionEntry, VersionMatrix, OperatorVersion, VersionResponse:
          Response wire shape
        - ResolvedComponent: Chosen (version, image) pair
        - DepVersion: Resolved versions for all components

    Client:
        - VersionServiceClient: HTTP client for the version service
        - VersionService: Protocol implemented by version resolvers
        - select_single_version: Single-candidate selection rule
"""

from pxc_version_service.domains.versions.client import (
    DEFAULT_TIMEOUT,
    VersionService,
    VersionServiceClient,
    select_single_version,
)
from pxc_version_service.domains.versions.models import (
    Component,
    DepVersion,
    OperatorVersion,
    ResolvedComponent,
    VersionEntry,
    VersionMatrix,
    VersionMeta,
    VersionResponse,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "Component",
    "DepVersion",
    "OperatorVersion",
    "ResolvedComponent",
    "VersionEntry",
    "VersionMatrix",
    "VersionMeta",
    "VersionResponse",
    "VersionService",
    "VersionServiceClient",
    "select_single_version",
]
