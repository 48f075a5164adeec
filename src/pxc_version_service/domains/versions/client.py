"""HTTP client for the Percona version-matrix service.

The client asks the service for the versions matching a cluster's current
state and reduces the returned matrix to exactly one version and image per
component. Any ambiguity in the response fails the whole resolution; the
client never picks among several candidates on its own.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pxc_version_service.domains.versions.models import (
    Component,
    DepVersion,
    ResolvedComponent,
    VersionEntry,
    VersionMeta,
    VersionResponse,
)
from pxc_version_service.utils.errors import (
    BadStatusError,
    ComponentVersionError,
    DecodeError,
    EmptyResultError,
    RequestBuildError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

API_PATH = "v1/pxc-operator"

# Order in which components are checked; the first failure wins.
RESOLUTION_ORDER = [
    Component.PXC,
    Component.BACKUP,
    Component.PMM,
    Component.PROXYSQL,
    Component.HAPROXY,
]


@runtime_checkable
class VersionService(Protocol):
    """Anything able to resolve exact component versions."""

    def get_exact_version(self, endpoint: str, meta: VersionMeta) -> DepVersion: ...


def select_single_version(
    component: Component, versions: dict[str, VersionEntry]
) -> tuple[str, VersionEntry]:
    """Return the only version offered for a component.

    Raises:
        ComponentVersionError: If the mapping holds zero or several versions
    """
    if len(versions) != 1:
        raise ComponentVersionError(component.value, len(versions))

    ((version, entry),) = versions.items()
    return version, entry


class VersionServiceClient:
    """Client resolving exact versions for one operator version."""

    def __init__(
        self,
        operator_version: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._operator_version = operator_version
        self._timeout = timeout
        self._transport = transport

    @property
    def operator_version(self) -> str:
        """Operator version used as the compatibility table selector."""
        return self._operator_version

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    def build_request(self, endpoint: str, meta: VersionMeta) -> httpx.Request:
        """Build the version-matrix query for the given hints.

        Args:
            endpoint: Base URL of the version service
            meta: Version hints for the cluster

        Returns:
            GET request ready to be sent

        Raises:
            RequestBuildError: If no absolute http(s) URL can be built
        """
        url = "{}/{}/{}/{}".format(
            endpoint.rstrip("/"),
            API_PATH,
            quote(self._operator_version, safe=""),
            quote(meta.apply, safe=""),
        )

        try:
            request_url = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise RequestBuildError(endpoint, str(e)) from e

        if request_url.scheme not in ("http", "https") or not request_url.host:
            raise RequestBuildError(endpoint, "endpoint must be an absolute http(s) URL")

        return httpx.Request(
            "GET",
            request_url,
            params=meta.query_params(),
            headers={"Accept": "application/json"},
            extensions={"timeout": httpx.Timeout(self._timeout).as_dict()},
        )

    def get_exact_version(self, endpoint: str, meta: VersionMeta) -> DepVersion:
        """Resolve exactly one version and image per component.

        Args:
            endpoint: Base URL of the version service
            meta: Version hints for the cluster

        Returns:
            DepVersion with every component populated

        Raises:
            RequestBuildError: If the request URL cannot be built
            TransportError: If the service cannot be reached
            BadStatusError: If the service answers with a non-200 status
            DecodeError: If the body is not a valid version response
            EmptyResultError: If the response carries no versions
            ComponentVersionError: If any component has zero or several versions
        """
        request = self.build_request(endpoint, meta)

        empty = meta.empty_required_fields()
        if empty:
            logger.debug(f"Sending empty required parameters: {', '.join(empty)}")

        logger.debug(f"Querying version service: {request.url}")
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.send(request, stream=True)
                try:
                    # The body of a rejected query is never read.
                    if response.status_code != httpx.codes.OK:
                        logger.warning(
                            f"Version service returned {response.status_code} for {request.url}"
                        )
                        raise BadStatusError(response.status_code, response.reason_phrase)
                    content = response.read()
                finally:
                    response.close()
        except httpx.DecodingError as e:
            raise DecodeError(f"failed to decode response body: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"Version service request to {request.url} failed: {e!r}")
            raise TransportError(str(request.url), str(e) or type(e).__name__) from e

        try:
            body = VersionResponse.model_validate_json(content)
        except ValidationError as e:
            raise DecodeError(str(e)) from e

        if not body.versions:
            raise EmptyResultError()

        matrix = body.versions[0].matrix
        resolved: dict[Component, ResolvedComponent] = {}
        for component in RESOLUTION_ORDER:
            version, entry = select_single_version(component, matrix.for_component(component))
            resolved[component] = ResolvedComponent(version=version, image=entry.image_path)

        summary = ", ".join(f"{c.value}={r.version}" for c, r in resolved.items())
        logger.info(f"Resolved versions: {summary}")
        return DepVersion.from_components(resolved)
