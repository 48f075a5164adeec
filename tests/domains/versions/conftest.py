"""Pytest fixtures for versions domain tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pxc_version_service.domains.versions.models import VersionMeta


def _entry(version: str, image: str, status: str = "recommended") -> dict[str, Any]:
    return {
        "version": version,
        "imagePath": image,
        "imageHash": f"sha256:{version}",
        "status": status,
        "critilal": False,
    }


@pytest.fixture
def matrix_data() -> dict[str, Any]:
    """Matrix with exactly one candidate per component."""
    return {
        "pxc": {"8.0.33-25.1": _entry("8.0.33-25.1", "percona/pxc:8.0.33")},
        "pmm": {"2.41.0": _entry("2.41.0", "percona/pmm-client:2.41.0")},
        "proxysql": {"2.5.5": _entry("2.5.5", "percona/proxysql2:2.5.5")},
        "haproxy": {"2.8.5": _entry("2.8.5", "percona/haproxy:2.8.5")},
        "backup": {"8.0.35-30": _entry("8.0.35-30", "percona/xtrabackup:8.0.35-30")},
    }


@pytest.fixture
def response_data(matrix_data: dict[str, Any]) -> dict[str, Any]:
    """Version-matrix response body with a single entry."""
    return {
        "versions": [
            {
                "operator": "1.14.0",
                "database": "pxc-operator",
                "matrix": matrix_data,
            }
        ]
    }


@pytest.fixture
def meta() -> VersionMeta:
    """Hints with all optional versions unset."""
    return VersionMeta(
        apply="recommended",
        pxc_version="8.0.32",
        kube_version="1.28",
        platform="kubernetes",
        cr_uid="abc123",
    )


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Build a transport answering every request with the given JSON body."""

    def factory(
        body: Any, status_code: int = 200, requests: list[httpx.Request] | None = None
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, json=body, request=request)

        return httpx.MockTransport(handler)

    return factory
