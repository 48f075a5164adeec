"""Pydantic models for the Percona version-matrix service.

The service answers ``GET /v1/pxc-operator/{operator}/{apply}`` with a list
of operator/database pairs, each carrying a matrix of candidate versions per
component. Only the first entry is meaningful for a resolution.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Component(str, Enum):
    """Components tracked in the version matrix, keyed as on the wire."""

    PXC = "pxc"
    PMM = "pmm"
    PROXYSQL = "proxysql"
    HAPROXY = "haproxy"
    BACKUP = "backup"


class VersionMeta(BaseModel):
    """Version hints sent along with a version-matrix query.

    The mandatory hints are always forwarded, even when empty. Optional
    hints are only sent when they carry a value.
    """

    apply: str = Field(..., description="Apply strategy (e.g. 'recommended', 'latest', '8.0.32')")
    pxc_version: str = Field("", description="Currently deployed database version")
    kube_version: str = Field("", description="Kubernetes server version")
    platform: str = Field("", description="Platform identifier (e.g. 'kubernetes', 'openshift')")
    cr_uid: str = Field("", description="UID of the custom resource, used for version pinning")
    pmm_version: str | None = Field(None, description="Current monitoring agent version")
    backup_version: str | None = Field(None, description="Current backup tool version")
    proxysql_version: str | None = Field(None, description="Current ProxySQL version")
    haproxy_version: str | None = Field(None, description="Current HAProxy version")

    def query_params(self) -> list[tuple[str, str]]:
        """Return query parameters in a stable order."""
        params = [
            ("databaseVersion", self.pxc_version),
            ("kubeVersion", self.kube_version),
            ("platform", self.platform),
            ("customResourceUID", self.cr_uid),
        ]

        optional = [
            ("pmmVersion", self.pmm_version),
            ("backupVersion", self.backup_version),
            ("proxysqlVersion", self.proxysql_version),
            ("haproxyVersion", self.haproxy_version),
        ]
        params.extend((name, value) for name, value in optional if value)
        return params

    def empty_required_fields(self) -> list[str]:
        """Names of mandatory query parameters that carry no value."""
        return [name for name, value in self.query_params()[:4] if not value]


class VersionEntry(BaseModel):
    """Image metadata for one version of a component."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field("", description="Version string")
    image_path: str = Field("", alias="imagePath", description="Container image reference")
    image_hash: str = Field("", alias="imageHash", description="Image digest")
    status: str = Field("", description="Lifecycle status (e.g. 'recommended', 'available')")
    # The service spells this field 'critilal'.
    critical: bool = Field(False, alias="critilal", description="Whether the version is critical")

    @field_validator("version", "image_path", "image_hash", "status", mode="before")
    @classmethod
    def _null_as_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("critical", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value


class VersionMatrix(BaseModel):
    """Candidate versions per component, keyed by version string."""

    pxc: dict[str, VersionEntry] = Field(default_factory=dict)
    pmm: dict[str, VersionEntry] = Field(default_factory=dict)
    proxysql: dict[str, VersionEntry] = Field(default_factory=dict)
    haproxy: dict[str, VersionEntry] = Field(default_factory=dict)
    backup: dict[str, VersionEntry] = Field(default_factory=dict)

    @field_validator("pxc", "pmm", "proxysql", "haproxy", "backup", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: {} if entry is None else entry for key, entry in value.items()}
        return value

    def for_component(self, component: Component) -> dict[str, VersionEntry]:
        """Return the candidate mapping for a component."""
        versions: dict[str, VersionEntry] = getattr(self, component.value)
        return versions


class OperatorVersion(BaseModel):
    """Operator/database pair with its compatibility matrix."""

    operator: str = Field("", description="Operator version")
    database: str = Field("", description="Database flavour")
    matrix: VersionMatrix = Field(default_factory=VersionMatrix)

    @field_validator("operator", "database", mode="before")
    @classmethod
    def _null_as_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("matrix", mode="before")
    @classmethod
    def _null_as_empty_matrix(cls, value: Any) -> Any:
        return {} if value is None else value


class VersionResponse(BaseModel):
    """Body of a version-matrix response."""

    versions: list[OperatorVersion] = Field(default_factory=list)

    @field_validator("versions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ResolvedComponent(BaseModel):
    """Version and image chosen for a single component."""

    version: str
    image: str


class DepVersion(BaseModel):
    """Exactly one resolved version and image per component."""

    model_config = ConfigDict(populate_by_name=True)

    pxc_image: str | None = Field(None, alias="pxcImage")
    pxc_version: str | None = Field(None, alias="pxcVersion")
    backup_image: str | None = Field(None, alias="backupImage")
    backup_version: str | None = Field(None, alias="backupVersion")
    proxysql_image: str | None = Field(None, alias="proxySqlImage")
    proxysql_version: str | None = Field(None, alias="proxySqlVersion")
    haproxy_image: str | None = Field(None, alias="haproxyImage")
    haproxy_version: str | None = Field(None, alias="haproxyVersion")
    pmm_image: str | None = Field(None, alias="pmmImage")
    pmm_version: str | None = Field(None, alias="pmmVersion")

    @classmethod
    def from_components(cls, resolved: dict[Component, ResolvedComponent]) -> DepVersion:
        """Build from per-component selections."""
        fields: dict[str, str] = {}
        for component, selected in resolved.items():
            fields[f"{component.value}_image"] = selected.image
            fields[f"{component.value}_version"] = selected.version
        return cls(**fields)

    def components(self) -> dict[Component, ResolvedComponent]:
        """Return the resolved (version, image) pair per component.

        Components without a resolved version are left out.
        """
        result: dict[Component, ResolvedComponent] = {}
        for component in Component:
            version = getattr(self, f"{component.value}_version")
            if not version:
                continue
            image = getattr(self, f"{component.value}_image") or ""
            result[component] = ResolvedComponent(version=version, image=image)
        return result

    def to_dict(self) -> dict[str, str]:
        """Serialize with wire names, omitting empty fields."""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
            if value
        }
