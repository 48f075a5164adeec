"""Entry point for resolving versions from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from pxc_version_service import __version__
from pxc_version_service.config import LogLevel, VersionServiceConfig
from pxc_version_service.domains.versions.client import VersionServiceClient
from pxc_version_service.domains.versions.models import VersionMeta
from pxc_version_service.utils.errors import VersionServiceError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pxc-version-service",
        description="Resolve exact PXC component versions from the version service",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Service options
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Version service URL (default: https://check.percona.com)",
    )
    parser.add_argument(
        "--operator-version",
        default=None,
        help=f"Operator version (default: {__version__})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 5)",
    )

    # Version hints
    parser.add_argument(
        "--apply",
        default="recommended",
        help="Apply strategy: recommended, latest or an exact version",
    )
    parser.add_argument("--database-version", default="", help="Current PXC version")
    parser.add_argument("--kube-version", default="", help="Kubernetes version")
    parser.add_argument("--platform", default="", help="Platform (kubernetes, openshift)")
    parser.add_argument("--cr-uid", default="", help="UID of the custom resource")
    parser.add_argument("--pmm-version", default=None, help="Current PMM client version")
    parser.add_argument("--backup-version", default=None, help="Current backup image version")
    parser.add_argument("--proxysql-version", default=None, help="Current ProxySQL version")
    parser.add_argument("--haproxy-version", default=None, help="Current HAProxy version")

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build config from args, falling back to environment/defaults
    config_kwargs: dict[str, Any] = {}

    if args.endpoint:
        config_kwargs["endpoint"] = args.endpoint

    if args.operator_version:
        config_kwargs["operator_version"] = args.operator_version

    if args.timeout is not None:
        config_kwargs["timeout"] = args.timeout

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    try:
        config = VersionServiceConfig(**config_kwargs)
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)

    meta = VersionMeta(
        apply=args.apply,
        pxc_version=args.database_version,
        kube_version=args.kube_version,
        platform=args.platform,
        cr_uid=args.cr_uid,
        pmm_version=args.pmm_version,
        backup_version=args.backup_version,
        proxysql_version=args.proxysql_version,
        haproxy_version=args.haproxy_version,
    )

    client = VersionServiceClient(config.operator_version, timeout=config.timeout)
    try:
        versions = client.get_exact_version(config.endpoint, meta)
    except VersionServiceError as e:
        logger.error(f"Version resolution failed: {e}")
        return 1

    print(json.dumps(versions.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
