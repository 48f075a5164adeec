"""Client for the Percona version-matrix service used by the PXC operator."""

__version__ = "1.14.0"
