"""Domain modules for the PXC version service client."""
