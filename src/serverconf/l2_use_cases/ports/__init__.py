"""Ports consumed by the L2 use cases."""
