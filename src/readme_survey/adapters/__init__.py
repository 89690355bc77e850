"""Adapters around the core."""
