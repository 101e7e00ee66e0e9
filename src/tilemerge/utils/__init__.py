"""Utility helpers for tilemerge."""
