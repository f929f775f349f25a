"""Filesystem and format-library helpers (no report policy)."""
