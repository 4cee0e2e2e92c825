"""Filesystem and path helpers."""
