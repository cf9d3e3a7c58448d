"""Filesystem-facing layer: configuration persistence and installations."""
