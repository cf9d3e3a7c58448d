"""jvmsctl — per-directory Java toolchain manager."""

__version__ = "0.1.0"
