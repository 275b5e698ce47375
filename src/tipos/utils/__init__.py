"""Utility modules for tipos."""

from tipos.utils.logger import get_logger

__all__ = ["get_logger"]
