"""
CLI commands module for langsift
"""

from . import detect, profiles

__all__ = ["detect", "profiles"]
