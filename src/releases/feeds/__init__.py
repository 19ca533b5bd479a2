"""Parsers for the supported release feeds."""

from . import android_studio, jetbrains

__all__ = [
    "android_studio",
    "jetbrains",
]
