"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the quakemap package.
"""

from quakemap.main import earthquake_map

__all__ = [
    "earthquake_map",
]
