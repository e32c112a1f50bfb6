"""HTTP query surface for the episode catalog."""

from __future__ import annotations

from .app import create_app
from .params import filter_request_from_params

__all__ = ["create_app", "filter_request_from_params"]
