"""HTTP interface for the task tracker."""

from .app import create_app

__all__ = ["create_app"]
