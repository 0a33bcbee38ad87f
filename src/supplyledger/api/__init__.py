"""HTTP API for supplyledger."""

from supplyledger.api.app import create_app

__all__ = ["create_app"]
