"""Utility functions for supplyledger."""

from supplyledger.utils.instant_codec import decode_optional_instant, encode_optional_instant

__all__ = ["decode_optional_instant", "encode_optional_instant"]
