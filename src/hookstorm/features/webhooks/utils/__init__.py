"""Helpers for the webhook feature."""

from .expiry import effective_ttl, compute_expiry
from .body_parser import parse_json_body, RAW_BODY_KEY
from .validation import validate_target_url

__all__ = [
    "effective_ttl",
    "compute_expiry",
    "parse_json_body",
    "RAW_BODY_KEY",
    "validate_target_url",
]
