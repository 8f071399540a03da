"""
Inbound payload normalisation.

Captured bodies are always stored as JSON objects. Anything that does not
decode to a strict JSON object is kept verbatim under a "raw" key; an
unparsable body is data, not an error.
"""

import json
from typing import Any, Dict

RAW_BODY_KEY = "raw"


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def parse_json_body(payload: bytes) -> Dict[str, Any]:
    """Parse a request payload into the stored body representation.
    
    Args:
        payload: Raw request body bytes
        
    Returns:
        {} for an empty payload, the decoded object for a JSON object,
        otherwise {"raw": <payload as text>}
    """
    if not payload:
        return {}
    
    text = payload.decode("utf-8", errors="replace")
    
    try:
        body = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return {RAW_BODY_KEY: text}
    
    if not isinstance(body, dict):
        return {RAW_BODY_KEY: text}
    
    return body
