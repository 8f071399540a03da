"""Validation rules for replay targets."""

from yarl import URL

from ....core.exceptions import InvalidTargetError

ALLOWED_TARGET_SCHEMES = ("http", "https")


def validate_target_url(target_url: str) -> URL:
    """Validate and parse a replay target URL.
    
    Args:
        target_url: URL the captured request should be re-sent to
        
    Returns:
        Parsed absolute URL
        
    Raises:
        InvalidTargetError: If the URL is missing, unparsable, relative,
            uses an unsupported scheme or has no host
    """
    if not target_url or not target_url.strip():
        raise InvalidTargetError("Target URL is required")
    
    try:
        url = URL(target_url.strip())
    except (ValueError, TypeError) as e:
        raise InvalidTargetError(
            f"Failed to create request: {e}",
            details={"target_url": target_url}
        )
    
    if not url.is_absolute():
        raise InvalidTargetError(
            "Failed to create request: target URL must be absolute",
            details={"target_url": target_url}
        )
    
    if url.scheme not in ALLOWED_TARGET_SCHEMES:
        raise InvalidTargetError(
            f"Failed to create request: unsupported protocol scheme {url.scheme!r}",
            details={"target_url": target_url}
        )
    
    if not url.host:
        raise InvalidTargetError(
            "Failed to create request: target URL has no host",
            details={"target_url": target_url}
        )
    
    return url
