"""Replay outcome value object."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ReplayResult:
    """Outcome of re-sending a captured event.
    
    ``success`` means the target answered, whatever the status code. Only a
    request that never completed (invalid target, DNS, refused connection,
    timeout) reports ``success=False``, and then ``response_code`` is None.
    """
    
    success: bool
    replayed_at: datetime
    response_code: Optional[int] = None
    error: Optional[str] = None
    
    @classmethod
    def delivered(cls, replayed_at: datetime, response_code: int) -> "ReplayResult":
        return cls(success=True, replayed_at=replayed_at, response_code=response_code)
    
    @classmethod
    def failed(cls, replayed_at: datetime, error: str) -> "ReplayResult":
        return cls(success=False, replayed_at=replayed_at, error=error)
