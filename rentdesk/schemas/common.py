"""
Shared schema pieces
"""
from datetime import datetime

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Body returned by every insert endpoint"""
    id: int


def validate_iso_date(value: str) -> str:
    """Accept YYYY-MM-DD strings only; stored dates sort as strings."""
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ValueError("must be a calendar date in YYYY-MM-DD format")
    # strptime tolerates unpadded fields such as 2024-3-1
    if parsed.strftime("%Y-%m-%d") != value:
        raise ValueError("must be a calendar date in YYYY-MM-DD format")
    return value
