"""Date formatting utilities"""

from datetime import datetime
from typing import Optional

MISSING_DATE = "N/A"


def format_display_date(value: Optional[datetime]) -> str:
    """Render a sale date as e.g. "07 Mar 2025", or N/A when unknown"""
    if value is None:
        return MISSING_DATE
    return value.strftime("%d %b %Y")
