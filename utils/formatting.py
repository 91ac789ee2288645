"""
Formatting utilities.
"""

from datetime import date, datetime


def format_date_display(value: date) -> str:
    """
    Format a date as 'DD Mon YYYY'.

    Args:
        value: The date to format.

    Returns:
        Formatted date string, e.g. '05 Mar 1997'.
    """
    return value.strftime("%d %b %Y")


def format_timestamp(value: datetime) -> str:
    """
    Format a timestamp as 'DD Mon YYYY, HH:MM'.

    Args:
        value: The timestamp to format.

    Returns:
        Formatted timestamp string.
    """
    return value.strftime("%d %b %Y, %H:%M")
