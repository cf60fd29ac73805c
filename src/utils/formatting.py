"""
Display formatting helpers.
"""


def format_number(num: int) -> str:
    """Format a count as 1.2K / 3.4M style text."""
    if num >= 1000000:
        return f"{num / 1000000:.1f}M"
    if num >= 1000:
        return f"{num / 1000:.1f}K"
    return str(num)
