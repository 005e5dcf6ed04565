"""Number formatting for console output."""


def format_number(value: float) -> str:
    """
    Format a number the way a default C++ output stream does.

    Six significant digits, no trailing zeros: 78.5398, 50, 800.

    Args:
        value: Number to format

    Returns:
        Formatted text
    """
    return format(value, "g")
