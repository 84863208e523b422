"""Safe error message formatting utilities.

Ensures exceptions always have a useful display message, even when their
str() representation is empty.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup


def format_error_message(e: BaseException) -> str:
    """Format an exception into a non-empty display message.

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'invalid input'

        >>> format_error_message(PermissionError())
        'PermissionError: (no additional details)'
    """
    return str(e) or f"{type(e).__name__}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Windows paths and namespace names with brackets would otherwise be read
    as markup tags.
    """
    return _escape_markup(str(value))
