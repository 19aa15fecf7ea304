"""Pure validation rules.

`is_valid_email` is a conservative structural check, not RFC 5322. It strips
surrounding whitespace and then requires:

- exactly one ``@`` with a non-empty local part of ``[A-Za-z0-9._%+-]``;
- a domain of at least two dot-separated, non-empty labels of
  ``[A-Za-z0-9-]``, the last one made of letters only;
- no whitespace anywhere else.

Examples:
    ```python
    >>> is_valid_email("user+tag@domain.com")
    True
    >>> is_valid_email("user@.com")
    False
    ```
"""

import re

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9-]+\.)+[A-Za-z]+",
    re.ASCII,
)


def is_valid_email(value: str | None) -> bool:
    """Return True if *value* looks like an email address.

    Never raises: ``None`` and non-string values are simply invalid.
    """
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def is_not_empty(value: str | None) -> bool:
    """Return True if *value* is a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())
