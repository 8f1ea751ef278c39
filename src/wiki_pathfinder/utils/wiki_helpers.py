"""
Helper functions for validating and normalising page identifiers.
"""

def is_str(val) -> bool:
    """Returns whether or not the provided value is a string type.

    Args:
      val: The value to check.

    Returns:
      bool: Whether or not the provided value is a string type.
    """
    return isinstance(val, str)


def validate_page_identifier(page: str):
    """Validates the provided value is a usable page identifier.

    Args:
      page: The page identifier to validate.

    Returns:
      None

    Raises:
      ValueError: If the provided identifier is empty or not a string.
    """
    if not page or not is_str(page):
        raise ValueError(
            f'Invalid page identifier "{page}" provided. Page identifier must be a non-empty string.'
        )


def validate_max_depth(max_depth: int):
    """Validates that a search depth bound is a non-negative integer.

    Raises:
      ValueError: If the provided depth is negative or not an integer.
    """
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ValueError(
            f'Invalid max depth "{max_depth}" provided. Max depth must be a non-negative integer.'
        )


def get_page_identifier(title: str) -> str:
    """Returns the URL identifier for a human-readable page title.

    Examples:
      "Albert Einstein"     =>   "Albert_Einstein"
      "  Berlin "           =>   "Berlin"
    """
    validate_page_identifier(title)
    return title.strip().replace(' ', '_')

