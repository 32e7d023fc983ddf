"""Shortcode generation and validation utilities

Functions:
    generate_shortcode(length=SHORTCODE_LENGTH) -> str:
        Draw a random alphanumeric shortcode.
    is_valid_shortcode(shortcode) -> bool:
        Check that a shortcode is a non-empty ASCII alphanumeric string.

Example:
    >>> from edgeshortener.utils import generate_shortcode, is_valid_shortcode
    >>> generate_shortcode()
    'q3ZxT0bK'
    >>> is_valid_shortcode('q3ZxT0bK')
    True
    >>> is_valid_shortcode('a/b')
    False
"""

import re
import random
import string

from edgeshortener.constants import SHORTCODE_LENGTH


ALPHABET = string.ascii_letters + string.digits  # base62: [A-Za-z0-9]
SHORTCODE_PATTERN = re.compile(r'[A-Za-z0-9]+')


def generate_shortcode(length: int = SHORTCODE_LENGTH) -> str:
    """Generate a random base62 shortcode.

    Every character is drawn uniformly from ALPHABET. The draw is not
    cryptographically secure and uniqueness is only probabilistic:
    62**8 (~2.2e14) codes for the default length.

    NOTE: No existence check is made against stored mappings. A colliding
          shortcode silently overwrites the older mapping.

    Args:
        length (int, optional):
            Number of characters. Defaults to SHORTCODE_LENGTH (8).

    Returns:
        str: A random alphanumeric shortcode.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(random.choices(ALPHABET, k=length))  # noqa: S311


def is_valid_shortcode(shortcode: str) -> bool:
    """Return True if shortcode is non-empty and made of ASCII letters and digits only."""
    return SHORTCODE_PATTERN.fullmatch(shortcode) is not None
