"""Passcode-based write authorization

Creating short URLs requires a single shared passcode. The editor page hands
it to browsers as an HttpOnly cookie, and callers send it back in the `Cookie`
header of their POST requests.

Functions:
    extract_passcode(cookie_header) -> str | None
        Pick the passcode value out of a raw Cookie header.
    authorize(presented, reference) -> bool
        Check a presented passcode against the reference passcode.
    passcode_cookie(passcode) -> str
        Build the Set-Cookie header value carrying the passcode.
    load_passcode(secret_dao_factory) -> str
        Read the reference passcode from the secret store.

Example:
    >>> extract_passcode('theme=dark; passcode=s3cr3t;')
    's3cr3t'
    >>> authorize('s3cr3t', 's3cr3t')
    True
    >>> authorize(None, 's3cr3t')
    False
"""

import hmac
from collections.abc import Callable
from urllib.parse import unquote

from edgeshortener.constants import PASSCODE_KEY
from edgeshortener.dao.base import SecretBaseDAO
from edgeshortener.dao.exceptions import DataStoreError
from edgeshortener.exceptions import ConfigurationError, InfrastructureError, PasscodeUnavailableError


def extract_passcode(cookie_header: str | None) -> str | None:
    """Return the value of the first `passcode` cookie, or None.

    Pairs are split on ';' rather than '; ' so a trailing separator doesn't
    break the last pair. The value is everything after the first '=' in the
    pair, percent-unescaped.
    """
    if not cookie_header:
        return None

    for pair in cookie_header.split(';'):
        key, sep, value = pair.partition('=')
        if sep and key.strip() == PASSCODE_KEY:
            return unquote(value)
    return None


def authorize(presented: str | None, reference: str) -> bool:
    """Return True iff a passcode was presented and it equals the reference passcode."""
    if presented is None:
        return False
    return hmac.compare_digest(presented.encode('utf-8'), reference.encode('utf-8'))


def passcode_cookie(passcode: str) -> str:
    return f'{PASSCODE_KEY}={passcode}; Secure; HttpOnly; SameSite=Strict'


def load_passcode(secret_dao_factory: Callable[[], SecretBaseDAO]) -> str:
    """Read the reference passcode from the secret store.

    The secret store is opened and read on every call, so a rotated passcode
    is picked up by the very next request.

    Args:
        secret_dao_factory (Callable[[], SecretBaseDAO]):
            Builds the DAO used to read the passcode.

    Returns:
        str: The reference passcode.

    Raises:
        PasscodeUnavailableError:
            If the secret store is unreachable or misconfigured, or the passcode
            is missing or empty.
    """
    try:
        passcode = secret_dao_factory().get(PASSCODE_KEY)
    except (ConfigurationError, InfrastructureError, DataStoreError) as e:
        raise PasscodeUnavailableError('passcode not found') from e

    if not passcode:
        raise PasscodeUnavailableError('passcode not found')
    return passcode
