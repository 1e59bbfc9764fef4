"""
KSUID - K-Sortable Unique Identifier.

Run ids and error ids sort by creation time without any coordination.
Layout: 4 bytes of seconds since the KSUID epoch + 16 random bytes,
rendered as a fixed-width 27 character base62 string.
"""

import secrets
import time

KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(value):
    digits = []
    while value:
        value, rem = divmod(value, 62)
        digits.append(BASE62[rem])
    return "".join(reversed(digits)).rjust(KSUID_LENGTH, BASE62[0])


def generate_ksuid(now=None):
    """Generate a 27-character sortable unique ID."""
    seconds = int(time.time() if now is None else now) - KSUID_EPOCH
    payload = seconds.to_bytes(4, "big") + secrets.token_bytes(16)
    return _base62(int.from_bytes(payload, "big"))
