"""Content digests used as blob keys.

A key is the SHA-1 of the blob rendered in URL-safe base64, so it can sit in
a URL path or a file name without escaping.
"""

import base64
import hashlib
import re

_KEY_ALPHABET = re.compile(r"^[A-Za-z0-9_=-]+$")


def digest(data: bytes) -> str:
    """Return the key for ``data``."""
    return base64.urlsafe_b64encode(hashlib.sha1(data).digest()).decode("ascii")  # noqa: S324


def in_alphabet(value: str) -> bool:
    """Whether ``value`` only uses characters that can appear in a key."""
    return bool(_KEY_ALPHABET.match(value))
