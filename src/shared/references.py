"""Human-readable references for orders, transactions and requests.

Format: ``<PREFIX>-<unix-ms-timestamp>-<9 base36 uppercase chars>``,
e.g. ``ORD-1718035200000-K3Z9Q1XAB``.

Uniqueness is probabilistic; callers that persist references under a
uniqueness constraint regenerate on collision.
"""

import random
import re
import string
import time

ORDER_PREFIX = "ORD"
TRANSACTION_PREFIX = "TXN"
CORRELATION_PREFIX = "CID"

_ALPHABET = string.digits + string.ascii_uppercase
_SUFFIX_LENGTH = 9

_rng = random.SystemRandom()


def generate_reference(prefix: str, now_ms: int | None = None) -> str:
    """Generate a ``<prefix>-<timestamp>-<suffix>`` reference."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    suffix = "".join(_rng.choices(_ALPHABET, k=_SUFFIX_LENGTH))
    return f"{prefix}-{timestamp}-{suffix}"


def reference_pattern(prefix: str) -> re.Pattern:
    """Compiled regex matching references generated with ``prefix``."""
    return re.compile(rf"^{re.escape(prefix)}-\d+-[0-9A-Z]{{{_SUFFIX_LENGTH}}}$")
