"""
Secure Random Source
=====================

Supplies uniformly drawn indices to the secret generator.

:class:`SystemRandomSource` reads one unsigned 32-bit value from the
operating system CSPRNG per draw and maps it onto ``[min, max]`` by
modulo reduction::

    min + value % (max - min + 1)

For ranges that do not divide 2**32 this leaves a bias of at most
``range / 2**32`` per outcome (below 1e-7 for a few hundred symbols).
The reduction is kept as-is, without rejection sampling, so that
outputs stay reproducible against the same stream of 32-bit values.

The generator depends only on the :class:`SecureRandomSource` protocol,
so a deterministic double can stand in for unit tests.

References:
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from forge.core.errors import EntropySourceUnavailableError

# Width of a single draw, in bytes and as a modulus
WORD_BYTES: int = 4
WORD_MODULUS: int = 1 << (8 * WORD_BYTES)


@runtime_checkable
class SecureRandomSource(Protocol):
    """Anything that can produce an integer in an inclusive range."""

    def next_in_range(self, min_value: int, max_value: int) -> int:
        """Return ``r`` with ``min_value <= r <= max_value``."""
        ...


def reduce_to_range(value: int, min_value: int, max_value: int) -> int:
    """Map an unsigned 32-bit *value* onto ``[min_value, max_value]``.

    Raises:
        ValueError: If ``min_value > max_value`` or the range is wider
            than the 32-bit source can address.
    """
    if min_value > max_value:
        raise ValueError(
            f"Empty range: min_value ({min_value}) > max_value ({max_value})"
        )
    span = max_value - min_value + 1
    if span > WORD_MODULUS:
        raise ValueError(
            f"Range of {span} values exceeds the 32-bit random source"
        )
    return min_value + value % span


class SystemRandomSource:
    """OS-backed CSPRNG source (``secrets`` / ``os.urandom``).

    Stateless and safe to share across threads: every draw goes straight
    to the process-wide system generator.
    """

    def next_in_range(self, min_value: int, max_value: int) -> int:
        return reduce_to_range(self.next_word(), min_value, max_value)

    @staticmethod
    def next_word() -> int:
        """Return one unsigned 32-bit integer from the OS CSPRNG.

        Raises:
            EntropySourceUnavailableError: If the platform cannot supply
                cryptographically secure bytes.
        """
        try:
            raw = secrets.token_bytes(WORD_BYTES)
        except (NotImplementedError, OSError) as exc:
            raise EntropySourceUnavailableError(
                "Operating system entropy source is unavailable"
            ) from exc
        return int.from_bytes(raw, "little")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
