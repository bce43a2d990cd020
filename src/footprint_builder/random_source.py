"""Random sources for footprint generation.

Generation never touches a global random state. Every call receives a
RandomSource owned by the caller:
- SeededRandomSource: instance-owned ``random.Random``
- ScriptedRandomSource: replays fixed draws (deterministic tests)
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from hashlib import blake2s
from typing import Protocol, runtime_checkable

from footprint_builder.errors import RandomSourceExhausted


@runtime_checkable
class RandomSource(Protocol):
    """Capability consumed by the generators."""

    def boolean(self, threshold: float = 0.5) -> bool:
        """Draw uniform [0, 1) and return ``draw > threshold``."""
        ...

    def integer_in_range(self, min_inclusive: int, max_exclusive: int) -> int:
        """Integer in [min_inclusive, max_exclusive)."""
        ...


class SeededRandomSource:
    """RandomSource backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | str | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def boolean(self, threshold: float = 0.5) -> bool:
        return self._random.random() > threshold

    def integer_in_range(self, min_inclusive: int, max_exclusive: int) -> int:
        if max_exclusive <= min_inclusive:
            raise ValueError(
                f"Empty range [{min_inclusive}, {max_exclusive})"
            )
        return self._random.randrange(min_inclusive, max_exclusive)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


class ScriptedRandomSource:
    """RandomSource that replays pre-recorded draws.

    Booleans and integers are separate queues. ``threshold`` is ignored:
    the scripted value is the draw's outcome. Integers outside the
    requested range are rejected so a bad script fails loudly.
    """

    def __init__(
        self,
        booleans: Iterable[bool] = (),
        integers: Iterable[int] = (),
    ) -> None:
        self._booleans = list(booleans)
        self._integers = list(integers)
        self.boolean_calls = 0
        self.integer_calls = 0

    def boolean(self, threshold: float = 0.5) -> bool:
        if self.boolean_calls >= len(self._booleans):
            raise RandomSourceExhausted(
                f"No scripted boolean left (used {self.boolean_calls})"
            )
        value = bool(self._booleans[self.boolean_calls])
        self.boolean_calls += 1
        return value

    def integer_in_range(self, min_inclusive: int, max_exclusive: int) -> int:
        if self.integer_calls >= len(self._integers):
            raise RandomSourceExhausted(
                f"No scripted integer left (used {self.integer_calls})"
            )
        value = self._integers[self.integer_calls]
        if not min_inclusive <= value < max_exclusive:
            raise ValueError(
                f"Scripted integer {value} outside [{min_inclusive}, {max_exclusive})"
            )
        self.integer_calls += 1
        return value

    @property
    def remaining_booleans(self) -> int:
        return len(self._booleans) - self.boolean_calls


def derive_seed(master: int, name: str) -> int:
    """Stable 32-bit seed from a master seed and a label.

    ``hash()`` is salted per process, so a keyed digest is used instead.
    """
    data = f"{int(master)}|{name}".encode("utf-8")
    digest = blake2s(data, digest_size=4).digest()
    return int.from_bytes(digest, "big", signed=False)
