"""Random piece spawning.

Pieces are drawn by pure memoryless uniform sampling over
:data:`~blockfall.tetromino.CATALOGUE` (no 7-bag) and placed at the top of the
board with their bounding box's left edge one cell left of centre.  The spawn
column ignores the width of the chosen shape, so wide and narrow pieces share
the same anchor.

The source of randomness is injectable.  Anything exposing
``randrange(stop)`` works, which lets tests force a particular index::

    >>> class Fixed:
    ...     def randrange(self, stop):
    ...         return 2
    >>> random_piece(Fixed()).to_dict()["color"]
    '#a000f0'
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from .board import WIDTH
from .tetromino import CATALOGUE, Piece


LOGGER = logging.getLogger(__name__)

SPAWN_X = WIDTH // 2 - 1
SPAWN_Y = 0


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def random_piece(rng: Optional[RandomSource] = None) -> Piece:
    """Return a new piece drawn uniformly from the catalogue.

    ``rng`` defaults to the process-wide :mod:`random` generator.  Errors
    raised by the source propagate unchanged.
    """

    source = random if rng is None else rng
    index = source.randrange(len(CATALOGUE))
    kind = CATALOGUE[index]
    LOGGER.debug("Spawned %s at (%d, %d)", kind.type.value, SPAWN_X, SPAWN_Y)
    return Piece(kind, x=SPAWN_X, y=SPAWN_Y)


class PieceFactory:
    """Spawn pieces from a dedicated random generator.

    Each factory owns its generator, so separate threads can each use their
    own factory without sharing random state.  Pass ``seed`` for a
    reproducible sequence, or ``rng`` to supply an external source.
    """

    def __init__(
        self, rng: Optional[RandomSource] = None, *, seed: Optional[int] = None
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        if rng is not None and not callable(getattr(rng, "randrange", None)):
            raise TypeError("rng must provide a randrange(stop) method")
        self._owns_rng = rng is None
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the factory's own generator."""

        if not self._owns_rng:
            raise TypeError("Cannot reseed an externally supplied random source")
        self._rng.seed(seed)  # type: ignore[attr-defined]

    def next_piece(self) -> Piece:
        """Return the next randomly chosen piece."""

        return random_piece(self._rng)


__all__ = ["SPAWN_X", "SPAWN_Y", "RandomSource", "PieceFactory", "random_piece"]
