# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


def _norm(part: object) -> int:
    if isinstance(part, (int, np.integer)):
        return _u32(int(part))
    if isinstance(part, str):
        return _tag(part)
    # stable, portable stringification then crc
    return _tag(repr(part))


class RNGRegistry:
    """
    Deterministic named numpy Generator streams for graph generation.
    Entropy path: [master_seed, scenario, stream, *parts]

    A regeneration with the same seed and scenario draws the same vertices, so a
    given layout can be reproduced in tests and in the viewer.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _tag(str(scenario))

    def _generator(self, parts: tuple[int, ...]) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, *parts])
        return np.random.Generator(np.random.PCG64(ss))

    @cache
    def stream(self, name: str) -> np.random.Generator:
        """Cached generator; successive calls continue the same sequence."""
        return self._generator((_tag(name),))

    def fresh(self, name: str, *parts: object) -> np.random.Generator:
        """Uncached generator restarted from the key, e.g. fresh("placement", generation)."""
        return self._generator((_tag(name), *(_norm(p) for p in parts)))
