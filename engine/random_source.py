"""
Injectable randomness for scoring jitter, fallback root causes and synthetic log generation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

_T = TypeVar("_T")


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...


_default: Optional[RandomSource] = None


def default_source() -> RandomSource:
    global _default
    if _default is None:
        _default = np.random.default_rng()
    return _default


def resolve(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else default_source()


def pick(items: Sequence[_T], rng: Optional[RandomSource] = None) -> _T:
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    idx = int(resolve(rng).random() * len(items))
    # guard against sources that return exactly 1.0
    return items[min(idx, len(items) - 1)]
