import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Union

from . import config
from .errors import InvalidRangeError, InvalidSeedError
from .timing import Clock, now_ms

logger = logging.getLogger(__name__)

M = 0x80000000  # 2^31
A = 1103515245
C = 12345
# Normaliser is m-1, not m: next() can return exactly 1.0 at state m-1.
# Replay data depends on it.
NORM = M - 1

Seed = Union[int, float, str, None]

def lcg_next(state: int) -> int:
    return (A * state + C) % M

def lcg_next_float(state: int) -> int:
    # Same recurrence evaluated in IEEE doubles. a*state exceeds 2^53 for
    # most states, so the product rounds exactly like the browser client's.
    return int(math.fmod(float(A) * float(state) + C, M))

def to_int32(x: int) -> int:
    """Two's-complement wrap to a signed 32-bit value."""
    x &= 0xFFFFFFFF
    return x - 0x100000000 if x & 0x80000000 else x

def utf16_units(s: str):
    """Yield UTF-16 code units; non-BMP characters give their surrogate pair."""
    data = s.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)

def validate_seed(seed) -> int:
    """Return `seed` as a non-negative int or raise InvalidSeedError."""
    if isinstance(seed, bool) or not isinstance(seed, (int, float)):
        raise InvalidSeedError(f"seed must be a number, got {type(seed).__name__}")
    if isinstance(seed, float):
        if not math.isfinite(seed):
            raise InvalidSeedError(f"seed must be finite, got {seed!r}")
        if not seed.is_integer():
            raise InvalidSeedError(f"seed must be integral, got {seed!r}")
        seed = int(seed)
    if seed < 0:
        raise InvalidSeedError(f"seed must be non-negative, got {seed}")
    return seed

def hash_string_to_seed(s: Optional[str], clock: Clock = now_ms) -> int:
    """
    Fold a human-readable seed (e.g. a tournament id) into a numeric seed.

    hash = ((hash << 5) - hash) + code_unit, wrapped to signed 32 bits after
    every character; the result is abs(hash). Empty or None input has no
    stable value and falls back to the clock.
    """
    if s is not None and not isinstance(s, str):
        raise InvalidSeedError(f"expected a string seed, got {type(s).__name__}")
    if not s:
        return clock()
    h = 0
    for unit in utf16_units(s):
        h = to_int32((h << 5) - h + unit)
    return abs(h)

def resolve_seed(seed: Seed = None, clock: Clock = now_ms) -> int:
    """
    Turn a caller-supplied seed into the numeric seed an engine is built from.
      None   -> clock() (non-competitive play only)
      str    -> hash_string_to_seed
      number -> validated non-negative int
    """
    if seed is None:
        numeric = clock()
    elif isinstance(seed, str):
        numeric = hash_string_to_seed(seed, clock)
    else:
        numeric = validate_seed(seed)
    logger.debug("Maze seed set: %r -> %d", seed, numeric)
    return numeric

@dataclass
class SeededEngine:
    seed: int
    float_compat: Optional[bool] = None
    state: int = field(init=False)

    def __post_init__(self) -> None:
        self.seed = validate_seed(self.seed)
        if self.float_compat is None:
            self.float_compat = config.FLAGS.js_float_lcg
        self.state = self.seed

    def next(self) -> float:
        """Advance the LCG; returns state / (m - 1), in [0, 1]."""
        step = lcg_next_float if self.float_compat else lcg_next
        self.state = step(self.state)
        return self.state / NORM

    def next_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi] via floor(next() * (hi - lo + 1)) + lo."""
        for bound in (lo, hi):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidRangeError(f"bounds must be integers, got {lo!r}, {hi!r}")
        if lo > hi:
            raise InvalidRangeError(f"lo must be <= hi, got {lo} > {hi}")
        # next() == 1.0 at state m-1 would land on hi+1; keep it at hi.
        return min(math.floor(self.next() * (hi - lo + 1)) + lo, hi)
