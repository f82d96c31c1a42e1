from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
# modular inverse of A (so we can step backward exactly)
INV_A = 1407677000  # because (A * INV_A) % M == 1


def pm_next(state: int) -> int:
    return (state * A) % M


def pm_prev(state: int) -> int:
    return (state * INV_A) % M


def normalize_seed(seed: int) -> int:
    # 0 (and multiples of M) would lock the recurrence at 0 forever.
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator with the small slice of the
    `random.Random` API the generator uses (randrange, random, uniform, choice).
    Any object exposing those four methods can be injected instead.
    """
    state: int

    def __post_init__(self):
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # states are 1..M-1
        return (self.next32() - 1) / (M - 1)

    def randrange(self, start: int, stop: int) -> int:
        span = stop - start
        if span <= 0:
            raise ValueError(f"empty range for randrange({start}, {stop})")
        return start + int(self.random() * span)

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.randrange(0, len(seq))]


def seed_for_level(base_seed: int, level: int) -> int:
    """
    Seed for a 1-based level: base_seed stepped forward (level - 1) times, so
    one base seed reproduces a whole run of consecutive levels.
    """
    if level < 1:
        raise ValueError("level must be >= 1")
    s = normalize_seed(base_seed)
    for _ in range(level - 1):
        s = pm_next(s)
    return s
