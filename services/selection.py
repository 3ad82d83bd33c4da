import random
from typing import List, Optional, Sequence, TypeVar


MAX_REVIEWERS = 2

T = TypeVar('T')


def select_reviewers(
        candidates: Sequence[T],
        limit: int = MAX_REVIEWERS,
        rng: Optional[random.Random] = None
) -> List[T]:
    """Uniformly pick up to ``limit`` distinct candidates.

    A pool smaller than ``limit`` is returned whole, so small teams simply
    get fewer reviewers.
    """
    rng = rng or random
    pool = list(candidates)

    if len(pool) <= limit:
        return pool

    return rng.sample(pool, limit)


def select_replacement(
        candidates: Sequence[T],
        rng: Optional[random.Random] = None
) -> Optional[T]:
    if not candidates:
        return None

    rng = rng or random
    return rng.choice(list(candidates))
