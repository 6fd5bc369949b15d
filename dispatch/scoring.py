#Purpose: Selection model (the "who is best" layer).
#Takes candidates (already eligible) and picks the least busy one,
#i.e. the driver with the fewest recorded deliveries.
#Tie-breaking: first candidate in directory order wins (min() keeps the first minimum).

from typing import Optional, Sequence

from drivers.models import Driver
from .candidate_filter import Candidate


def workload(candidate: Candidate) -> int:
    return len(candidate.deliveries)


def select_least_busy(candidates: Sequence[Candidate]) -> Optional[Driver]:
    if not candidates:
        return None

    return min(candidates, key=workload).driver
