#Expose the high-level pipeline pieces:
#Candidate filtering (hard rules)
#Scoring / least-busy selection
#Dispatcher orchestrator (the "one call" entry point)

from .candidate_filter import build_available_candidates
from .scoring import select_least_busy
from .policy import DispatchPolicy, default_dispatch_policy
from .dispatcher import Dispatcher, NoDriverAvailable #Dispatcher.assign is the main call to dispatch a delivery to a driver

__all__ = [
    "build_available_candidates",
    "select_least_busy",
    "DispatchPolicy",
    "default_dispatch_policy",
    "Dispatcher",
    "NoDriverAvailable",
]
