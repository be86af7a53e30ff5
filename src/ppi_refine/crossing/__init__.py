from .manager import CrossingManager
from .models import InteractionEdgeUpdate, noisy_or
from .search import HomologySearchJob, find_distances, non_traversal_probability

__all__ = [
    "CrossingManager",
    "HomologySearchJob",
    "InteractionEdgeUpdate",
    "find_distances",
    "noisy_or",
    "non_traversal_probability",
]
