from .cliques import find_biggest_maximal_cliques, find_maximal_cliques
from .clustering import DistanceClusterer, ProbabilisticDistanceClusterer
from .job import MergeJob, find_degenerate_sets, interaction_signature
from .manager import ConcurrentMergeManager, MergeManager, contract
from .models import MergeUpdate

__all__ = [
    "ConcurrentMergeManager",
    "DistanceClusterer",
    "MergeJob",
    "MergeManager",
    "MergeUpdate",
    "ProbabilisticDistanceClusterer",
    "contract",
    "find_biggest_maximal_cliques",
    "find_degenerate_sets",
    "find_maximal_cliques",
    "interaction_signature",
]
