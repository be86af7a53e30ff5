"""Refinement of protein-protein interaction networks with homology evidence."""

from .config import PipelineParams
from .graph import DualGraph, HomologyEdge, InteractionEdge
from .pipeline import RefinementPipeline, RefinementResult

__all__ = [
    "DualGraph",
    "HomologyEdge",
    "InteractionEdge",
    "PipelineParams",
    "RefinementPipeline",
    "RefinementResult",
]
