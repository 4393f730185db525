from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from .datatypes import CooccurrenceGraph, ScoreMap
from .config import TextRankConfig, get_default_config

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RankResult:
    scores: ScoreMap
    iterations: int
    converged: bool
    max_diff: float

def sigmoid(value: float) -> float:
    return 1.0 / (1.0 + math.exp(-value))

def initial_scores(graph: CooccurrenceGraph) -> ScoreMap:
    # degree squashed into (0, 1)
    return {w: sigmoid(len(nbrs)) for w, nbrs in graph.adjacency.items()}

def propagate(graph: CooccurrenceGraph, scores: ScoreMap, damping_factor: float = 0.85) -> Tuple[ScoreMap, float]:
    """
    Run one synchronous round of damped propagation.

    WS(Vi) = (1-d) + d × Σ(WS(Vj)/deg(Vj)) over the neighbours Vj of Vi

    Every new score is computed from ``scores`` only; the input map is left
    untouched.

    Returns:
        (new_scores, max_diff) where max_diff is the largest absolute change
    """
    d = damping_factor
    degree: Dict[str, int] = {w: len(nbrs) for w, nbrs in graph.adjacency.items()}
    new_scores: ScoreMap = {}
    max_diff = 0.0
    for key, nbrs in graph.adjacency.items():
        total = 1.0 - d
        for element in nbrs:
            size = degree.get(element, 0)
            if element == key or size == 0:
                continue
            total += d / size * scores.get(element, 0.0)
        new_scores[key] = total
        max_diff = max(max_diff, abs(total - scores.get(key, 0.0)))
    return new_scores, max_diff

def rank_vertices_with_stats(graph: CooccurrenceGraph, config: Optional[TextRankConfig] = None) -> RankResult:
    cfg = config or get_default_config()
    scores = initial_scores(graph)
    max_diff = 0.0
    iterations = 0
    converged = False
    for _ in range(cfg.max_iterations):
        scores, max_diff = propagate(graph, scores, cfg.damping_factor)
        iterations += 1
        if max_diff <= cfg.min_diff:
            converged = True
            break
    if not converged and len(graph) > 0:
        logger.debug("iteration cap %d reached, max_diff=%.6f", cfg.max_iterations, max_diff)
    logger.debug("ranked %d vertices in %d iterations (converged=%s, max_diff=%.6f)",
                 len(scores), iterations, converged, max_diff)
    return RankResult(scores=scores, iterations=iterations, converged=converged, max_diff=max_diff)

def rank_vertices(graph: CooccurrenceGraph, config: Optional[TextRankConfig] = None) -> ScoreMap:
    return rank_vertices_with_stats(graph, config).scores
