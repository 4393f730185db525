from __future__ import annotations
import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Sequence, Set
from .datatypes import CooccurrenceGraph, TaggedTerm
from .preprocessing import default_candidate_filter

logger = logging.getLogger(__name__)

def filter_words(terms: Sequence[TaggedTerm], candidate_filter: Optional[Callable[[TaggedTerm], bool]] = None) -> List[str]:
    # may contain duplicates; tags are dropped here
    keep = candidate_filter or default_candidate_filter
    return [t.word for t in terms if keep(t)]

def build_adjacency(words: Sequence[str], window_size: int = 5) -> Dict[str, Set[str]]:
    """Link every word to the ``window_size - 1`` included words before it."""
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")
    adjacency: Dict[str, Set[str]] = {}
    window: Deque[str] = deque()
    for w in words:
        if w not in adjacency:
            adjacency[w] = set()
        if len(window) >= window_size:
            window.popleft()
        for q in window:
            if q == w:
                continue
            adjacency[w].add(q)
            adjacency[q].add(w)
        window.append(w)
    return adjacency

def build_cooccurrence_graph(terms: Sequence[TaggedTerm],
                             candidate_filter: Optional[Callable[[TaggedTerm], bool]] = None,
                             window_size: int = 5) -> CooccurrenceGraph:
    words = filter_words(terms, candidate_filter)
    adjacency = build_adjacency(words, window_size=window_size)
    graph = CooccurrenceGraph(adjacency=dict(sorted(adjacency.items())))
    logger.debug("built co-occurrence graph: %d words in, %d vertices, %d edges",
                 len(words), len(graph), graph.edge_count)
    return graph
