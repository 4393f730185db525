from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

@dataclass(frozen=True)
class TaggedTerm:
    word: str
    tag: str

@dataclass
class CooccurrenceGraph:
    # word -> neighbours; keys kept in lexical order
    adjacency: Dict[str, Set[str]] = field(default_factory=dict)

    @property
    def vertices(self) -> List[str]:
        return list(self.adjacency)

    def neighbors(self, word: str) -> FrozenSet[str]:
        return frozenset(self.adjacency.get(word, ()))

    def degree(self, word: str) -> int:
        return len(self.adjacency.get(word, ()))

    def edges(self) -> List[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        for w, nbrs in self.adjacency.items():
            for q in sorted(nbrs):
                if w < q:
                    out.append((w, q))
        return out

    @property
    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self.adjacency.values()) // 2

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, word: object) -> bool:
        return word in self.adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self.adjacency)

ScoreMap = Dict[str, float]  # per-vertex rank
