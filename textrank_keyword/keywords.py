"""Public entry points for single-document TextRank keyword extraction."""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence
from .config import TextRankConfig, get_default_config
from .datatypes import CooccurrenceGraph, ScoreMap, TaggedTerm
from .errors import InvalidArgumentError
from .graphing import build_cooccurrence_graph
from .preprocessing import tokenize
from .scoring import RankResult, rank_vertices_with_stats
from .selection import top_k

Tokenizer = Callable[[str], Sequence[TaggedTerm]]


class TextRankKeyword:
    """Keyword extractor bound to a tokenizer and a configuration.

    ``config`` defaults to the process-wide configuration at call time, so
    ``configure`` also affects extractors created earlier without one.
    """

    def __init__(self, keyword_count: int = 10, tokenizer: Optional[Tokenizer] = None,
                 config: Optional[TextRankConfig] = None):
        self.keyword_count = keyword_count
        self.tokenizer = tokenizer or tokenize
        self._config = config

    @property
    def config(self) -> TextRankConfig:
        return self._config or get_default_config()

    def _terms(self, document: str) -> Sequence[TaggedTerm]:
        if document is None:
            raise InvalidArgumentError("document must not be None")
        if not isinstance(document, str):
            raise InvalidArgumentError(f"document must be str, got {type(document).__name__}")
        return self.tokenizer(document)

    def build_graph(self, terms: Sequence[TaggedTerm], cfg: Optional[TextRankConfig] = None) -> CooccurrenceGraph:
        cfg = cfg or self.config
        return build_cooccurrence_graph(terms, cfg.candidate_filter, window_size=cfg.window_size)

    def rank_terms_with_stats(self, terms: Sequence[TaggedTerm]) -> RankResult:
        cfg = self.config
        return rank_vertices_with_stats(self.build_graph(terms, cfg), cfg)

    def rank_terms(self, terms: Sequence[TaggedTerm]) -> ScoreMap:
        return self.rank_terms_with_stats(terms).scores

    def rank_all(self, document: str) -> ScoreMap:
        return self.rank_terms(self._terms(document))

    def rank_top(self, document: str, count: Optional[int] = None) -> Dict[str, float]:
        if count is None:
            count = self.keyword_count
        scores = self.rank_all(document)
        return dict(top_k(scores, count))

    def get_keywords(self, document: str) -> List[str]:
        return list(self.rank_top(document, self.keyword_count))


def extract_keywords(document: str, count: int = 10) -> List[str]:
    """Top ``count`` keywords of ``document``, best first."""
    return TextRankKeyword(keyword_count=count).get_keywords(document)

def rank_all(document: str) -> ScoreMap:
    """Score of every candidate word in ``document``."""
    return TextRankKeyword().rank_all(document)

def rank_top(document: str, count: int = 10) -> Dict[str, float]:
    """Top ``count`` words with their scores, in descending score order."""
    return TextRankKeyword().rank_top(document, count)

def score_from_terms(tagged_terms: Sequence[TaggedTerm]) -> ScoreMap:
    """Rank pre-tokenized input, skipping the tokenizer."""
    return TextRankKeyword().rank_terms(tagged_terms)
