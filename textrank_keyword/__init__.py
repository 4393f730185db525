from .datatypes import TaggedTerm, CooccurrenceGraph, ScoreMap
from .errors import TextRankError, TokenizationError, InvalidArgumentError
from .preprocessing import TokenizerConfig, TagFilter, tokenize, nltk_tokenize, default_candidate_filter, penn_candidate_filter
from .config import TextRankConfig, get_default_config, configure, reset_default_config
from .graphing import build_cooccurrence_graph, build_adjacency, filter_words
from .scoring import RankResult, sigmoid, initial_scores, propagate, rank_vertices, rank_vertices_with_stats
from .selection import BoundedMaxHeap, top_k
from .keywords import TextRankKeyword, extract_keywords, rank_all, rank_top, score_from_terms
