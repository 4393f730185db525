from __future__ import annotations

import pytest

from textrank_keyword import (
    InvalidArgumentError,
    TaggedTerm,
    TextRankConfig,
    TextRankKeyword,
    TokenizationError,
    extract_keywords,
    rank_all,
    rank_top,
    score_from_terms,
)

DOC = (
    "Compatibility of systems of linear constraints over the set of natural numbers. "
    "Criteria of compatibility of a system of linear Diophantine equations, strict inequations, "
    "and nonstrict inequations are considered. Upper bounds for components of a minimal set of "
    "solutions and algorithms of construction of minimal generating sets of solutions for all "
    "types of systems are given. These criteria and the corresponding algorithms for constructing "
    "a minimal supporting set of solutions can be used in solving all the considered types of "
    "systems and systems of mixed types."
)


def test_extract_keywords_returns_best_words_first() -> None:
    keywords = extract_keywords(DOC, 5)
    assert len(keywords) == 5
    scores = rank_all(DOC)
    assert [scores[w] for w in keywords] == sorted((scores[w] for w in keywords), reverse=True)
    best = max(scores.values())
    assert scores[keywords[0]] == best


def test_rank_top_is_the_largest_slice_of_rank_all() -> None:
    everything = rank_all(DOC)
    top = rank_top(DOC, 4)
    assert list(top.values()) == sorted(top.values(), reverse=True)
    for word, score in top.items():
        assert everything[word] == score
    threshold = min(top.values())
    assert all(score <= threshold for word, score in everything.items() if word not in top)


def test_rank_top_with_large_count_equals_sorted_rank_all() -> None:
    everything = rank_all(DOC)
    top = rank_top(DOC, len(everything) + 10)
    expected = sorted(everything.items(), key=lambda kv: (-kv[1], kv[0]))
    assert list(top.items()) == expected


def test_stopwords_and_punctuation_never_rank() -> None:
    scores = rank_all(DOC)
    for word in ("of", "the", "and", ".", ","):
        assert word not in scores


def test_empty_document_gives_empty_results() -> None:
    assert extract_keywords("", 5) == []
    assert rank_all("") == {}
    assert rank_top("  ...  ", 3) == {}


def test_none_document_fails_fast() -> None:
    with pytest.raises(InvalidArgumentError):
        extract_keywords(None, 5)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        rank_all(None)  # type: ignore[arg-type]


def test_non_text_document_fails_before_tokenization() -> None:
    calls = []

    def recording(text: str) -> list[TaggedTerm]:
        calls.append(text)
        return []

    extractor = TextRankKeyword(tokenizer=recording)
    with pytest.raises(InvalidArgumentError, match="bytes"):
        extractor.rank_all(b"bytes are not text")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        rank_top(123, 3)  # type: ignore[arg-type]
    assert calls == []


def test_tokenization_error_propagates() -> None:
    def broken(text: str) -> list[TaggedTerm]:
        raise TokenizationError("malformed input")

    with pytest.raises(TokenizationError, match="malformed input"):
        TextRankKeyword(tokenizer=broken).get_keywords("anything")


def test_score_from_terms_skips_tokenizer() -> None:
    terms = [TaggedTerm(w, "n") for w in ("natural", "language", "processing", "natural", "language")]
    terms.insert(1, TaggedTerm(",", "w"))
    scores = score_from_terms(terms)
    assert set(scores) == {"natural", "language", "processing"}


def test_extractor_uses_injected_tokenizer_and_config() -> None:
    def whitespace(text: str) -> list[TaggedTerm]:
        return [TaggedTerm(w, "n") for w in text.split()]

    extractor = TextRankKeyword(
        keyword_count=2,
        tokenizer=whitespace,
        config=TextRankConfig(window_size=2, candidate_filter=lambda t: len(t.word) > 1),
    )
    # with window 2 the graph is the path a1 - hub - b1 - hub - c1 ... so hub dominates
    keywords = extractor.get_keywords("aa hub bb hub cc hub dd x")
    assert keywords[0] == "hub"
    assert len(keywords) == 2
    assert "x" not in extractor.rank_all("aa hub bb hub cc hub dd x")


def test_default_keyword_count_is_ten() -> None:
    extractor = TextRankKeyword()
    assert extractor.keyword_count == 10
    assert len(extractor.get_keywords(DOC)) == 10
    assert list(extractor.rank_top(DOC)) == extractor.get_keywords(DOC)
