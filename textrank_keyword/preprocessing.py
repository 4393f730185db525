from __future__ import annotations
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

import nltk

from .datatypes import TaggedTerm
from .errors import TokenizationError


RE_HEX     = re.compile(r'^[0-9a-fA-F]{16,}$')           # long hex (hashes)
RE_UUID    = re.compile(r'^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$')
RE_KEYLIKE = re.compile(r"^(?=.*\d)(?=.*[A-Za-z])[A-Za-z0-9]+$")
RE_NUMBER  = re.compile(r'^\d+(?:st|nd|rd|th|s)?$', re.I)

# Tags produced by the default tokenizer
TAG_NOUN = "n"         # content word
TAG_NUMERAL = "m"
TAG_PUNCT = "w"
TAG_FUNCTION = "u"     # stopword / function word
TAG_NOISE = "x"

def is_noise_token(tok: str) -> bool:
    """True for UUIDs, hashes and long letter+digit runs such as API keys."""
    if not tok:
        return True
    if RE_UUID.match(tok) or (RE_HEX.match(tok) and len(tok) >= 24):
        return True
    # words of 20+ characters mixing letters and digits
    return len(tok) >= 20 and RE_KEYLIKE.match(tok) is not None

# words (with an optional apostrophe part), UUIDs, or a single punctuation mark
_TOKEN_RE = re.compile(r"""[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}|\w+(?:'\w+)?|[^\w\s]""")

STOPWORDS = frozenset({
    # minimal English stopword set (extend as needed)
    'the','a','an','and','or','but','if','then','else','for','to','of','in','on','at','by','with','as',
    'is','are','was','were','be','been','being','this','that','these','those','it','its','from','into',
    'we','you','they','he','she','i','me','my','your','our','their','his','her','them','us','do','does',
    'did','not','no','so','than','too','very','can','could','should','would','will','shall',
    'has','have','had','which','who','what','when','where','how','all','also','there','about',
})

@dataclass(frozen=True)
class TokenizerConfig:
    lowercase: bool = True
    stopwords: FrozenSet[str] = STOPWORDS

def tag_token(tok: str, stopwords: FrozenSet[str] = STOPWORDS) -> str:
    if not any(ch.isalnum() for ch in tok):
        return TAG_PUNCT
    if RE_NUMBER.match(tok):
        return TAG_NUMERAL
    if is_noise_token(tok):
        return TAG_NOISE
    if tok.lower() in stopwords:
        return TAG_FUNCTION
    return TAG_NOUN

def tokenize(text: str, cfg: Optional[TokenizerConfig] = None) -> List[TaggedTerm]:
    """Split ``text`` into tagged terms, punctuation included."""
    if not isinstance(text, str):
        raise TokenizationError(f"expected str, got {type(text).__name__}")
    cfg = cfg or TokenizerConfig()
    terms: List[TaggedTerm] = []
    for m in _TOKEN_RE.finditer(text):
        tok = m.group(0)
        tag = tag_token(tok, cfg.stopwords)
        word = tok.lower() if cfg.lowercase else tok
        terms.append(TaggedTerm(word=word, tag=tag))
    return terms

def nltk_tokenize(text: str, lowercase: bool = True) -> List[TaggedTerm]:
    """Tokenize and POS-tag with NLTK (Penn Treebank tags).

    Needs the ``punkt`` and ``averaged_perceptron_tagger`` data packages.
    """
    if not isinstance(text, str):
        raise TokenizationError(f"expected str, got {type(text).__name__}")
    try:
        tagged = nltk.pos_tag(nltk.word_tokenize(text))
    except LookupError as e:
        raise TokenizationError(f"NLTK data not available: {e}") from e
    return [TaggedTerm(word=w.lower() if lowercase else w, tag=t) for w, t in tagged]


@dataclass(frozen=True)
class TagFilter:
    """Candidate filter deciding by tag prefix (and optionally by word)."""

    excluded_prefixes: Tuple[str, ...] = ()
    allowed_prefixes: Optional[Tuple[str, ...]] = None
    stopwords: FrozenSet[str] = frozenset()
    min_length: int = 1

    def __call__(self, term: TaggedTerm) -> bool:
        tag = term.tag or ""
        if self.allowed_prefixes is not None and not tag.startswith(self.allowed_prefixes):
            return False
        if self.excluded_prefixes and tag.startswith(self.excluded_prefixes):
            return False
        if len(term.word) < self.min_length:
            return False
        return term.word.lower() not in self.stopwords

default_candidate_filter = TagFilter(excluded_prefixes=(TAG_PUNCT, TAG_FUNCTION, TAG_NUMERAL, TAG_NOISE))

# for nltk_tokenize output: nouns, adjectives, verbs
penn_candidate_filter = TagFilter(allowed_prefixes=("NN", "JJ", "VB"), stopwords=STOPWORDS)
