"""Text utilities: normalization, tokenization and sentence splitting.

This module centralizes the lexical helpers used across the fact-check
pipeline so every stage tokenizes and segments text the same way.
"""
import re
import unicodedata
from typing import Iterable, List, Sequence

# Every run of terminators ends a sentence except a "." between two digits,
# so decimals like "1.1" stay inside their sentence.
_SENTENCE_BOUNDARY = re.compile(r'(?<!\d)[.!?]+|[.!?]*[!?][.!?]*|[.!?]+(?!\d)')
_NON_WORD = re.compile(r'\W+')


def normalize_text(text: str) -> str:
    """Normalize text for safe pattern matching.

    Steps:
    - If input is falsy, return empty string
    - Normalize to NFKD to decompose combined characters
    - Lowercase using Unicode-aware lower()
    - Recompose to NFC for stable representation
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize('NFKD', text)
    lowered = decomposed.lower()
    return unicodedata.normalize('NFC', lowered)


def tokenize(text: str) -> List[str]:
    """Lowercase and split on runs of non-word characters, dropping empties."""
    return [token for token in _NON_WORD.split(normalize_text(text)) if token]


def split_sentences(text: str, strip: bool = True) -> List[str]:
    """Split text into non-blank sentences.

    With ``strip=False`` each fragment keeps the whitespace around it as it
    appeared in the text.
    """
    if not text:
        return []
    fragments = [fragment for fragment in _SENTENCE_BOUNDARY.split(text) if fragment.strip()]
    if not strip:
        return fragments
    return [fragment.strip() for fragment in fragments]


def count_shared_tokens(tokens: Sequence[str], other: Iterable[str]) -> int:
    """Count tokens (duplicates included) that also occur in ``other``."""
    vocabulary = set(other)
    return sum(1 for token in tokens if token in vocabulary)


def overlap_ratio(tokens: Sequence[str], other: Sequence[str], denominator: int) -> float:
    """Shared-token count divided by ``denominator``; 0.0 when it is zero."""
    if denominator <= 0:
        return 0.0
    return count_shared_tokens(tokens, other) / denominator


def symmetric_overlap(tokens: Sequence[str], other: Sequence[str]) -> float:
    """Shared tokens over the longer of the two token lists."""
    return overlap_ratio(tokens, other, max(len(tokens), len(other)))
