"""
Utilities package for the fact-check project.
"""

from .text_utils import normalize_text, tokenize, split_sentences

__all__ = [
    # Text utilities
    'normalize_text', 'tokenize', 'split_sentences',
]
