"""
Error handling for the fact-check pipeline.

Provides the categorized exception taxonomy raised at the pipeline boundary.
Stages themselves are total over well-formed input and never raise.
"""

from enum import Enum


class ErrorCategory(Enum):
    """Enumeration of error categories."""
    INVALID_INPUT = "invalid_input"
    CANCELLED = "cancelled"
    CONFIGURATION_ERROR = "configuration_error"


class FactCheckError(Exception):
    """Base exception for fact-check errors with categorization."""

    def __init__(self, message: str, category: ErrorCategory, recoverable: bool = False):
        super().__init__(message)
        self.category = category
        self.recoverable = recoverable
        self.message = message

    def __str__(self):
        return f"[{self.category.value}] {self.message}"

    def to_dict(self) -> dict:
        return {
            'error': self.message,
            'category': self.category.value,
            'recoverable': self.recoverable,
        }


class InvalidInputError(FactCheckError):
    """Raised when the text to analyze is missing, empty or whitespace-only."""

    def __init__(self, message: str = "Text to analyze must be a non-empty string"):
        super().__init__(message, ErrorCategory.INVALID_INPUT, recoverable=False)


class AnalysisCancelledError(FactCheckError):
    """Raised when a caller cancels an analysis between stages."""

    def __init__(self, stage: str):
        super().__init__(f"Analysis cancelled before stage '{stage}'",
                         ErrorCategory.CANCELLED, recoverable=True)
        self.stage = stage


class KnowledgeBaseError(FactCheckError):
    """Raised when a knowledge base definition is malformed."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.CONFIGURATION_ERROR, recoverable=False)
