"""
Tests for errors.py module.
"""

from factcheck.errors import (
    AnalysisCancelledError,
    ErrorCategory,
    FactCheckError,
    InvalidInputError,
    KnowledgeBaseError,
)


class TestErrorCategory:
    """Test ErrorCategory enum values."""

    def test_error_category_string_values(self):
        assert ErrorCategory.INVALID_INPUT.value == "invalid_input"
        assert ErrorCategory.CANCELLED.value == "cancelled"
        assert ErrorCategory.CONFIGURATION_ERROR.value == "configuration_error"


class TestFactCheckErrors:
    """Test the exception classes."""

    def test_base_error(self):
        error = FactCheckError("Test message", ErrorCategory.INVALID_INPUT)

        assert str(error) == "[invalid_input] Test message"
        assert error.recoverable is False
        assert isinstance(error, Exception)

    def test_invalid_input_default_message(self):
        error = InvalidInputError()

        assert error.category == ErrorCategory.INVALID_INPUT
        assert error.to_dict() == {
            'error': "Text to analyze must be a non-empty string",
            'category': 'invalid_input',
            'recoverable': False,
        }

    def test_cancelled_records_stage(self):
        error = AnalysisCancelledError("Evidence Retrieval")

        assert error.stage == "Evidence Retrieval"
        assert error.recoverable is True
        assert "Evidence Retrieval" in str(error)

    def test_knowledge_base_error(self):
        error = KnowledgeBaseError("bad record")

        assert error.category == ErrorCategory.CONFIGURATION_ERROR
        assert isinstance(error, FactCheckError)
