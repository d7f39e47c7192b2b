"""Tests for custom exception classes."""

from renderer_views.exceptions import (
    ConfigurationException,
    ContextBindingMissingException,
    ErrorCode,
    ModelAttributeConflictException,
    ViewException,
    ViewNotFoundException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.VIEW_ERROR == "VIEW_ERROR"
        assert ErrorCode.VIEW_NOT_FOUND == "VIEW_NOT_FOUND"
        assert ErrorCode.CONFIG_MISSING == "CONFIG_MISSING"


class TestViewException:
    """Tests for ViewException."""

    def test_view_exception_basic(self):
        """Test creating basic view exception."""
        exc = ViewException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.VIEW_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_view_exception_with_details(self):
        """Test view exception with details."""
        exc = ViewException(message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"k": "v"})

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["k"] == "v"


class TestConfigurationExceptions:
    """Tests for configuration errors."""

    def test_configuration_exception_defaults(self):
        exc = ConfigurationException("bad config")

        assert exc.code == ErrorCode.CONFIG_ERROR
        assert isinstance(exc, ViewException)

    def test_context_binding_missing(self):
        exc = ContextBindingMissingException()

        assert exc.code == ErrorCode.CONFIG_MISSING
        assert exc.status_code == 500
        assert isinstance(exc, ConfigurationException)


class TestViewNotFoundException:
    """Tests for ViewNotFoundException."""

    def test_view_not_found(self):
        exc = ViewNotFoundException("home", details={"locale": "fr"})

        assert exc.view_name == "home"
        assert exc.status_code == 404
        assert exc.code == ErrorCode.VIEW_NOT_FOUND
        assert "home" in exc.message
        assert exc.details == {"locale": "fr"}


class TestModelAttributeConflictException:
    """Tests for ModelAttributeConflictException."""

    def test_model_conflict(self):
        exc = ModelAttributeConflictException("user", "session")

        assert exc.attribute == "user"
        assert exc.source == "session"
        assert exc.code == ErrorCode.MODEL_CONFLICT
        assert exc.details == {"attribute": "user", "source": "session"}
