# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Tests for client error classes.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelClientErrorContext
- Status codes of transient and application errors
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from sondra_client.errors import (
    ApplicationError,
    ConfigurationError,
    ModelClientErrorContext,
    OfflineError,
    ResponseDecodeError,
    SondraClientError,
    TransientNetworkError,
)


class TestModelClientErrorContext:
    """Tests for ModelClientErrorContext model."""

    def test_defaults_are_empty(self) -> None:
        """Test that every context field defaults to None."""
        context = ModelClientErrorContext()
        assert context.operation is None
        assert context.target_name is None
        assert context.request_id is None
        assert context.correlation_id is None

    def test_is_frozen(self) -> None:
        """Test that context fields cannot be reassigned."""
        context = ModelClientErrorContext(operation="execute")
        with pytest.raises(ValidationError):
            context.operation = "probe"  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Test that extra fields are forbidden."""
        with pytest.raises(ValidationError):
            ModelClientErrorContext(transport="http")  # type: ignore[call-arg]

    def test_accepts_correlation_id(self) -> None:
        """Test that a caller-supplied correlation id is stored."""
        correlation_id = uuid4()
        context = ModelClientErrorContext(correlation_id=correlation_id)
        assert context.correlation_id == correlation_id


class TestSondraClientError:
    """Tests for the SondraClientError base class."""

    def test_basic_instantiation(self) -> None:
        """Test that the message is stored and an empty context is created."""
        error = SondraClientError("Request failed")
        assert error.message == "Request failed"
        assert error.context == ModelClientErrorContext()
        assert error.extra == {}
        assert str(error) == "Request failed"

    def test_context_and_extra(self) -> None:
        """Test that context fields are exposed and extras are kept."""
        context = ModelClientErrorContext(
            operation="robust_call",
            target_name="http://localhost:5000/api;format=json",
            request_id=4,
        )
        error = SondraClientError("Request failed", context=context, attempt=3)
        assert error.request_id == 4
        assert error.url == "http://localhost:5000/api;format=json"
        assert error.extra == {"attempt": 3}
        assert "request_id=4" in str(error)
        assert "url=http://localhost:5000/api;format=json" in str(error)

    def test_error_chaining(self) -> None:
        """Test that errors chain with raise ... from e."""
        original = ValueError("boom")
        with pytest.raises(SondraClientError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise ConfigurationError("Invalid setting") from e
        assert exc_info.value.__cause__ is original


class TestErrorHierarchy:
    """Tests for the inheritance chain."""

    @pytest.mark.parametrize(
        ("error_class", "parent"),
        [
            (ConfigurationError, SondraClientError),
            (TransientNetworkError, SondraClientError),
            (OfflineError, TransientNetworkError),
            (ApplicationError, SondraClientError),
            (ResponseDecodeError, ApplicationError),
        ],
    )
    def test_inheritance(self, error_class: type, parent: type) -> None:
        """Test that each error derives from its documented parent."""
        assert issubclass(error_class, parent)

    def test_application_errors_are_not_transient(self) -> None:
        """Test that application errors are never classified as transient."""
        assert not issubclass(ApplicationError, TransientNetworkError)


class TestTransientNetworkError:
    """Tests for TransientNetworkError and OfflineError."""

    def test_status_is_zero(self) -> None:
        """Test that transient errors always report status 0."""
        raw = ConnectionRefusedError("refused")
        error = TransientNetworkError("No response", error=raw)
        assert error.status == 0
        assert error.error is raw

    def test_offline_without_raw_error(self) -> None:
        """Test that offline errors need no underlying exception."""
        error = OfflineError("Host reports no network connectivity")
        assert error.status == 0
        assert error.error is None


class TestApplicationError:
    """Tests for ApplicationError and ResponseDecodeError."""

    def test_status_and_body(self) -> None:
        """Test that status and parsed body are stored."""
        error = ApplicationError(
            "Request rejected", status=403, error={"reason": "bad credentials"}
        )
        assert error.status == 403
        assert error.error == {"reason": "bad credentials"}
        assert str(error).endswith("status=403")

    def test_decode_error_keeps_text(self) -> None:
        """Test that undecodable bodies are kept verbatim."""
        error = ResponseDecodeError("Expected JSON", status=200, error="<html>")
        assert error.status == 200
        assert error.error == "<html>"
