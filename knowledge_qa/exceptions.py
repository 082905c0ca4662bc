"""
Exception hierarchy shared by the storage layer, the answer pipeline and the HTTP API.

Every error carries a human-readable message and the HTTP status the API answers with.
"""

from typing import Any, Dict, Optional


class KnowledgeQAError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(KnowledgeQAError):
    """Raised when an upload or a question fails validation."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(KnowledgeQAError):
    """Raised when a document id does not exist."""

    status_code = 404

    def __init__(self, document_id: str) -> None:
        super().__init__("Document not found", {"document_id": document_id})


class StorageError(KnowledgeQAError):
    """Raised when the database is unavailable or rejects an operation."""

    status_code = 500


class LLMServiceError(KnowledgeQAError):
    """Base class for failures of the external language-model service."""

    status_code = 500


class QuotaExceededError(LLMServiceError):
    status_code = 429

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            "API quota exceeded. Please check your API key and billing details.", details
        )


class AuthenticationFailedError(LLMServiceError):
    status_code = 401

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            "API authentication failed. Please verify your API key is valid.", details
        )


class MisconfiguredCredentialsError(LLMServiceError):
    status_code = 500

    def __init__(self, env_var: str, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        details["env_var"] = env_var
        super().__init__(f"API key environment variable {env_var} is not set", details)
