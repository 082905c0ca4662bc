"""
Translate failures of the language-model client into the application's error taxonomy.

The client libraries expose structured information: `openai` and `anthropic` raise
`APIStatusError` with an HTTP `status_code` (and, for OpenAI, an error `code` such as
"insufficient_quota"), and `google.genai` raises `APIError` with an integer `code`
and a `status` name. That information is used whenever it is present. Only errors
that carry none of it (plain exceptions, connection errors) are classified by looking
at their message text.
"""

from typing import Optional

from knowledge_qa.config import CREDENTIAL_ENV_VAR
from knowledge_qa.exceptions import (
    AuthenticationFailedError,
    LLMServiceError,
    MisconfiguredCredentialsError,
    QuotaExceededError,
)

QUOTA_STATUS_CODES = {429}
AUTH_STATUS_CODES = {401, 403}

QUOTA_ERROR_CODES = {"insufficient_quota", "rate_limit_exceeded", "RESOURCE_EXHAUSTED"}
AUTH_ERROR_CODES = {"invalid_api_key", "UNAUTHENTICATED", "PERMISSION_DENIED"}


def _http_status(error: BaseException) -> Optional[int]:
    for attr in ("status_code", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _error_codes(error: BaseException) -> set:
    codes = set()
    for attr in ("code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, str) and value:
            codes.add(value)
    return codes


def _classify_structured(status: Optional[int], codes: set) -> Optional[LLMServiceError]:
    details = {"status_code": status} if status is not None else {}

    if status in QUOTA_STATUS_CODES or codes & QUOTA_ERROR_CODES:
        return QuotaExceededError(details)

    if status in AUTH_STATUS_CODES or codes & AUTH_ERROR_CODES:
        return AuthenticationFailedError(details)

    return None


def _classify_message(message: str, credential_env_var: str) -> Optional[LLMServiceError]:
    if "429" in message or "insufficient_quota" in message:
        return QuotaExceededError()

    if "401" in message or "authentication" in message:
        return AuthenticationFailedError()

    if credential_env_var in message:
        return MisconfiguredCredentialsError(credential_env_var)

    return None


def classify_llm_error(
    error: BaseException, credential_env_var: str = CREDENTIAL_ENV_VAR
) -> Optional[LLMServiceError]:
    """
    Map an exception raised while calling the model to an `LLMServiceError` subclass.

    Args:
        error (BaseException): The exception raised by the provider.
        credential_env_var (str): Name of the credential variable; a message mentioning
            it points at missing or broken configuration.

    Returns:
        Optional[LLMServiceError]: The classified error, or None when the failure does not
            fall into a known category and should be re-raised unchanged.
    """
    if isinstance(error, LLMServiceError):
        return error

    status = _http_status(error)
    codes = _error_codes(error)

    if status is not None or codes:
        return _classify_structured(status, codes)

    return _classify_message(str(error), credential_env_var)
