"""Custom exceptions for the LectureQA application."""

from typing import Any


class LectureQAException(Exception):
    """Base exception for all LectureQA errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(LectureQAException):
    """Resource not found."""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            error_code="NOT_FOUND",
            details={
                "resource": resource,
                "resource_id": str(resource_id),
                **(details or {}),
            },
        )


class DomainValidationError(LectureQAException):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **(details or {})} if field else details,
        )


class UnauthorizedError(LectureQAException):
    """No authenticated user on the request."""

    def __init__(self, message: str = "ログインが必要です") -> None:
        super().__init__(message=message, error_code="UNAUTHORIZED")


class ForbiddenError(LectureQAException):
    """Authenticated user may not perform the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, error_code="FORBIDDEN")


class ConfigurationError(LectureQAException):
    """Required server configuration is missing."""

    def __init__(self, setting: str) -> None:
        super().__init__(
            message=f"{setting}が設定されていません",
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting},
        )


class ExternalServiceError(LectureQAException):
    """External LLM provider failed or returned nothing usable."""

    def __init__(
        self,
        service: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{service} APIエラー: {message}",
            error_code="EXTERNAL_SERVICE_ERROR",
            details={"service": service, **(details or {})},
        )


class ProviderTimeoutError(LectureQAException):
    """Provider did not answer within the handler deadline."""

    def __init__(self, service: str, timeout_seconds: float) -> None:
        super().__init__(
            message=f"{service}: リクエストがタイムアウトしました",
            error_code="TIMEOUT",
            details={"service": service, "timeout_seconds": timeout_seconds},
        )
