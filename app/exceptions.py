"""Custom exceptions shared across services."""

from dataclasses import dataclass


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class ProviderUnavailableError(ServiceError):
    """Raised when the reply provider cannot produce text.

    ``reason`` is one of ``missing_credential``, ``timeout``, ``http_status``,
    ``transport``, ``malformed_payload`` or ``empty_text``.
    """

    code: str = "provider_unavailable"
    reason: str = "transport"
