"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class SearchStaxError(Exception):
    """Base exception for searchstax-cli.

    ``context`` tags the step that failed (``transport``, ``decode``,
    ``rejection``, ``poll``...) and prefixes the rendered message.
    """

    exit_code: int = 1

    def __init__(self, message: str = "", *, context: str | None = None) -> None:
        self.message = message
        self.context = context
        super().__init__(f"{context}: {message}" if context else message)


class TransportError(SearchStaxError):
    """Network-level failure talking to the API."""

    exit_code = 2


class ConfigurationError(SearchStaxError):
    """No usable host, credentials or account configured."""

    exit_code = 6


class RemoteError(SearchStaxError):
    """The API answered with a non-2xx status."""

    exit_code = 8

    def __init__(
        self, status_code: int, body: str = "", *, context: str | None = "transport",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"status: {status_code}, body: {body}", context=context)


class AuthenticationError(RemoteError):
    """Authentication failed (401/403)."""

    exit_code = 3


class NotFoundError(RemoteError):
    """Resource not found (404)."""

    exit_code = 4


class DecodeError(SearchStaxError):
    """Response body is not JSON of the expected shape."""

    exit_code = 9

    def __init__(self, message: str, *, context: str | None = "decode") -> None:
        super().__init__(message, context=context)


class RemoteRejection(SearchStaxError):
    """The API envelope reported ``success`` other than ``"true"``."""

    exit_code = 10

    def __init__(self, message: str, *, context: str | None = "rejection") -> None:
        super().__init__(message, context=context)


class ProvisioningFailed(SearchStaxError):
    """The backend reported ``Failed`` while waiting for convergence."""

    exit_code = 11

    def __init__(self, status: str, *, context: str | None = "poll") -> None:
        self.status = status
        super().__init__(f"operation failed with status: {status}", context=context)


class PollTimeout(SearchStaxError):
    """Convergence was not observed within the configured maximum wait."""

    exit_code = 12

    def __init__(self, description: str, waited: float, attempts: int) -> None:
        self.waited = waited
        self.attempts = attempts
        super().__init__(
            f"{description} did not converge after {attempts} polls ({waited:.0f}s)",
            context="poll",
        )


class UpdateFailed(SearchStaxError):
    """A delete-then-create update failed in one of its two phases.

    ``phase == "delete"`` means nothing was recreated. With
    ``delete_accepted`` unset the original resource was left as it was;
    with it set the backend accepted the deletion but it was never confirmed,
    so the original may be partly torn down. ``phase == "create"`` means the
    original was removed and the replacement does not exist.
    """

    exit_code = 13

    def __init__(
        self, phase: str, cause: SearchStaxError, *, delete_accepted: bool = False,
    ) -> None:
        self.phase = phase
        self.cause = cause
        self.delete_accepted = delete_accepted
        if phase == "create":
            detail = "resource was deleted but could not be recreated"
        elif delete_accepted:
            detail = "deletion accepted but not confirmed"
        else:
            detail = "resource was left untouched"
        super().__init__(f"{cause} ({detail})", context=f"update/{phase}")


def error_handler(func: F) -> F:
    """Decorator that catches SearchStaxError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SearchStaxError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
