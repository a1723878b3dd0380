"""Common response models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiEnvelope(BaseModel):
    """The ``{success, message}`` wrapper returned by mutating endpoints.

    The API encodes ``success`` as the *string* ``"true"``/``"false"``.
    The raw value is kept as sent so that a JSON boolean ``true`` is not
    mistaken for the string form.
    """

    success: Any = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return isinstance(self.success, str) and self.success == "true"


class Page(BaseModel, Generic[T]):
    """Paginated list wrapper.

    Format: ``{"count": n, "next": url|null, "previous": url|null, "results": [...]}``
    """

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[T] = Field(default_factory=list)
