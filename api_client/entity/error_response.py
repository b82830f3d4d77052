from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ErrorDetail:
    issue: str
    description: str = ""
    field: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"issue": self.issue, "description": self.description}


@dataclass(frozen=True)
class ErrorResponse:
    """A PayPal error body, e.g. UNPROCESSABLE_ENTITY with its issue list."""

    name: str
    message: str
    debug_id: str = ""
    status_code: int | None = None
    url: str = ""
    details: tuple[ErrorDetail, ...] = field(default_factory=tuple)

    def details_as_dicts(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self.details]


@dataclass(frozen=True)
class ErrorResponseCollection:
    errors: tuple[ErrorResponse, ...] = field(default_factory=tuple)

    def first(self) -> ErrorResponse | None:
        return self.errors[0] if self.errors else None

    def has_issue(self, issue: str) -> bool:
        return any(d.issue == issue for e in self.errors for d in e.details)
