from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shared.contracts import ErrorResponse


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes = b""
    reason_phrase: str = ""

    @property
    def is_2xx(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class Success:
    http_status: int
    body: Any


@dataclass(frozen=True)
class Failure:
    http_status: int
    message: str
    trace_id: str | None = None
    error_code: str | None = None
    error_details: list[dict[str, Any]] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        return ErrorResponse(
            message=self.message,
            trace_id=self.trace_id,
            error_code=self.error_code,
            error_details=self.error_details or None,
        ).to_body()


NormalizedOutcome = Success | Failure
