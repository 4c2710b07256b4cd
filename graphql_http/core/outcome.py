"""Outcome Types — the tagged result of one request, consumed by the response formatter.

Invariants:
    - Exactly one variant per request: Success | ValidationFailure | ProtocolFailure
    - Success.has_data is a key-existence flag, independent of the value of data
      (data=None with has_data=True still answers 200)
    - RenderInteractive is a render instruction, not an Outcome
    - All types are frozen: created once, never mutated
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Engine ran (or failed while running); errors are already formatted."""
    data: Any = None
    errors: list[dict] = field(default_factory=list)
    has_data: bool = False

    def to_result(self) -> dict:
        """Result envelope: data key only when present, errors only when non-empty."""
        result: dict[str, Any] = {}
        if self.has_data:
            result["data"] = self.data
        if self.errors:
            result["errors"] = self.errors
        return result


@dataclass(frozen=True)
class ValidationFailure:
    """Schema rejected the document; execution was never attempted."""
    errors: list[dict]

    def to_result(self) -> dict:
        return {"errors": self.errors}


@dataclass(frozen=True)
class ProtocolFailure:
    """Request shape or policy violation with an explicit HTTP status."""
    message: str
    status: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    code: str | None = None
    category: str | None = None


Outcome = Union[Success, ValidationFailure, ProtocolFailure]


@dataclass(frozen=True)
class RenderInteractive:
    """Instruction to answer with the interactive document instead of JSON.

    status is the HTTP status the page is served with: 200 for the empty
    shell and the preset shell, the outcome's status after execution.
    """
    query: str | None = None
    variables: dict | None = None
    result: dict | None = None
    status: int = 200
