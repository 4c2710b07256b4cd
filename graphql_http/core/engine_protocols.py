"""Boundary Protocols — contracts between the adapter core and its collaborators.

Invariants:
    - Core NEVER imports a concrete engine or renderer
    - Engine errors are opaque to the core; format_error turns them into
      serializable records
    - identify_operation returns the operation kind ("query", "mutation",
      "subscription") or None when the operation cannot be resolved
    - execute returns {"data"?, "errors"?}: the data key is present only once
      execution actually started, even when its value is None

Design Decisions:
    - Protocol over ABC: structural subtyping, any engine with these methods fits
    - execute is the only async boundary method; it may also raise
"""

from typing import Any, Protocol


class QueryEngine(Protocol):
    """Contract for the query engine, implemented in infrastructure/."""

    def parse(self, source: str) -> Any: ...

    def validate(self, schema: Any, document: Any) -> list: ...

    async def execute(
        self,
        schema: Any,
        document: Any,
        root_value: Any = None,
        context_value: Any = None,
        variables: dict | None = None,
        operation_name: str | None = None,
    ) -> dict: ...

    def identify_operation(
        self, document: Any, operation_name: str | None,
    ) -> str | None: ...

    def format_error(self, error: BaseException) -> dict: ...


class InteractiveRenderer(Protocol):
    """Contract for the interactive document renderer."""

    def render(
        self,
        query: str | None = None,
        variables: dict | None = None,
        result: dict | None = None,
    ) -> str: ...
