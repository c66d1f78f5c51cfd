"""ToolResult and ToolError: the universal tool contract.

INVARIANT: All tool strategies return ToolResult.
A result is either ok with data, or failed with exactly one error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

from medea.services.errors import exit_code_for

if TYPE_CHECKING:
    from medea.services.errors import InvocationError


class ToolError(BaseModel):
    """Structured error payload within a ToolResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Return type of every tool invocation.

    Attributes:
        ok: Whether the tool succeeded.
        op: Name of the tool operation (e.g. ``"hash"``, ``"jwt_decode"``).
        data: Tool-specific payload on success. ``text`` holds output lines,
            ``raw`` holds bytes to be written unchanged.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True, "ser_json_bytes": "base64"}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ToolError | None = None

    @model_validator(mode="after")
    def _one_outcome(self) -> ToolResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok and self.data:
            raise ValueError("a failed result cannot carry data")
        return self

    @classmethod
    def failure(cls, op: str, exc: InvocationError) -> ToolResult:
        return cls(
            ok=False,
            op=op,
            error=ToolError(code=exc.code.value, message=exc.message, detail=exc.detail),
        )

    @property
    def exit_code(self) -> int:
        if self.ok:
            return 0
        return exit_code_for(self.error.code) if self.error else 1
