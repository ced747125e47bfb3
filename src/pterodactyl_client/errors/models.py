"""Panel error envelope models.

The panel reports failures as::

    {"errors": [{"code": "NotFoundHttpException", "status": "404", "detail": "..."}]}

Validation failures add a ``meta`` object per entry naming the offending field.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorObject(BaseModel):
    """One entry of the ``errors`` array."""

    model_config = ConfigDict(extra="allow")

    code: str | None = None  # Exception class name reported by the panel
    status: str | None = None  # HTTP status, as a string
    detail: str | None = None  # Human-readable explanation
    meta: dict[str, Any] | None = None  # Validation context (source_field, rule)


class ErrorEnvelope(BaseModel):
    """Body of a non-2xx response."""

    model_config = ConfigDict(extra="allow")

    errors: list[ErrorObject] = []

    def to_exception_message(self, status_code: int) -> str:
        """Convert the envelope to an exception message."""
        lines = [f"HTTP {status_code}"]

        for error in self.errors:
            parts = [part for part in (error.code, error.detail) if part]
            if not parts:
                continue
            line = ": ".join(parts)
            if error.meta and error.meta.get("source_field"):
                line += f" (field: {error.meta['source_field']})"
            lines.append(line)

        if len(lines) == 1:
            return f"HTTP {status_code}: Unknown API error"
        if len(lines) == 2:
            return f"{lines[0]}: {lines[1]}"
        return "\n".join(lines)
