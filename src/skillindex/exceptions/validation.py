"""Structured validation errors reported by ``skillindex validate-config``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One configuration problem with a stable code and where it was found."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None
    column: int | None = None

    @property
    def location(self) -> str:
        """Return ``path[:line[:column]]`` for display."""
        if self.line is None:
            return self.path
        if self.column is None:
            return f"{self.path}:{self.line}"
        return f"{self.path}:{self.line}:{self.column}"

    def format(self) -> str:
        """Render as a single human-readable line."""
        text = f"[{self.code}] {self.location} {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, path, field and line so output is stable."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field, e.line or 0))


def format_errors(errors: list[ValidationError]) -> str:
    """Render errors one per line in stable order."""
    return "\n".join(error.format() for error in sort_errors(errors))
