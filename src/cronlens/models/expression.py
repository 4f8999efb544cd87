# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parsed field and parsed expression value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from cronlens.core.constants import FIELD_ORDER, ParseStatus


class FieldDefinition(BaseModel):
    """Static bounds and named values for one of the five cron positions."""

    model_config = ConfigDict(frozen=True)

    name: str
    min: int
    max: int
    # Ordered (name, value) pairs substituted before numeric parsing
    named_values: tuple[tuple[str, int], ...] = ()


class ParsedField(BaseModel):
    """One field of an expression, reduced to its concrete value set."""

    model_config = ConfigDict(frozen=True)

    values: tuple[int, ...] = ()
    raw: str
    out_of_range: tuple[int, ...] = ()
    invalid: tuple[str, ...] = ()

    @property
    def is_wildcard(self) -> bool:
        return self.raw == "*"

    @property
    def has_step(self) -> bool:
        return "/" in self.raw


class ParsedExpression(BaseModel):
    """Result of parsing a full expression.

    ``status`` is the discriminant.  ``fields`` is populated for ``ok`` and
    ``field_error`` results, and is ``None`` for ``reboot`` and
    ``structural_error``.
    """

    model_config = ConfigDict(frozen=True)

    status: ParseStatus
    original: str
    fields: dict[str, ParsedField] | None = None
    errors: list[str] = Field(default_factory=list)
    suggestion: str | None = None
    seconds_ignored: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return self.status in (ParseStatus.OK, ParseStatus.REBOOT)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_reboot(self) -> bool:
        return self.status == ParseStatus.REBOOT

    def field(self, name: str) -> ParsedField:
        if self.fields is None:
            raise KeyError(f"expression has no fields: {self.original!r}")
        return self.fields[name]

    def canonical(self) -> str:
        """Return the five raw field texts joined as a standard expression."""
        if self.fields is None:
            return self.original.strip()
        return " ".join(self.fields[name].raw for name in FIELD_ORDER)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    suggestion: str | None = None
