# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Result models for comparison, generation, conversion and date testing."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FieldDifference(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    first: str
    second: str


class Descriptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    first: str
    second: str


class ComparisonResult(BaseModel):
    """Field-by-field diff of two expressions plus an occurrence overlap count."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str | None = None
    same: bool = False
    differences: list[FieldDifference] = Field(default_factory=list)
    similarities: list[str] = Field(default_factory=list)
    overlap: int = 0
    descriptions: Descriptions | None = None


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    expression: str | None = None
    description: str | None = None
    error: str | None = None
    suggestion: str | None = None


class Example(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    expression: str


class ConversionResult(BaseModel):
    """Outcome of converting to or from a foreign scheduler syntax.

    ``exact`` is False for best-effort conversions whose output may not be
    equivalent to the input; ``note`` then explains the caveat.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    format: str | None = None
    result: str | None = None
    expression: str | None = None
    error: str | None = None
    note: str | None = None
    description: str | None = None
    exact: bool = True


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    instant: datetime
    matches: bool
