# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Value objects produced by the cron engine."""

from cronlens.models.expression import (
    FieldDefinition,
    ParsedExpression,
    ParsedField,
    ValidationResult,
)
from cronlens.models.results import (
    ComparisonResult,
    ConversionResult,
    Descriptions,
    Example,
    FieldDifference,
    GenerationResult,
    MatchResult,
)

__all__ = [
    "ComparisonResult",
    "ConversionResult",
    "Descriptions",
    "Example",
    "FieldDefinition",
    "FieldDifference",
    "GenerationResult",
    "MatchResult",
    "ParsedExpression",
    "ParsedField",
    "ValidationResult",
]
