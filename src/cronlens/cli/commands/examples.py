# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command listing common schedules."""

from __future__ import annotations

import json

from cronlens.cli.options import JsonOption, write_output


def examples_command(json_output: JsonOption = False) -> None:
    """Show common cron expressions and what they mean."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cron.generator import get_examples

    examples = get_examples()
    if json_output:
        write_output(json.dumps([e.model_dump() for e in examples], indent=2))
        return
    fmt.format_examples(examples)
