"""Diff command."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import asdict
from typing import Any

from ..lines.pair_lines import pair_lines
from ..lines.read_text import read_text
from ..lines.split_lines import split_lines
from ..render.render_ops import render_ops
from ..render.render_unified import render_unified
from ..StageResult import StageResult
from ._auto_engine import select_auto_diff_engine
from .build_hunks import build_hunks
from .diff_lines import diff_lines
from .DiffConfig import DiffConfig
from .DiffMetadata import DiffMetadata
from .DiffResult import DiffResult
from .get_engine import get_engine
from .has_differences import has_differences
from .Hunk import Hunk

logger = logging.getLogger(__name__)


def _hunk_to_dict(hunk: Hunk) -> dict[str, Any]:
    return {
        "a_start": hunk.a_start,
        "a_len": hunk.a_len,
        "b_start": hunk.b_start,
        "b_len": hunk.b_len,
        "lines": [
            {"kind": line.kind.value, "text": line.text, "a_index": line.a_index, "b_index": line.b_index}
            for line in hunk.lines
        ],
    }


def cmd_diff(config: DiffConfig, target_a: str, target_b: str, full: bool = False) -> StageResult:
    """Compute a diff between two targets using an explicit config.

    Args:
        config: Diff configuration (engine, context width, normalization)
        target_a: First file path, or ``-`` for standard input
        target_b: Second file path, or ``-`` for standard input
        full: Render the whole operation stream instead of context hunks

    Returns:
        StageResult whose output is a DiffResult dict
    """

    def build_failure(message: str, errors: list[str], engine_used: str) -> DiffResult:
        metadata = DiffMetadata(
            engine_used=engine_used,
            is_identical=False,
            label_a=target_a,
            label_b=target_b,
        )
        return DiffResult(
            status="failure",
            metadata=metadata,
            hunks=[],
            unified_diff=None,
            message=message,
            error_details={"errors": errors},
        )

    def fail(result_obj: StageResult, failure: DiffResult) -> None:
        logger.warning("diff %s vs %s failed: %s", target_a, target_b, failure.message)
        result_obj.result = failure.message or "Diff failed."
        result_obj.output = asdict(failure)
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Reading inputs")

        errors: list[str] = []
        if not target_a:
            errors.append("target_a is required and must be non-empty")
        if not target_b:
            errors.append("target_b is required and must be non-empty")
        if target_a == "-" and target_b == "-":
            errors.append("standard input can only be used for one target")
        if errors:
            yield (1.0, "Failed")
            fail(result_obj, build_failure("Diff failed due to invalid inputs.", errors, config.engine))
            return

        texts: list[str] = []
        for target in (target_a, target_b):
            try:
                texts.append(read_text(target))
            except (OSError, ValueError) as exc:
                errors.append(str(exc))
        if errors:
            yield (1.0, "Failed")
            fail(result_obj, build_failure("Diff failed: could not read inputs.", errors, config.engine))
            return

        options = {
            "ignore_case": config.ignore_case,
            "ignore_trailing_whitespace": config.ignore_trailing_whitespace,
            "ignore_eol": config.ignore_eol,
        }
        a_lines = pair_lines(split_lines(texts[0]), **options)
        b_lines = pair_lines(split_lines(texts[1]), **options)

        for target, lines in ((target_a, a_lines), (target_b, b_lines)):
            if len(lines) > config.max_lines:
                errors.append(f"{target} has {len(lines)} lines (max_lines: {config.max_lines})")
        if errors:
            yield (1.0, "Failed")
            fail(result_obj, build_failure("Diff failed: input too large.", errors, config.engine))
            return

        yield (0.3, "Selecting engine")
        engine_used = config.engine
        if engine_used == "auto":
            engine_used = select_auto_diff_engine(len(a_lines), len(b_lines), config.max_table_cells)
        engine = get_engine(engine_used)
        if engine is None:
            yield (1.0, "Failed")
            fail(result_obj, build_failure(f"Unknown diff engine: {engine_used}", [engine_used], engine_used))
            return

        yield (0.5, f"Computing diff using {engine_used}")
        logger.info("diffing %s (%d lines) vs %s (%d lines) with %s",
                    target_a, len(a_lines), target_b, len(b_lines), engine_used)
        ops = diff_lines(a_lines, b_lines, engine)
        identical = not has_differences(ops)

        yield (0.8, "Building hunks")
        hunks: list[Hunk] = []
        if identical:
            rendered = ""
        elif full:
            rendered = render_ops(ops, a_lines, b_lines)
        else:
            hunks = build_hunks(ops, a_lines, b_lines, config.context_lines)
            rendered = render_unified(hunks, target_a, target_b)

        if identical:
            message = "Files are identical"
        elif full:
            message = "Files differ"
        else:
            message = f"Files differ ({len(hunks)} hunk{'s' if len(hunks) != 1 else ''})"

        result = DiffResult(
            status="success",
            metadata=DiffMetadata(
                engine_used=engine_used,
                is_identical=identical,
                label_a=target_a,
                label_b=target_b,
                line_count_a=len(a_lines),
                line_count_b=len(b_lines),
            ),
            hunks=[_hunk_to_dict(hunk) for hunk in hunks],
            unified_diff=rendered,
            message=message,
        )
        result_obj.result = message
        result_obj.output = asdict(result)
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Diffing {target_a} vs {target_b}...", progress_callback=do_work)
