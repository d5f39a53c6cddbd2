"""Run command once and display progress using the 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime

from linediff.api.StageResult import StageResult
from linediff.cli.display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    verbose: bool = False,
) -> StageResult:
    """Run command once, reporting announce, progress and result stages.

    Announce and progress are only shown when ``verbose``; a failed result is
    always reported. Output (stage 4) is left to the caller.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if verbose:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if verbose:
            timestamp = datetime.now().strftime("%H:%M:%S")
            display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if not result.success:
        errors = (result.output.get("error_details") or {}).get("errors", [])
        display.error(result.result, details="; ".join(errors))
    elif verbose:
        display.success(result.result)

    return result
