"""Create the main Typer CLI app."""

import logging
from typing import Annotated, Any

import typer

from linediff.api.diff.cmd_diff import cmd_diff
from linediff.api.diff.DiffConfig import DiffConfig
from linediff.api.diff.DiffConfigError import DiffConfigError
from linediff.cli._run_single_execution import _run_single_execution
from linediff.cli.display.CLIDisplay import CLIDisplay
from linediff.utils.configure_logging import configure_logging

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Compare two files line by line",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def diff(
        file_a: Annotated[str, typer.Argument(help="First file, or - for standard input")],
        file_b: Annotated[str, typer.Argument(help="Second file, or - for standard input")],
        unified: Annotated[
            int | None, typer.Option("--unified", "-U", help="Unified diff context lines")
        ] = None,
        full: Annotated[bool, typer.Option("--full", help="Show every line instead of context hunks")] = False,
        engine: Annotated[
            str | None, typer.Option("--engine", "-e", help="Engine: auto, lcs, hirschberg, myers")
        ] = None,
        ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Ignore case differences")] = False,
        ignore_trailing_space: Annotated[
            bool, typer.Option("--ignore-trailing-space", "-Z", help="Ignore whitespace at line end")
        ] = False,
        strip_trailing_cr: Annotated[
            bool, typer.Option("--strip-trailing-cr", "--ignore-eol", help="Ignore line terminator differences")
        ] = False,
        brief: Annotated[bool, typer.Option("--brief", "-q", help="Only report whether the files differ")] = False,
        color: Annotated[bool, typer.Option("--color/--no-color", help="Colorize diff output")] = False,
        display_format: Annotated[
            str, typer.Option("--display", "-d", help="Output format: text, json or yaml")
        ] = "text",
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show progress and debug logging")] = False,
    ) -> None:
        """Compare FILE_A and FILE_B line by line."""
        display = CLIDisplay(color=color)

        if display_format not in ("text", "json", "yaml"):
            display.error(f"--display must be 'text', 'json' or 'yaml', got '{display_format}'")
            raise typer.Exit(EXIT_TROUBLE)

        configure_logging(logging.DEBUG if verbose else logging.INFO)

        overrides: dict[str, Any] = {}
        if unified is not None:
            overrides["context_lines"] = unified
        if engine is not None:
            overrides["engine"] = engine
        if ignore_case:
            overrides["ignore_case"] = True
        if ignore_trailing_space:
            overrides["ignore_trailing_whitespace"] = True
        if strip_trailing_cr:
            overrides["ignore_eol"] = True

        try:
            base = DiffConfig.load()
            config = DiffConfig.from_config_dict({"diff": {**base.model_dump(), **overrides}})
        except DiffConfigError as e:
            display.error("Invalid configuration", details="; ".join(e.errors))
            raise typer.Exit(EXIT_TROUBLE) from e

        result = _run_single_execution(cmd_diff, (config, file_a, file_b), {"full": full}, display, verbose)
        if not result.success:
            raise typer.Exit(EXIT_TROUBLE)

        identical = result.output["metadata"]["is_identical"]
        if display_format != "text":
            display.json_output(result.output, format=display_format)
        elif brief:
            if not identical:
                print(f"Files {file_a} and {file_b} differ")
        else:
            display.diff_output(result.output["unified_diff"])

        raise typer.Exit(EXIT_IDENTICAL if identical else EXIT_DIFFERENT)

    return app
