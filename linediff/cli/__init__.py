"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        0 if the files are identical, 1 if they differ, 2 on trouble
    """
    import click
    import typer

    from linediff.cli._create_app import EXIT_TROUBLE, _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from linediff import __version__

        print(f"linediff {__version__}")
        return 0

    app = _create_app()
    try:
        rc = app(argv, prog_name="linediff", standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return EXIT_TROUBLE
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return EXIT_TROUBLE
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return EXIT_TROUBLE
    return rc if isinstance(rc, int) else 0
