"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    command = typer.main.get_command(_create_app())
    try:
        command.main(args=argv, prog_name="diff-numerics", standalone_mode=True)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return 0
