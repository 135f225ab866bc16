"""Create the main Typer CLI app."""

from typing import Annotated

import typer

from ..api.compare.cmd_compare import cmd_compare
from ..api.compare.NumericDiffConfig import NumericDiffConfig
from ..api.compare.NumericDiffConfigError import NumericDiffConfigError
from ..api.validate_output import validate_output
from ..utils.get_logger import get_logger
from ..utils.get_package_version import get_package_version
from ._parse_columns import _parse_columns
from ._print_error import _print_error
from ._print_summary import _print_summary


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"diff-numerics version {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="diff-numerics",
        help="Compare two numeric data files column by column within a tolerance.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def compare(
        ctx: typer.Context,
        file1: Annotated[str | None, typer.Argument(help="Reference data file")] = None,
        file2: Annotated[str | None, typer.Argument(help="Data file to check")] = None,
        side_by_side: Annotated[bool, typer.Option("--side-by-side", "-y", help="Show files side by side")] = False,
        suppress_common_lines: Annotated[
            bool,
            typer.Option("--suppress-common-lines", "-ys", help="Hide equal lines (implies side-by-side)"),
        ] = False,
        tolerance: Annotated[
            float, typer.Option("--tolerance", "-t", help="Relative tolerance, 1e-2 is 1%")
        ] = 1e-2,
        threshold: Annotated[
            float, typer.Option("--threshold", "-T", help="Values below this magnitude count as zero")
        ] = 1e-6,
        comment_string: Annotated[
            str, typer.Option("--comment-string", "-c", help="Comment line prefix, empty disables")
        ] = "#",
        line_length: Annotated[
            int, typer.Option("--single-column-width", "-w", help="Visible characters per side-by-side column")
        ] = 60,
        only_equal: Annotated[
            bool, typer.Option("--report-identical-files", "-s", help="Only report whether files are equal")
        ] = False,
        quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print a summary only if files differ")] = False,
        color_diff_digits: Annotated[
            bool, typer.Option("--color-different-digits", "-d", help="Color only the differing digits")
        ] = False,
        columns: Annotated[
            str | None, typer.Option("--columns", "-C", help="Comma-separated 1-based columns to compare")
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version", "-v", help="Show program version and exit", callback=_version_callback, is_eager=True
            ),
        ] = False,
    ) -> None:
        """Compare two numeric data files line by line."""
        try:
            config = NumericDiffConfig(
                file1=file1 or "",
                file2=file2 or "",
                side_by_side=side_by_side or suppress_common_lines,
                tolerance=tolerance,
                threshold=threshold,
                comment_prefix=comment_string,
                suppress_common_lines=suppress_common_lines,
                only_equal=only_equal,
                quiet=quiet,
                line_length=line_length,
                color_diff_digits=color_diff_digits,
                columns_to_compare=_parse_columns(columns) if columns else frozenset(),
            )
        except NumericDiffConfigError as exc:
            for error in exc.errors:
                _print_error(f"Error: {error}")
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1) from None

        logger = get_logger("cli")
        result = cmd_compare(config)
        logger.info(result.announce)
        for progress, message in result.progress_callback(result):
            logger.debug("Progress: %s (%.0f%%)", message, progress * 100)
        result.output = validate_output(cmd_compare, result.output)

        if not result.success:
            _print_error(result.result)
            raise typer.Exit(1)

        _print_summary(config, result.output)

    return app
