"""Summary printing for --report-identical-files and --quiet."""

import typer

from ..api.compare.NumericDiffConfig import NumericDiffConfig


def _print_summary(config: NumericDiffConfig, output: dict) -> None:
    """Print the run summary selected by the configuration.

    ``quiet`` prints nothing for equal files and the summary otherwise;
    ``only_equal`` always prints the summary. Without either option the
    per-line report stands on its own.
    """
    if config.quiet:
        if output["is_equal"]:
            return
    elif not config.only_equal:
        return

    typer.echo(f"Comparing {config.file1} and {config.file2}")
    typer.echo(f"Tolerance: {config.tolerance:g}, Threshold: {config.threshold:g}")
    if output["is_equal"]:
        typer.echo("Files are EQUAL within tolerance.")
    else:
        typer.echo(
            f"Files DIFFER: {output['n_different_lines']} lines differ, "
            f"max percentage error: {output['max_percentage_err']:g}%"
        )
