"""Compare command."""

from collections.abc import Iterator
from typing import TextIO

from ...utils.get_logger import get_logger
from .._output_schemas.compare import CompareOutput
from ..StageResult import StageResult
from .NumericDiff import NumericDiff
from .NumericDiffConfig import NumericDiffConfig
from .NumericDiffResult import NumericDiffResult


def _summary(result: NumericDiffResult) -> str:
    if result.n_different_lines == 0:
        return "Files are EQUAL within tolerance."
    return (
        f"Files DIFFER: {result.n_different_lines} lines differ, "
        f"max percentage error: {result.max_percentage_err:g}%"
    )


def cmd_compare(config: NumericDiffConfig, stream: TextIO | None = None) -> StageResult:
    """Compare two numeric data files.

    Per-line output (if any) is written to ``stream`` while the progress
    callback runs.

    Args:
        config: Validated comparison configuration
        stream: Output stream for per-line rendering (default: sys.stdout)

    Returns:
        StageResult with a CompareOutput dict in ``output``; ``success`` is
        False when a file cannot be opened or the files are not comparable
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("compare.cmd")

        def build_output(errors: list[str], diff_result: NumericDiffResult | None = None) -> dict:
            diff_result = diff_result or NumericDiffResult()
            return CompareOutput(
                errors=errors,
                warnings=[],
                file1=config.file1,
                file2=config.file2,
                tolerance=config.tolerance,
                threshold=config.threshold,
                n_compared_lines=diff_result.n_compared_lines,
                n_different_lines=diff_result.n_different_lines,
                max_percentage_err=diff_result.max_percentage_err,
                is_equal=not errors and diff_result.is_equal,
            ).model_dump(mode="python")

        yield (0.1, "Comparing files...")
        try:
            diff_result = NumericDiff(config, stream=stream).run()
        except OSError as exc:
            logger.error("Compare failed: %s", exc)
            result_obj.result = f"Error: {exc}"
            result_obj.output = build_output([str(exc)])
            result_obj.success = False
            yield (1.0, "Failed")
            return

        if diff_result.mismatch is not None:
            message = diff_result.mismatch.message
            result_obj.result = f"Error: {message}"
            result_obj.output = build_output([message], diff_result)
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.result = _summary(diff_result)
        result_obj.output = build_output([], diff_result)
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Comparing {config.file1} and {config.file2}...",
        progress_callback=do_work,
    )
