"""Numeric diff engine (UNO: single class)."""

from typing import TextIO

from ...utils.get_logger import get_logger
from ..format.calculate_col_widths import calculate_col_widths
from ..format.colorize_diff_digits import colorize_diff_digits
from ..format.colorize_whole import colorize_whole
from ..format.format_error_label import format_error_label
from ..render.get_renderer import get_renderer
from ..render.LineRenderer import LineRenderer
from ..text.is_numeric_token import is_numeric_token
from ..text.tokenize import tokenize
from ._LineCursor import _LineCursor
from .ColumnOutcome import ColumnOutcome
from .CompareState import CompareState
from .LineComparison import LineComparison
from .LineStatus import LineStatus
from .NumericDiffConfig import NumericDiffConfig
from .NumericDiffResult import NumericDiffResult
from .percentage_difference import percentage_difference
from .StructuralMismatch import StructuralMismatch


class NumericDiff:
    """Compare two numeric data files line by line and column by column.

    Both files are read in lockstep, one non-comment line from each per
    step. Paired lines must tokenize to the same number of columns; when
    they do not, the run stops and the result carries a StructuralMismatch
    instead of raising. Lines left over on the longer file are compared
    against an empty line, so only blank lines may remain there.

    Each compared line is handed to the renderer chosen by the
    configuration (none for ``only_equal`` or ``quiet``).
    """

    def __init__(
        self,
        config: NumericDiffConfig,
        stream: TextIO | None = None,
        renderer: LineRenderer | None = None,
    ):
        self.config = config
        self.renderer = renderer if renderer is not None else get_renderer(config, stream)

    def run(self) -> NumericDiffResult:
        """Execute the comparison.

        Returns:
            NumericDiffResult with line statistics; ``mismatch`` is set when
            the files cannot be compared column by column

        Raises:
            OSError: If either file cannot be opened
        """
        logger = get_logger("compare")
        logger.info(
            "Comparing %s and %s (tolerance=%g, threshold=%g)",
            self.config.file1,
            self.config.file2,
            self.config.tolerance,
            self.config.threshold,
        )
        result = NumericDiffResult()
        prefix = self.config.comment_prefix

        with self._open_and_validate(self.config.file1) as fs1, self._open_and_validate(self.config.file2) as fs2:
            cursor1 = _LineCursor(fs1, prefix)
            cursor2 = _LineCursor(fs2, prefix)
            line1: str | None = None
            line2: str | None = None
            state = CompareState.ADVANCING

            while state is not CompareState.DONE:
                if state is CompareState.ADVANCING:
                    line1 = cursor1.next_line()
                    line2 = cursor2.next_line()
                    if line1 is None and line2 is None:
                        state = CompareState.DONE
                    elif line2 is None:
                        state = CompareState.DRAIN_LEFT
                    elif line1 is None:
                        state = CompareState.DRAIN_RIGHT
                    else:
                        state = CompareState.COMPARING

                elif state is CompareState.COMPARING:
                    assert line1 is not None and line2 is not None
                    comparison = self.compare_lines(line1, line2)
                    if comparison.status is LineStatus.INCOMPARABLE:
                        result.mismatch = StructuralMismatch(
                            line1=cursor1.line_number,
                            line2=cursor2.line_number,
                            n_tokens1=comparison.n_tokens1,
                            n_tokens2=comparison.n_tokens2,
                        )
                        break
                    result.add_line(comparison.is_different, comparison.max_error)
                    if self.renderer is not None:
                        self.renderer.render(comparison)
                    state = CompareState.ADVANCING

                elif state is CompareState.DRAIN_LEFT:
                    assert line1 is not None
                    if self.compare_lines(line1, "").status is LineStatus.INCOMPARABLE:
                        result.mismatch = StructuralMismatch(
                            line1=cursor1.line_number, line2=0, n_tokens1=len(tokenize(line1)), n_tokens2=0
                        )
                        break
                    line1 = cursor1.next_line()
                    if line1 is None:
                        state = CompareState.DONE

                elif state is CompareState.DRAIN_RIGHT:
                    assert line2 is not None
                    if self.compare_lines("", line2).status is LineStatus.INCOMPARABLE:
                        result.mismatch = StructuralMismatch(
                            line1=0, line2=cursor2.line_number, n_tokens1=0, n_tokens2=len(tokenize(line2))
                        )
                        break
                    line2 = cursor2.next_line()
                    if line2 is None:
                        state = CompareState.DONE

        if result.mismatch is not None:
            logger.warning("Files are not comparable: %s", result.mismatch.message)
        else:
            logger.info(
                "Compared %d lines: %d differ, max percentage error %g",
                result.n_compared_lines,
                result.n_different_lines,
                result.max_percentage_err,
            )
        return result

    def compare_lines(self, line1: str, line2: str) -> LineComparison:
        """Compare two lines token by token.

        Numeric token pairs are compared against tolerance and threshold;
        any other token pair is passed through unchanged.

        Args:
            line1: Line from the first file
            line2: Line from the second file

        Returns:
            LineComparison; status INCOMPARABLE when token counts differ
        """
        tokens1 = tokenize(line1)
        tokens2 = tokenize(line2)
        if len(tokens1) != len(tokens2):
            return LineComparison(
                status=LineStatus.INCOMPARABLE,
                n_tokens1=len(tokens1),
                n_tokens2=len(tokens2),
            )

        col_widths = calculate_col_widths(tokens1, tokens2)
        columns_filter = self.config.columns_to_compare
        columns: list[ColumnOutcome] = []
        max_error = 0.0

        for i, (token1, token2, width) in enumerate(zip(tokens1, tokens2, col_widths), start=1):
            if columns_filter and i not in columns_filter:
                continue

            if is_numeric_token(token1) and is_numeric_token(token2):
                diff = percentage_difference(
                    float(token1),
                    float(token2),
                    tolerance=self.config.tolerance,
                    threshold=self.config.threshold,
                )
                if abs(diff) > self.config.tolerance_percent:
                    max_error = max(max_error, abs(diff))
                    if self.config.color_diff_digits:
                        rendered = colorize_diff_digits(token1, token2)
                    else:
                        rendered = (colorize_whole(token1), colorize_whole(token2))
                    columns.append(
                        ColumnOutcome(
                            index=i,
                            is_difference=True,
                            rendered=rendered,
                            error_label=format_error_label(diff, width),
                            width=width,
                            error=abs(diff),
                        )
                    )
                    continue

            columns.append(
                ColumnOutcome(
                    index=i,
                    is_difference=False,
                    rendered=(token1, token2),
                    error_label=" " * width,
                    width=width,
                )
            )

        any_difference = any(column.is_difference for column in columns)
        return LineComparison(
            status=LineStatus.DIFFERENT if any_difference else LineStatus.EQUAL,
            n_tokens1=len(tokens1),
            n_tokens2=len(tokens2),
            columns=columns,
            max_error=max_error,
        )

    def _open_and_validate(self, file_path: str) -> TextIO:
        """Open a file for reading, raising OSError with the path on failure."""
        try:
            return open(file_path, encoding="utf-8", errors="replace")
        except OSError as exc:
            get_logger("compare").error("Could not open file %s: %s", file_path, exc)
            raise OSError(f"could not open file: {file_path}") from exc
