"""Unit tests for diff_numerics.api.render module."""

import io

import pytest

from diff_numerics.api.compare.ColumnOutcome import ColumnOutcome
from diff_numerics.api.compare.LineComparison import LineComparison
from diff_numerics.api.compare.LineStatus import LineStatus
from diff_numerics.api.compare.NumericDiffConfig import NumericDiffConfig
from diff_numerics.api.format import COLOR_START, RESET, colorize_whole, ensure_reset, strip_escape
from diff_numerics.api.render import SideBySideRenderer, UnifiedRenderer, get_renderer

pytestmark = pytest.mark.unit

R = COLOR_START
Z = RESET


def make_line(*pairs: tuple[str, str], different: tuple[int, ...] = ()) -> LineComparison:
    columns = []
    for i, (t1, t2) in enumerate(pairs, start=1):
        width = max(len(t1), len(t2))
        if i in different:
            columns.append(
                ColumnOutcome(i, True, (colorize_whole(t1), colorize_whole(t2)), f"{50.0:>{width}g}%", width, 50.0)
            )
        else:
            columns.append(ColumnOutcome(i, False, (t1, t2), " " * width, width))
    status = LineStatus.DIFFERENT if different else LineStatus.EQUAL
    return LineComparison(status=status, n_tokens1=len(pairs), n_tokens2=len(pairs), columns=columns)


class TestSideBySideRenderer:
    """Test SideBySideRenderer class."""

    def test_pads_columns_to_widest_token(self):
        stream = io.StringIO()
        SideBySideRenderer(line_length=60, stream=stream).render(make_line(("1", "100"), ("2.5", "2.5")))
        assert stream.getvalue() == "1   2.5       100 2.5\n"

    def test_bar_separator_when_colored(self):
        stream = io.StringIO()
        SideBySideRenderer(line_length=60, stream=stream).render(make_line(("1", "2"), different=(1,)))
        assert stream.getvalue() == f"{R}1{Z}   |   {R}2{Z}\n"

    def test_truncation_keeps_color_terminated(self):
        stream = io.StringIO()
        line = make_line(("1.0000000000", "1.5000000000"), ("2", "2"), different=(1,))
        SideBySideRenderer(line_length=10, stream=stream).render(line)
        left, right = stream.getvalue().rstrip("\n").split("   |   ")
        assert left == f"{R}1.00000000{Z}"
        assert right == f"{R}1.50000000{Z}"
        assert ensure_reset(left) == left
        assert len(strip_escape(left)) == 10

    def test_suppress_common_lines(self):
        stream = io.StringIO()
        renderer = SideBySideRenderer(line_length=60, suppress_common_lines=True, stream=stream)
        renderer.render(make_line(("1", "1")))
        assert stream.getvalue() == ""
        renderer.render(make_line(("1", "2"), different=(1,)))
        assert stream.getvalue() != ""


class TestUnifiedRenderer:
    """Test UnifiedRenderer class."""

    def test_block_for_colored_line(self):
        stream = io.StringIO()
        UnifiedRenderer(stream=stream).render(make_line(("a", "a"), ("1.0", "2.0"), different=(2,)))
        assert stream.getvalue() == f"\n< a {R}1.0{Z}\n> a {R}2.0{Z}\n>>   50%\n"

    def test_nothing_for_plain_line(self):
        stream = io.StringIO()
        UnifiedRenderer(stream=stream).render(make_line(("1.0", "1.0")))
        assert stream.getvalue() == ""

    def test_default_stream_is_stdout(self, capsys):
        UnifiedRenderer().render(make_line(("1", "2"), different=(1,)))
        assert "< " in capsys.readouterr().out


class TestGetRenderer:
    """Test get_renderer function."""

    def test_unified_by_default(self):
        assert isinstance(get_renderer(NumericDiffConfig(file1="a", file2="b")), UnifiedRenderer)

    def test_side_by_side(self):
        renderer = get_renderer(NumericDiffConfig(file1="a", file2="b", side_by_side=True, line_length=20))
        assert isinstance(renderer, SideBySideRenderer)
        assert renderer.line_length == 20

    @pytest.mark.parametrize("option", ["only_equal", "quiet"])
    def test_disabled(self, option):
        assert get_renderer(NumericDiffConfig(file1="a", file2="b", side_by_side=True, **{option: True})) is None
