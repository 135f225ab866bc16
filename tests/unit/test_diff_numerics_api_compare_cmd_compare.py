"""Unit tests for diff_numerics.api.compare.cmd_compare module."""

import io

import pytest

from diff_numerics.api.compare.cmd_compare import cmd_compare
from diff_numerics.api.compare.NumericDiffConfig import NumericDiffConfig
from diff_numerics.api.validate_output import validate_output

pytestmark = pytest.mark.unit


def run_cmd(config: NumericDiffConfig):
    stream = io.StringIO()
    result = cmd_compare(config, stream=stream)
    progress = list(result.progress_callback(result))
    return result, progress, stream.getvalue()


class TestCmdCompare:
    """Test cmd_compare function."""

    def test_equal_files(self, data_pair):
        result, progress, _ = run_cmd(data_pair("1.0 2.0\n", "1.0 2.0\n"))
        assert result.success is True
        assert result.result == "Files are EQUAL within tolerance."
        assert result.output["is_equal"] is True
        assert result.output["errors"] == []
        assert progress[-1] == (1.0, "Complete")
        assert result.announce.startswith("Comparing ")

    def test_different_files(self, data_pair):
        result, _, output = run_cmd(data_pair("1.0 2.0\n", "1.0 2.01\n", tolerance=1e-4))
        assert result.success is True
        assert result.output["n_different_lines"] == 1
        assert result.output["max_percentage_err"] == pytest.approx(0.4975, abs=1e-3)
        assert result.result == "Files DIFFER: 1 lines differ, max percentage error: 0.497512%"
        assert "< 1.0" in output

    def test_structural_mismatch_fails(self, data_pair):
        result, progress, _ = run_cmd(data_pair("1.0 2.0\n", "1.0\n"))
        assert result.success is False
        assert result.output["is_equal"] is False
        assert "Column count mismatch" in result.output["errors"][0]
        assert result.result.startswith("Error: Column count mismatch")
        assert progress[-1] == (1.0, "Failed")

    def test_missing_file_fails(self, write_data, tmp_path):
        file1 = write_data("a.dat", "1.0\n")
        config = NumericDiffConfig(file1=str(file1), file2=str(tmp_path / "nope.dat"))
        result, _, _ = run_cmd(config)
        assert result.success is False
        assert "could not open file" in result.result
        assert result.output["n_compared_lines"] == 0

    def test_output_matches_schema(self, data_pair):
        result, _, _ = run_cmd(data_pair("1.0\n", "1.0\n"))
        assert validate_output(cmd_compare, result.output) == result.output

    def test_logs_run(self, data_pair, diff_numerics_home):
        run_cmd(data_pair("1.0\n", "1.0\n"))
        log_text = (diff_numerics_home / "diff-numerics.log").read_text()
        assert "Comparing" in log_text
        assert "Compared 1 lines" in log_text
