from vecops import cli
from vecops.fileio import read_file, read_vector
from vecops.scalars import ScalarKind
from vecops.vector import compare_vectors, vector_init, vector_sum


def _write_inputs(directory, first, second):
    directory.mkdir()
    (directory / "vector1.txt").write_text(first)
    (directory / "vector2.txt").write_text(second)


def test_record_counts_outcomes(capsys):
    results = cli.TestResults()
    assert results.record("first", True) is True
    assert results.record("second", False) is False
    assert (results.total_tests, results.passed_tests, results.failed_tests) == (2, 1, 1)
    out = capsys.readouterr().out
    assert "PASS: first" in out
    assert "FAIL: second" in out


def test_summary_text():
    results = cli.TestResults()
    results.record("only", True)
    assert results.summary() == "Total tests: 1\nPassed: 1\nFailed: 0"


def test_self_tests_all_pass():
    results = cli.run_self_tests(cli.TestResults())
    assert results.failed_tests == 0
    assert results.passed_tests == results.total_tests
    assert results.total_tests == 10


def test_main_without_inputs(tmp_path, capsys):
    code = cli.main(
        ["--input-dir", str(tmp_path / "none"), "--output-dir", str(tmp_path)]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Cant perform operations cz missing input vectors." in out
    assert "Cant read vector1.txt (Status: 404)" in out


def test_main_reports_unwritable_output(tmp_path, capsys):
    in_dir = tmp_path / "in"
    _write_inputs(in_dir, "DOUBLE\n1.5 2.5\n", "DOUBLE\n2 4\n")
    missing_out = tmp_path / "missing"

    code = cli.main(["--input-dir", str(in_dir), "--output-dir", str(missing_out)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Cant create file" in out
    assert not missing_out.exists()


def test_main_reports_mismatched_sizes(tmp_path, capsys):
    in_dir = tmp_path / "in"
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    _write_inputs(in_dir, "INT\n1 2\n", "INT\n1 2 3\n")

    cli.main(["--input-dir", str(in_dir), "--output-dir", str(out_dir)])
    out = capsys.readouterr().out
    assert "Cant compute vector sum (Status: 404)" in out
    assert "Cant compute scalar product (Status: 404)" in out
    assert not (out_dir / "vector_sum.txt").exists()