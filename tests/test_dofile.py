import pytest

from aigtasks.dofile import dofile_lines, main, write_dofile

AAG = "aag 3 2 0 1 1\n2\n4\n6\n6 2 4\n"


@pytest.fixture
def aag_file(tmp_path):
    path = tmp_path / "small.aag"
    path.write_text(AAG)
    return str(path)


def test_lines_structure(aag_file):
    lines = dofile_lines(aag_file, 5)
    assert lines[:6] == [
        f"cirr -r {aag_file}",
        "cirp",
        "cirp -n",
        "cirp -pi",
        "cirp -po",
        "cirp -fl",
    ]
    assert lines[-2:] == ["cirw", "q -f"]
    gate_lines = lines[6:-2]
    assert len(gate_lines) == 2 * (3 + 1 + 1)
    assert gate_lines[0] == "cirg 0"
    assert gate_lines[1] == "cirg 0 -fani 5"


def test_default_level(aag_file):
    lines = dofile_lines(aag_file)
    assert "cirg 1 -fani 100" in lines


def test_write_matches_lines(aag_file, tmp_path):
    out = tmp_path / "script"
    write_dofile(aag_file, str(out), 7)
    assert out.read_text() == "\n".join(dofile_lines(aag_file, 7)) + "\n"


def test_main_writes_file(aag_file, tmp_path):
    out = tmp_path / "doit"
    assert main([aag_file, "-o", str(out), "-l", "3"]) == 0
    assert out.read_text().splitlines() == dofile_lines(aag_file, 3)


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "none.aag"), "-o", str(tmp_path / "x")]) == 1


def test_bad_header(tmp_path):
    path = tmp_path / "bad.aag"
    path.write_text("aag 3\n")
    with pytest.raises(ValueError):
        dofile_lines(str(path))