import json
import logging

import pytest

from cubedist.cli import main
from cubedist.errors import InsufficientInputError
from cubedist.pipeline import RunConfig, run


@pytest.fixture
def maps(write_cube):
    return [
        str(write_cube("m1.cube", (2, 1, 1), [0.0, 0.0])),
        str(write_cube("m2.cube", (2, 1, 1), [1.0, 1.0])),
        str(write_cube("m3.cube", (3, 1, 1), [0.0, 1.0, 2.0])),
    ]


def test_run_writes_both_outputs(maps, tmp_path):
    base = tmp_path / "out" / "dist"
    res = run(maps, output=str(base))
    assert res["csv"] == str(base) + ".csv"
    assert res["meg"] == str(base) + ".meg"
    csv_lines = (tmp_path / "out" / "dist.csv").read_text().splitlines()
    assert csv_lines[0] == "maps,m1,m2,m3"
    assert csv_lines[2] == "m2,1.0,,"
    assert "NTaxa=3" in (tmp_path / "out" / "dist.meg").read_text()
    assert res["matrix"].values[2, 1] > 0


def test_run_optional_outputs(maps, tmp_path):
    base = tmp_path / "extra"
    res = run(maps, output=str(base), config=RunConfig(workers=2, plot=True, write_config=True))
    assert (tmp_path / "extra.png").stat().st_size > 0
    record = json.loads((tmp_path / "extra.json").read_text())
    assert record["labels"] == ["m1", "m2", "m3"]
    assert record["run"]["workers"] == 2
    assert res["png"].endswith("extra.png")


def test_run_insufficient_input_writes_nothing(maps, tmp_path):
    base = tmp_path / "none"
    with pytest.raises(InsufficientInputError):
        run([maps[0], maps[0]], output=str(base))
    assert list(tmp_path.glob("none.*")) == []


def test_cli_success(maps, tmp_path, capsys):
    base = tmp_path / "cli"
    assert main(["-o", str(base)] + maps) == 0
    assert (tmp_path / "cli.csv").exists()
    assert (tmp_path / "cli.meg").exists()
    assert "cli.csv" in capsys.readouterr().out


def test_cli_single_distinct_file_fails(maps, tmp_path, caplog):
    base = tmp_path / "single"
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(base), maps[0], maps[0]]) == 1
    assert "two distinct files" in caplog.text
    assert not (tmp_path / "single.csv").exists()
    assert not (tmp_path / "single.meg").exists()


def test_cli_missing_file_fails(maps, tmp_path, caplog):
    base = tmp_path / "missing"
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(base)] + maps + [str(tmp_path / "nope.cube")]) == 1
    assert "nope.cube" in caplog.text
    assert not (tmp_path / "missing.csv").exists()
    assert not (tmp_path / "missing.meg").exists()


def test_cli_bad_map_fails(maps, write_cube, tmp_path, caplog):
    bad = str(write_cube("bad.cube", (2, 2, 2), range(7)))
    base = tmp_path / "bad"
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(base)] + maps + [bad]) == 1
    assert "bad.cube" in caplog.text
    assert not (tmp_path / "bad.csv").exists()


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "cubedist" in capsys.readouterr().out


def test_cli_binary_map_fails(maps, tmp_path, caplog):
    binary = tmp_path / "binary.cube"
    binary.write_bytes(b"\xff\xfe\x00garbage\n" * 10)
    base = tmp_path / "binary_run"
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(base), maps[0], str(binary)]) == 1
    assert "binary.cube" in caplog.text
    assert not (tmp_path / "binary_run.csv").exists()
    assert not (tmp_path / "binary_run.meg").exists()


def test_cli_missing_file_message_is_not_repeated(maps, tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(tmp_path / "m")] + maps + [str(tmp_path / "gone.cube")]) == 1
    assert caplog.text.count("does not correspond with a real file") == 1
