import pytest

from advent_solver import cli, day01, day03, day14, day20

DAY01_TEXT = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
DAY03_TEXT = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"


def test_solve_dispatches_to_day_part1():
    assert cli.solve(1, 1, DAY01_TEXT) == day01.part1(DAY01_TEXT)


def test_solve_dispatches_to_day_part2():
    assert cli.solve(1, 2, DAY01_TEXT) == day01.part2(DAY01_TEXT)


def test_solve_day03_example():
    assert cli.solve(3, 1, DAY03_TEXT) == 161


def test_solve_day03_part2_matches_module():
    assert cli.solve(3, 2, DAY03_TEXT) == day03.part2(DAY03_TEXT)


@pytest.mark.parametrize("day", [0, 16, 17, 26])
def test_solve_rejects_unknown_day(day):
    with pytest.raises(ValueError):
        cli.solve(day, 1, "")


@pytest.mark.parametrize("part", [0, 3])
def test_solve_rejects_unknown_part(part):
    with pytest.raises(ValueError):
        cli.solve(1, part, DAY01_TEXT)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY01_TEXT, encoding="utf-8")
    status = cli.main(["1", "1", str(path)])
    assert status == 0
    assert capsys.readouterr().out == f"{day01.part1(DAY01_TEXT)}\n"


def test_main_prints_string_answer(tmp_path, capsys):
    text = "p=0,0 v=1,0\np=5,5 v=0,1\n"
    path = tmp_path / "robots.txt"
    path.write_text(text, encoding="utf-8")
    assert cli.main(["14", "2", str(path)]) == 0
    assert capsys.readouterr().out == day14.part2(text) + "\n"


def test_main_reports_missing_file(tmp_path, capsys):
    status = cli.main(["1", "1", str(tmp_path / "absent.txt")])
    assert status == 1
    assert "advent-solver" in capsys.readouterr().err


def test_main_reports_unknown_day(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY01_TEXT, encoding="utf-8")
    assert cli.main(["16", "1", str(path)]) == 1
    assert "day 16" in capsys.readouterr().err


def test_main_reports_bad_input(tmp_path, capsys):
    path = tmp_path / "track.txt"
    path.write_text("#####\n#..E#\n#####\n", encoding="utf-8")
    assert cli.main(["20", "1", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_reads_standard_input(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(DAY01_TEXT))
    assert cli.main(["1", "2", "-"]) == 0
    assert capsys.readouterr().out == f"{day01.part2(DAY01_TEXT)}\n"


def test_main_rejects_non_numeric_day():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["one", "1", "input.txt"])
    assert excinfo.value.code == 2


def test_solve_day20_matches_module():
    text = "#####\n#S#E#\n#.#.#\n#...#\n#####\n"
    assert cli.solve(20, 1, text) == day20.part1(text)