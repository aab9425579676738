import csv
import json

import pytest

from helpers import EASY_SOLUTION
from run import main, parse_args, write_results_csv
from src.sudoku.seeds import EASY, IMPOSSIBLE, MULTI


def _read_csv(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_parse_args_requires_some_input():
    with pytest.raises(SystemExit):
        parse_args([])


def test_seed_name_prints_rows(capsys):
    rows = main(["--seed-name", "easy"])
    assert rows[0]["id"] == "easy"
    assert rows[0]["status"] == "unique"
    assert rows[0]["solution"] == EASY_SOLUTION
    assert "unique" in capsys.readouterr().out


def test_single_file_csv_output(tmp_path):
    puzzles = tmp_path / "batch.jsonl"
    puzzles.write_text(
        "\n".join(json.dumps(p) for p in [
            {"id": "easy", "values": EASY, "solution": EASY_SOLUTION},
            {"id": "multi", "values": MULTI},
            {"id": "impossible", "values": IMPOSSIBLE},
        ])
    )
    output = tmp_path / "results.csv"
    main([str(puzzles), "--output", str(output)])

    rows = _read_csv(output)
    assert [r["status"] for r in rows] == ["unique", "multiple", "unsatisfiable"]
    assert rows[0]["solution"] == EASY_SOLUTION
    assert rows[1]["solution"] == ""
    assert rows[2]["count"] == "0"


def test_directory_input(tmp_path):
    for i, values in enumerate([EASY, MULTI]):
        (tmp_path / f"puzzle{i}.txt").write_text(values + "\n")
    (tmp_path / "notes.md").write_text("ignored")
    rows = main([str(tmp_path)])
    assert [r["id"] for r in rows] == ["puzzle0-0", "puzzle1-0"]


def test_malformed_puzzle_is_reported_not_raised(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"id": "short", "values": "123"}, {"id": "none"}]))
    rows = main([str(path)])
    assert [r["status"] for r in rows] == ["error", "error"]
    assert "ERROR" in capsys.readouterr().out


def test_mismatched_expected_solution_warns(tmp_path, capsys):
    path = tmp_path / "wrong.json"
    path.write_text(json.dumps({"id": "easy", "values": EASY, "solution": "1" * 81}))
    main([str(path)])
    assert "WARNING" in capsys.readouterr().out


def test_generate_mode_writes_puzzles(tmp_path):
    output = tmp_path / "generated.csv"
    trace = tmp_path / "trace.csv"
    main([
        "--generate", "2", "--min-clues", "55", "--max-attempts", "2",
        "--rng-seed", "4", "--output", str(output), "--trace", str(trace), "--show",
    ])
    rows = _read_csv(output)
    assert len(rows) == 2
    assert all(r["clues"] == "55" for r in rows)
    assert all(len(r["values"]) == 81 and len(r["mask"]) == 81 for r in rows)
    assert trace.exists()


def test_classify_trace_file(tmp_path):
    trace = tmp_path / "trace.csv"
    main(["--seed-name", "easy", "--trace", str(trace)])
    rows = _read_csv(trace)
    assert rows[0]["action_type"] == "assign"


def test_write_results_csv(tmp_path):
    output = tmp_path / "out.csv"
    write_results_csv([{"id": "x", "values": EASY, "mask": "1" * 81, "clues": 81}],
                      ["id", "values", "mask", "clues"], output)
    content = output.read_text()
    assert "id,values,mask,clues" in content
    assert EASY in content
