import json

import count_records
from sayings.records import filter_records, load_records


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_from_directory_skips_error_files(tmp_path):
    _write(tmp_path / "A" / "a.json", {"lu_part1": "a", "vulgarity": 2})
    _write(tmp_path / "B" / "b.json", {"lu_part1": "b", "vulgarity": 1})
    _write(tmp_path / "B" / "c-error.json", {"file": "c.txt"})

    records = load_records(tmp_path)

    assert [r["lu_part1"] for r in records] == ["a", "b"]


def test_load_from_aggregated_file(tmp_path):
    source = tmp_path / "dataset.json"
    _write(source, [{"vulgarity": 2}, {"vulgarity": 3}])

    assert len(load_records(source)) == 2


def test_filter_records():
    records = [{"vulgarity": 2}, {"vulgarity": 1}, {"culturalPopularity": 5}]
    assert filter_records(records, "vulgarity", 2) == [{"vulgarity": 2}]


def test_count_records_cli(tmp_path, capsys):
    _write(tmp_path / "a.json", {"lu_part1": "a", "vulgarity": 2})
    _write(tmp_path / "b.json", {"lu_part1": "b", "vulgarity": 2})
    _write(tmp_path / "c.json", {"lu_part1": "c", "vulgarity": 4})

    count_records.main([str(tmp_path), "--value", "2"])

    assert capsys.readouterr().out.rstrip().endswith("length 2")
