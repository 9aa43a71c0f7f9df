import pytest

from sayings.discover import chunked, discover_files


def _touch(path, text="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestDiscoverFiles:

    def test_sorted_globally(self, tmp_path):
        _touch(tmp_path / "B" / "B_1.txt", "B1")
        _touch(tmp_path / "A" / "A_1.txt", "A1")

        files = discover_files(tmp_path)

        assert files == [tmp_path / "A" / "A_1.txt", tmp_path / "B" / "B_1.txt"]

    def test_only_input_suffix(self, tmp_path):
        _touch(tmp_path / "a.txt")
        _touch(tmp_path / "notes.md")
        _touch(tmp_path / "b-error.json")

        assert discover_files(tmp_path) == [tmp_path / "a.txt"]

    def test_skips_processed_unless_overwrite(self, tmp_path):
        done = _touch(tmp_path / "done.txt")
        _touch(tmp_path / "done.json", "{}")
        todo = _touch(tmp_path / "todo.txt")

        assert discover_files(tmp_path) == [todo]
        assert discover_files(tmp_path, overwrite=True) == [done, todo]

    def test_error_file_does_not_count_as_processed(self, tmp_path):
        failed = _touch(tmp_path / "failed.txt")
        _touch(tmp_path / "failed-error.json", "{}")

        assert discover_files(tmp_path) == [failed]

    def test_limit_per_dir_counts_each_directory(self, tmp_path):
        for name in ("a1", "a2", "a3"):
            _touch(tmp_path / "A" / f"{name}.txt")
        for name in ("b1", "b2"):
            _touch(tmp_path / "B" / f"{name}.txt")
        _touch(tmp_path / "A" / "sub" / "s1.txt")

        files = discover_files(tmp_path, limit_per_dir=1)

        assert files == [
            tmp_path / "A" / "a1.txt",
            tmp_path / "A" / "sub" / "s1.txt",
            tmp_path / "B" / "b1.txt",
        ]

    def test_limit_per_dir_skips_processed_files(self, tmp_path):
        _touch(tmp_path / "a1.txt")
        _touch(tmp_path / "a1.json", "{}")
        a2 = _touch(tmp_path / "a2.txt")
        _touch(tmp_path / "a3.txt")

        assert discover_files(tmp_path, limit_per_dir=1) == [a2]

    def test_total_limit_after_sort(self, tmp_path):
        _touch(tmp_path / "B" / "b.txt")
        _touch(tmp_path / "A" / "a1.txt")
        _touch(tmp_path / "A" / "a2.txt")

        assert discover_files(tmp_path, limit=2) == [
            tmp_path / "A" / "a1.txt",
            tmp_path / "A" / "a2.txt",
        ]

    def test_zero_limit_means_all(self, tmp_path):
        _touch(tmp_path / "a.txt")
        _touch(tmp_path / "b.txt")

        assert len(discover_files(tmp_path, limit=0)) == 2

    def test_missing_directory(self, tmp_path, capsys):
        assert discover_files(tmp_path / "nope") == []
        assert "Directory not found" in capsys.readouterr().out


class TestChunked:

    def test_groups(self):
        assert list(chunked(list(range(5)), 2)) == [[0, 1], [2, 3], [4]]

    def test_empty(self):
        assert list(chunked([], 10)) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            list(chunked([1], 0))
