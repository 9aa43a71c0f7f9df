import pytest

from tests.helpers import SAYING


@pytest.fixture
def saying_file(tmp_path):
    path = tmp_path / "test.txt"
    path.write_text(SAYING + "\n", encoding="utf-8")
    return path
