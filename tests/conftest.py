import pytest


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    """Run every test from a scratch directory so Logs/ stays out of the tree."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_text(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
