import pytest


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Send log lines to a per-test file instead of the working directory."""
    path = tmp_path / "dualtodo.log"
    monkeypatch.setattr("dualtodo.logger.LOG_FILE_PATH", str(path))
    return path
