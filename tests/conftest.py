# Pytest fixtures for env file loading tests.
import pytest


# Write env file content into the test's temp directory.
@pytest.fixture()
def write_env(tmp_path):
    def _write(content: str, name: str = ".env_plus"):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


# An in-memory environment so tests never touch os.environ.
@pytest.fixture()
def environ():
    return {}
