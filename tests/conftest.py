# tests/conftest.py
import pytest


@pytest.fixture
def aws_credentials(monkeypatch):
    """Set the three AWS credential variables the publish commands require."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")


@pytest.fixture
def requirements_file(tmp_path):
    """A requirements file listing one dependency."""
    path = tmp_path / "requirements.txt"
    path.write_text("requests==2.32.3\n")
    return path


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Run the test from tmp_path so the default output directory lands there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path / "output"
