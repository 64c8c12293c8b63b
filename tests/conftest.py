import pytest

from clean_config import default_settings


@pytest.fixture
def settings():
    return default_settings()


@pytest.fixture
def make_files(tmp_path):
    """Create files (relative to ``tmp_path``) and return the directory."""
    def _make(*names, content="x"):
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path
    return _make
