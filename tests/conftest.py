from configparser import ConfigParser

import pytest

from utils.config import Config


@pytest.fixture
def config(tmp_path):
    """Config with logs kept inside the test's temporary directory."""
    cparser = ConfigParser()
    cparser.read_dict({"LOCAL PROPERTIES": {"LOGDIR": str(tmp_path / "Logs")}})
    return Config(cparser)


@pytest.fixture
def write_input(tmp_path):
    """Writes text to an input file and returns its path as a string."""
    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def output_folder(tmp_path):
    folder = tmp_path / "out"
    folder.mkdir()
    return str(folder)
