from configparser import ConfigParser

import pytest

from utils.config import Config


def make_config(values=None):
    cparser = ConfigParser()
    cparser.read_dict(values or {})
    return Config(cparser)


def test_defaults_without_file():
    config = make_config()
    assert config.log_dir is None
    assert config.encoding == "utf-8"
    assert config.strip_markup == "no"
    assert config.output_file == "index.html"


def test_values_from_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[LOCAL PROPERTIES]\nLOGDIR = mylogs\n"
        "[INPUT]\nENCODING = latin-1\nSTRIPMARKUP = No\n"
        "[REPORT]\nOUTPUTFILE = words.html\n")
    cparser = ConfigParser()
    cparser.read(str(path))
    config = Config(cparser)
    assert config.log_dir == "mylogs"
    assert config.encoding == "latin-1"
    assert config.strip_markup == "no"
    assert config.output_file == "words.html"


@pytest.mark.parametrize(
    "policy,input_file,expected",
    [
        ("auto", "page.html", True),
        ("auto", "PAGE.HTM", True),
        ("auto", "notes.txt", False),
        ("yes", "notes.txt", True),
        ("no", "page.html", False),
    ],
)
def test_should_strip_markup(policy, input_file, expected):
    config = make_config({"INPUT": {"STRIPMARKUP": policy}})
    assert config.should_strip_markup(input_file) is expected


def test_invalid_markup_policy():
    with pytest.raises(ValueError):
        make_config({"INPUT": {"STRIPMARKUP": "maybe"}})


def test_default_policy_keeps_markup():
    config = make_config()
    assert config.should_strip_markup("page.html") is False
