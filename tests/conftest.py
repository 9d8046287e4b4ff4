from configparser import ConfigParser

import pytest

from tagcloud.tokenizer import separator_set
from utils.config import Config


@pytest.fixture
def separators():
    return separator_set()


@pytest.fixture
def make_config(tmp_path):
    def _make(**values):
        cparser = ConfigParser()
        cparser.read_dict({
            "TAGCLOUD": {key.upper(): str(value) for key, value in values.items()},
            "LOCAL PROPERTIES": {"LOGDIR": str(tmp_path / "Logs")},
        })
        return Config(cparser)
    return _make


@pytest.fixture
def write_text(tmp_path):
    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
