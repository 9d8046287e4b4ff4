import os
from configparser import ConfigParser

import pytest

from tagcloud.errors import InvalidArgument
from tagcloud.fonts import MAX_FONT, MIN_FONT
from tagcloud.renderer import DEFAULT_STYLESHEET
from tagcloud.tokenizer import DEFAULT_SEPARATORS
from utils.config import Config


def load(text):
    cparser = ConfigParser()
    cparser.read_string(text)
    return Config(cparser)


def test_defaults_without_sections():
    config = Config(ConfigParser())
    assert config.count == 100
    assert (config.min_font, config.max_font) == (MIN_FONT, MAX_FONT)
    assert config.separators == frozenset(DEFAULT_SEPARATORS)
    assert config.encoding == "utf-8"
    assert config.stylesheet == DEFAULT_STYLESHEET
    assert config.log_dir == "Logs"


def test_values_are_read():
    config = load(
        "[TAGCLOUD]\n"
        "COUNT = 25\n"
        "MINFONT = 12\n"
        "MAXFONT = 40\n"
        "ENCODING = latin-1\n"
        "STYLESHEET = cloud.css\n"
        "[LOCAL PROPERTIES]\n"
        "LOGDIR = logs/tagcloud\n")
    assert config.count == 25
    assert (config.min_font, config.max_font) == (12, 40)
    assert config.encoding == "latin-1"
    assert config.stylesheet == "cloud.css"
    assert config.log_dir == "logs/tagcloud"


def test_separators_decode_escapes():
    config = load("[TAGCLOUD]\nSEPARATORS = \\x20\\t,;\n")
    assert config.separators == frozenset(" \t,;")


def test_shipped_config_file():
    path = os.path.join(os.path.dirname(__file__), os.pardir, "config.ini")
    cparser = ConfigParser()
    assert cparser.read(path) == [path]
    config = Config(cparser)
    assert config.count == 100
    assert config.separators == frozenset(DEFAULT_SEPARATORS)


@pytest.mark.parametrize("text", [
    "[TAGCLOUD]\nCOUNT = many\n",
    "[TAGCLOUD]\nCOUNT = -3\n",
    "[TAGCLOUD]\nMINFONT = 50\nMAXFONT = 40\n",
])
def test_invalid_values(text):
    with pytest.raises(InvalidArgument):
        load(text)


def test_trailing_backslash_in_separators():
    with pytest.raises(InvalidArgument):
        load("[TAGCLOUD]\nSEPARATORS = \\x20\\\n")


def test_percent_sign_is_a_plain_separator():
    config = load("[TAGCLOUD]\nSEPARATORS = \\x20%\n")
    assert config.separators == frozenset(" %")


def test_non_ascii_separators_kept():
    config = load("[TAGCLOUD]\nSEPARATORS = \\x20\u2014\u00e9\n")
    assert config.separators == frozenset(" \u2014\u00e9")


def test_stylesheet_with_percent_escape():
    config = load("[TAGCLOUD]\nSTYLESHEET = my%20cloud.css\n")
    assert config.stylesheet == "my%20cloud.css"
