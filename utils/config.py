from tagcloud.errors import InvalidArgument
from tagcloud.fonts import MAX_FONT, MIN_FONT
from tagcloud.renderer import DEFAULT_STYLESHEET
from tagcloud.tokenizer import DEFAULT_SEPARATORS, separator_set


def decode_separators(raw):
    """
    Expand backslash escapes (\\x20, \\t, ...) in raw, leaving every other
    character as written.
    """
    try:
        return raw.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise InvalidArgument(f"SEPARATORS has a bad escape sequence: {raw!r}") from e


class Config(object):
    """
    Typed view over the [TAGCLOUD] and [LOCAL PROPERTIES] sections of a
    ConfigParser. Missing keys fall back to the built-in defaults.
    Values are read raw, so '%' needs no escaping.
    """

    def __init__(self, config):
        self.count = self._int(config, "COUNT", 100)
        if self.count < 0:
            raise InvalidArgument(f"COUNT must not be negative, got {self.count}")

        self.min_font = self._int(config, "MINFONT", MIN_FONT)
        self.max_font = self._int(config, "MAXFONT", MAX_FONT)
        if self.min_font > self.max_font:
            raise InvalidArgument(
                f"MINFONT ({self.min_font}) is larger than MAXFONT ({self.max_font})")

        # ini values lose surrounding whitespace, so separators are written
        # with backslash escapes
        raw = self._get(config, "TAGCLOUD", "SEPARATORS", None)
        chars = decode_separators(raw) if raw else DEFAULT_SEPARATORS
        self.separators = separator_set(chars)

        self.encoding = self._get(config, "TAGCLOUD", "ENCODING", "utf-8").strip()
        self.stylesheet = self._get(config, "TAGCLOUD", "STYLESHEET", DEFAULT_STYLESHEET).strip()
        self.log_dir = self._get(config, "LOCAL PROPERTIES", "LOGDIR", "Logs").strip()

    @staticmethod
    def _get(config, section, key, default):
        return config.get(section, key, raw=True, fallback=default)

    @classmethod
    def _int(cls, config, key, default):
        value = cls._get(config, "TAGCLOUD", key, None)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError as e:
            raise InvalidArgument(f"{key} must be an integer, got {value!r}") from e
