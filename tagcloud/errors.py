"""
errors.py - Tag Cloud Error Types

All conditions the pipeline surfaces to its caller. Nothing in the core
recovers from these; the launcher reports them and exits.
"""


class TagCloudError(Exception):
    """Base class for every error raised by the tag cloud pipeline."""


class InputUnavailable(TagCloudError):
    """The input file could not be opened or read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input file {path}: {reason}")


class InvalidArgument(TagCloudError, ValueError):
    """A caller broke a precondition (bad count, position, font bounds...)."""


class OutputUnavailable(TagCloudError):
    """The rendered page could not be written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output file {path}: {reason}")
