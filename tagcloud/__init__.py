"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs one input file through the whole pipeline:
- Reading the input file line by line
- Counting word frequencies
- Selecting the top N words in display order
- Assigning font sizes and rendering the page

Key role: High-level coordinator that ties the pipeline stages together
"""

from collections import namedtuple

from utils import get_logger
from tagcloud.counter import count_words, read_lines
from tagcloud.fonts import assign_font_sizes
from tagcloud.renderer import render_page, write_page
from tagcloud.selector import check_count, select_top


Cloud = namedtuple("Cloud", ["source", "requested", "effective", "entries", "distinct"])


class TagCloud(object):
    """
    Single-threaded tag cloud generator.

    Every call to build() owns its own frequency mapping, so one instance
    can process any number of files one after another.
    """

    def __init__(self, config, line_reader=read_lines, page_renderer=render_page):
        """
        Initialize the generator.

        Args:
            config: Configuration object (count, separators, fonts, etc.)
            line_reader: Callable (path, encoding) -> lines (for testing)
            page_renderer: Callable (cloud, stylesheet) -> markup (for testing)
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD", log_dir=config.log_dir)
        self.line_reader = line_reader
        self.page_renderer = page_renderer

    def build(self, input_path, count=None):
        """
        Compute the cloud for input_path without writing anything.

        Args:
            input_path: Path of the text file to read
            count: Number of words requested; config.count when None

        Returns:
            Cloud with entries in alphabetical order
        """
        requested = self.config.count if count is None else count
        check_count(requested)

        lines = self.line_reader(input_path, self.config.encoding)
        self.logger.info(f"Read {len(lines)} lines from {input_path}.")

        frequencies = count_words(lines, self.config.separators)
        selection = select_top(frequencies, requested)
        entries = assign_font_sizes(
            selection.entries, self.config.min_font, self.config.max_font)
        self.logger.info(
            f"Found {len(frequencies)} distinct words, "
            f"keeping {selection.effective_count} of {requested} requested.")

        return Cloud(input_path, requested, selection.effective_count,
                     entries, len(frequencies))

    def generate(self, input_path, output_path, count=None):
        """Build the cloud for input_path and write its page to output_path."""
        cloud = self.build(input_path, count)
        markup = self.page_renderer(cloud, self.config.stylesheet)
        write_page(markup, output_path)
        self.logger.info(f"Wrote tag cloud of {cloud.effective} words to {output_path}.")
        return cloud
