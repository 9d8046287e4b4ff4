"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, asking for any missing
file names, and running the pipeline.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input in.txt --output out.html # Use COUNT from config
    python launch.py --count 50 --config_file path    # Custom count and config
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloud
from tagcloud.errors import InvalidArgument, TagCloudError


def prompt_count(default, ask=input):
    """Ask for the word count; an empty answer keeps default."""
    answer = ask(
        "Please enter a positive number of words to be generated in "
        f"the tag cloud [{default}]: ").strip()
    if not answer:
        return default
    try:
        return int(answer)
    except ValueError as e:
        raise InvalidArgument(f"Not a number of words: {answer!r}") from e


def main(config_file, input_path=None, output_path=None, count=None, ask=input):
    """
    Load the configuration and generate one tag cloud page.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path: Text file to read; prompted for when None
        output_path: HTML file to write; prompted for when None
        count: Number of words; prompted for when None
        ask: Prompt function (for testing)

    Returns:
        Process exit status, 0 on success
    """
    cparser = ConfigParser()
    cparser.read(config_file)

    try:
        config = Config(cparser)
    except TagCloudError as e:
        get_logger("LAUNCH").error(f"Invalid configuration in {config_file}: {e}")
        return 1

    logger = get_logger("LAUNCH", log_dir=config.log_dir)

    if input_path is None:
        input_path = ask("Please Enter the name of the input file: ").strip()
    if output_path is None:
        output_path = ask("Please Enter the name of the output file: ").strip()

    try:
        if count is None:
            count = prompt_count(config.count, ask)
        TagCloud(config).generate(input_path, output_path, count)
    except TagCloudError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input", type=str, default=None,
                        help="Text file to build the tag cloud from")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write the tag cloud to")
    parser.add_argument("--count", type=int, default=None,
                        help="Number of words in the tag cloud")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.output, args.count))
