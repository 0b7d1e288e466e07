"""
launch.py - Word Counter Entry Point

Main entry point for the word counter. Resolves the input and output
paths (CLI flag, then config file, then interactive prompt) and runs
the counting pipeline.

Usage:
    python launch.py                                # Prompt for both paths
    python launch.py --input a.txt --output a.html  # Non-interactive
    python launch.py --config_file path             # Use custom config file
"""

from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from wordcount import WordCounter


def resolve_path(flag_value, config_value, prompt):
    """
    Pick the first non-empty path source.

    Args:
        flag_value: Value given on the command line (may be None)
        config_value: Value from config.ini (may be empty)
        prompt: Question asked when neither is set

    Returns:
        Path string, empty if the user answered with nothing
    """
    if flag_value:
        return flag_value
    if config_value:
        return config_value
    try:
        return input(prompt + "\n").strip()
    except EOFError:
        # stdin closed before an answer; same as answering with nothing
        return ""


def main(config_file="config.ini", input_file=None, output_file=None):
    """
    Count the words of one file into an HTML table.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_file: Input path overriding the config file
        output_file: Output path overriding the config file

    Returns:
        Process exit status: 0 on success, 1 on failure
    """
    logger = get_logger("LAUNCH")

    # Load configuration (a missing file leaves every key at its default)
    cparser = ConfigParser()
    try:
        cparser.read(config_file)
        config = Config(cparser)
    except (ConfigParserError, LookupError) as e:
        logger.error(f"Invalid configuration in {config_file}: {e}")
        return 1

    input_file = resolve_path(
        input_file, config.input_file,
        "Please enter the name of a valid input file ")
    if not input_file:
        logger.error("No input file given.")
        return 1
    output_file = resolve_path(
        output_file, config.output_file,
        "Please enter the name of a valid output file ")
    if not output_file:
        logger.error("No output file given.")
        return 1

    logger.info(f"Counting words in {input_file} into {output_file}.")
    try:
        WordCounter(config).run(input_file, output_file)
    except (OSError, LookupError) as e:
        logger.error(f"Word count failed: {e}")
        return 1
    return 0


def cli(argv=None):
    parser = ArgumentParser(
        description="Count the words of a text file into an HTML table.")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input", type=str, default=None,
                        help="Text file to read (overrides config file)")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write (overrides config file)")
    args = parser.parse_args(argv)
    return main(args.config_file, args.input, args.output)


if __name__ == "__main__":
    raise SystemExit(cli())
