"""
launch.py - Word Counter Entry Point

Asks for an input file and an output folder, counts the words of the
file, and writes an alphabetical HTML report into the folder.

Usage:
    python launch.py                                # Prompt for both paths
    python launch.py --input_file a.txt             # Prompt for the folder only
    python launch.py --config_file path             # Use custom config file
"""

from configparser import ConfigParser
from argparse import ArgumentParser

from utils.config import Config
from counter import WordCounter


def prompt(message, input_func=input):
    """Print a prompt on stdout and return the line typed by the operator."""
    return input_func(message)


def main(config_file, input_file=None, output_folder=None, input_func=input):
    """
    Load configuration and produce the report.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_file: Text file to count; prompted for when None
        output_folder: Folder receiving the report; prompted for when None
        input_func: Line reader used for the prompts (for testing)
    """
    # Load configuration
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)

    if input_file is None:
        input_file = prompt("Enter name of an input file: ", input_func)
    if output_folder is None:
        output_folder = prompt("Enter name of a folder: ", input_func)

    counter = WordCounter(config)
    return counter.run(input_file, output_folder)


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input_file", type=str, default=None,
                        help="Text file to count (skips the prompt)")
    parser.add_argument("--output_folder", type=str, default=None,
                        help="Folder receiving index.html (skips the prompt)")
    args = parser.parse_args()
    main(args.config_file, args.input_file, args.output_folder)
