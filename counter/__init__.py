"""
counter/__init__.py - Word Counter Driver

Runs the counting pipeline for one input file:
- Reads the input (plain text, or the visible text of an HTML page)
- Counts every distinct word
- Orders the words alphabetically with their counts
- Hands the result to the report writer

Key role: High-level coordinator that ties the pipeline stages together
"""

from utils import get_logger
from counter.frequencies import compute_word_frequencies
from counter.markup import read_visible_lines
from counter.ordering import alphabetical_order
from counter.report import generate_page
from counter.tokenizer import read_lines


class WordCounter(object):
    """
    Single-pass word counter producing one HTML report per run.
    """

    def __init__(self, config, report_writer=generate_page):
        """
        Initialize the counter.

        Args:
            config: Configuration object (log dir, encoding, markup policy, report name)
            report_writer: Callable rendering the report (for testing)
        """
        self.config = config
        self.logger = get_logger("COUNTER", log_dir=config.log_dir)
        self.report_writer = report_writer

    def _lines(self, input_file):
        if self.config.should_strip_markup(input_file):
            self.logger.debug(f"Reading visible text of {input_file}.")
            return read_visible_lines(input_file, self.config.encoding)
        return read_lines(input_file, self.config.encoding)

    def count(self, input_file):
        """
        Count the words of an input file.

        Returns:
            (frequencies, words): word -> count table and the set of its keys
        """
        words = set()
        frequencies = compute_word_frequencies(self._lines(input_file), words)
        self.logger.info(
            f"Counted {sum(frequencies.values())} words, "
            f"{len(words)} distinct, in {input_file}.")
        return frequencies, words

    def run(self, input_file, output_folder):
        """
        Count the input file and write its report into output_folder.

        Returns:
            Path of the written report
        """
        try:
            frequencies, words = self.count(input_file)
        except OSError as e:
            self.logger.error(f"Could not read {input_file}: {e}")
            raise

        ordered = alphabetical_order(words)
        counts = [frequencies[word] for word in ordered]

        try:
            path = self.report_writer(
                input_file, ordered, counts,
                output_folder, self.config.output_file)
        except OSError as e:
            self.logger.error(f"Could not write report to {output_folder}: {e}")
            raise

        self.logger.info(f"Wrote report for {len(ordered)} words to {path}.")
        return path
