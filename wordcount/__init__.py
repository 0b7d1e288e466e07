"""
wordcount/__init__.py - Word Count Pipeline

Sequences one batch pass over an input file:
- Collects every word of the input (tokenizer + collector)
- Sorts the words alphabetically (sorter)
- Writes the HTML count table (renderer)

Key role: Owns the input/output handles for the duration of a run
"""

from utils import get_logger
from wordcount.collector import collect_words
from wordcount.renderer import render
from wordcount.sorter import sort_words
from wordcount.tokenizer import SEPARATORS


class WordCounter(object):
    """
    Single-pass word counter writing an HTML table.

    The input is opened before the output, so a bad input path fails
    without creating the output file. Both handles are released on every
    exit path.
    """

    def __init__(self, config, separators=SEPARATORS):
        """
        Initialize the counter.

        Args:
            config: Configuration object (encoding)
            separators: Set of separator characters
        """
        self.config = config
        self.logger = get_logger("WORDCOUNTER")
        self.separators = separators

    def count(self, lines):
        """Collect and sort the words of a line source."""
        words = collect_words(lines, self.separators)
        self.logger.info(f"Collected {len(words)} words.")
        return sort_words(words)

    def run(self, input_file, output_file):
        """
        Count the words of input_file and write the table to output_file.

        Args:
            input_file: Path of the text file to read
            output_file: Path of the HTML file to write

        Returns:
            Number of distinct words written

        Raises:
            OSError: If the input cannot be read or the output cannot be written
        """
        with open(input_file, "r", encoding=self.config.encoding, errors="ignore") as source:
            with open(output_file, "w", encoding="utf-8") as sink:
                words = self.count(source)
                rows = render(words, sink, input_file)
        self.logger.info(f"Wrote {rows} rows to {output_file}.")
        return rows
