"""
config.py - Run Configuration

Wraps a ConfigParser loaded from config.ini. Every key is optional:
paths left blank are resolved later by the driver (CLI flag or prompt).
"""

import codecs


class Config(object):
    """Typed view over the [FILES] section of config.ini."""

    def __init__(self, config):
        """
        Raises:
            LookupError: If ENCODING names an unknown codec
            configparser.Error: If a value cannot be interpolated
        """
        files = config["FILES"] if config.has_section("FILES") else {}
        self.input_file = files.get("INPUTFILE", "").strip()
        self.output_file = files.get("OUTPUTFILE", "").strip()
        self.encoding = files.get("ENCODING", "").strip() or "utf-8"
        codecs.lookup(self.encoding)
