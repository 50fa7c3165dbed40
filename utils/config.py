"""
config.py - Configuration Wrapper

Reads the word counter settings out of a ConfigParser. Every key has a
fallback so a missing config.ini still yields a usable Config.
"""

MARKUP_POLICIES = {"auto", "yes", "no"}


class Config(object):
    def __init__(self, config):
        # No LOGDIR means console logging only
        self.log_dir = config.get("LOCAL PROPERTIES", "LOGDIR", fallback="").strip() or None

        self.encoding = config.get("INPUT", "ENCODING", fallback="utf-8").strip()
        self.strip_markup = config.get("INPUT", "STRIPMARKUP", fallback="no").strip().lower()
        if self.strip_markup not in MARKUP_POLICIES:
            raise ValueError(
                f"STRIPMARKUP must be one of {sorted(MARKUP_POLICIES)}, "
                f"got {self.strip_markup!r}")

        self.output_file = config.get("REPORT", "OUTPUTFILE", fallback="index.html").strip()

    def should_strip_markup(self, input_file):
        """Decide whether an input file is parsed as HTML before counting."""
        if self.strip_markup == "auto":
            return input_file.lower().endswith((".html", ".htm"))
        return self.strip_markup == "yes"
