# src/catr/config.py

PROG_NAME = "catr"
VERSION = "0.1.0"
DESCRIPTION = "Concatenate files (or standard input) to standard output, optionally numbering lines."

# Token that stands for standard input
STDIN_TOKEN = "-"

# Line number prefix: right-justified in a fixed-width field, then a separator
NUMBER_WIDTH = 6
NUMBER_SEPARATOR = "\t"

# Logging is silent unless asked for, e.g. CATR_LOG_LEVEL=DEBUG
LOG_LEVEL_ENV = "CATR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"
