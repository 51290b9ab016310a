#!/usr/bin/env python3
"""
Centralized constants for git-stats.

Output strings in this module are consumed by scripts parsing the report, so
headers, underlines and units must stay byte-for-byte stable.
"""

# Traversal
DEFAULT_REVISION = "HEAD"

# Report layout
CONTRIBUTORS_TITLE = "📊 Top Contributors"
CONTRIBUTORS_UNDERLINE = "-" * 20
CONTRIBUTORS_UNIT = "commits"

FILES_TITLE = "📁 Most Modified Files"
FILES_UNDERLINE = "-" * 28
FILES_UNIT = "changes"
DEFAULT_TOP_FILES = 10

# Error lines
FAILURE_MARKER = "❌"
MISSING_PATH_MESSAGE = "Please provide a repo path using --path flag"
OPEN_FAILED_MESSAGE = "Failed to open repo:"
HEAD_FAILED_MESSAGE = "Failed to get HEAD:"
READ_FAILED_MESSAGE = "Failed to read commits:"
ITERATE_FAILED_MESSAGE = "Failed to iterate commits:"
FILE_STATS_FAILED_MESSAGE = "Error while collecting file stats:"

# Logging / configuration
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
ENV_LOG_LEVEL = "GITSTATS_LOG_LEVEL"
ENV_LOG_FILE = "GITSTATS_LOG_FILE"
ENV_TOP_FILES = "GITSTATS_TOP_FILES"
