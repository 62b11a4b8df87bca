from __future__ import annotations

DEFAULT_PATH = "."
PSEUDO_ENTRIES = (".", "..")
HIDDEN_PREFIX = "."

SIZE_WIDTH = 8
MODE_PLACEHOLDER = "?" * 10
SIZE_PLACEHOLDER = "?" * SIZE_WIDTH

TEXT_ARG_DESC = "List directory contents."
TEXT_ARG_PATHS = "Files or directories to list (defaults to current directory)."
TEXT_ARG_ALL = "Do not ignore entries starting with ."
TEXT_ARG_LONG = "Use a long listing format."
TEXT_ARG_HUMAN = "With -l, print sizes like 1.0K 234.0M 2.0G etc."
TEXT_ARG_LOG_LEVEL = "Logging level."
TEXT_ARG_LOG_FILE = "Log file path (logging is disabled without it)."
