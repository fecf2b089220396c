# === config.py ===
import argparse
import logging
import sys

DELIMITER = ","

LOAD_CHOICE = 1
LIST_CHOICE = 2
DETAIL_CHOICE = 3
EXIT_CHOICE = 9

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(levelname)s] %(message)s"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="course-planner",
        description="Load a course catalog file and browse courses and their prerequisites."
    )
    parser.add_argument("file", nargs="?", help="Catalog file to load before showing the menu (number,name,prereq...)")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help=f"Diagnostic output threshold (default: {DEFAULT_LOG_LEVEL})")
    return parser.parse_args(argv)


def configure_logging(level=DEFAULT_LOG_LEVEL):
    root = logging.getLogger("course_planner")
    root.setLevel(level)
    # Reconfiguring replaces the previous stderr handler
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
