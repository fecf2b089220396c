import logging

import pytest


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog lines to a file and return its path as a string."""
    def _write(lines, name="courses.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write


@pytest.fixture
def scripted_input():
    """Build an input function that replays the given answers, then raises EOFError."""
    def _make(answers):
        answers = iter(answers)

        def _input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError
        return _input
    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("course_planner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
