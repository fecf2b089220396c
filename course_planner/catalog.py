# === catalog.py ===
import logging

from course_planner.config import DELIMITER
from course_planner.course import Course

logger = logging.getLogger(__name__)


def strip_line_ending(line):
    # Only the terminator; "A,B\r\r\n" keeps one "\r" in the name
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def split_fields(line):
    parts = line.split(DELIMITER)
    # "A,B," has two fields, not three
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


class CourseCatalog:
    def __init__(self):
        self.courses = {}  # code -> Course

    def __len__(self):
        return len(self.courses)

    def __contains__(self, code):
        return code in self.courses

    def get(self, code):
        return self.courses.get(code)

    def course_exists(self, code):
        return code in self.courses

    def codes(self):
        return sorted(self.courses.keys())

    def add_placeholder(self, code):
        if code not in self.courses:
            self.courses[code] = Course(code, "")
        return self.courses[code]

    def add_course(self, code, name, prerequisites):
        course = self.courses.get(code)
        if course is None:
            course = Course(code, name)
            self.courses[code] = course
        else:
            course.code = code
            course.name = name

        for prereq in prerequisites:
            course.prerequisites.append(prereq)
            self.add_placeholder(prereq)
        return course

    def load_courses(self, path):
        self.courses = {}
        loaded = skipped = 0

        try:
            f = open(path, newline="\n", encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f'Cannot open file "{path}". Check if the file exists and the path is correct. ({e.strerror})')
            return self

        with f:
            for line_no, line in enumerate(f, 1):
                line = strip_line_ending(line)
                if not line:
                    continue

                parts = split_fields(line)
                if len(parts) < 2:
                    logger.error(f"Invalid line format (line {line_no}): {line}")
                    skipped += 1
                    continue

                code, name = parts[0], parts[1]
                self.add_course(code, name, parts[2:])
                loaded += 1

        logger.info(f"Loaded {loaded} course lines from {path} ({len(self.courses)} courses, {skipped} skipped)")
        return self


def load_courses(path):
    return CourseCatalog().load_courses(path)
