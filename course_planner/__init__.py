from course_planner.course import Course
from course_planner.catalog import CourseCatalog, load_courses

__all__ = ["Course", "CourseCatalog", "load_courses"]
