# === printer.py ===
def format_course_list(catalog):
    return [f"{code}, {catalog.get(code).name}" for code in catalog.codes()]


def format_course_details(course):
    lines = [
        f"Course Number: {course.code}",
        f"Course Name: {course.name}",
    ]
    if course.prerequisites:
        lines.append("Prerequisites:")
        for prereq in course.prerequisites:
            lines.append(f" - {prereq}")
    else:
        lines.append("No prerequisites.")
    return lines


def print_course_list(catalog, out=None):
    print("\nCourse List:", file=out)
    for line in format_course_list(catalog):
        print(line, file=out)


def print_course_details(catalog, code, out=None):
    """Print one course; returns False when the code is not in the catalog."""
    if not catalog.course_exists(code):
        print("Error: Course not found.", file=out)
        return False

    print(file=out)
    for line in format_course_details(catalog.get(code)):
        print(line, file=out)
    return True
