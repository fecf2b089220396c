# === course.py ===
class Course:
    def __init__(self, code, name="", prerequisites=None):
        self.code = code
        self.name = name  # empty for a placeholder
        self.prerequisites = list(prerequisites or [])  # List[str], file order

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (self.code, self.name, self.prerequisites) == (other.code, other.name, other.prerequisites)

    def __repr__(self):
        return f"Course({self.code!r}, {self.name!r}, {self.prerequisites!r})"
