"""Domain exception classes for the course service.

Service-layer reads return ``None`` for missing rows; controllers raise
these where an endpoint contract requires a 404.
"""


class CourseNotFoundError(Exception):
    """Raised when a course cannot be found by ID."""

    def __init__(self, identifier: str = ""):
        self.identifier = identifier
        super().__init__(f"Course not found: {identifier}")
