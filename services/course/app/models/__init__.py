# Import all models so Base.metadata knows every table
from .challenge import Challenge, ChallengeOption
from .course import Course
from .enums import ChallengeType
from .lesson import Lesson
from .progress import ChallengeProgress, UserProgress
from .unit import Unit

__all__ = [
    "Challenge",
    "ChallengeOption",
    "ChallengeProgress",
    "ChallengeType",
    "Course",
    "Lesson",
    "Unit",
    "UserProgress",
]
