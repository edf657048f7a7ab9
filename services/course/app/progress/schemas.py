"""Progress domain Pydantic V2 schemas.

Response-only: this service never accepts request bodies. Every model reads
from ORM rows (``from_attributes``); ``completed`` flags are filled in by the
service, never by the database.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ChallengeType


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    course_id: int
    title: str
    image_src: str


class LessonSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    lesson_id: int
    unit_id: int
    title: str
    sort_order: int


class UnitSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    unit_id: int
    course_id: int
    title: str
    description: str
    sort_order: int


class UnitWithLessonsResponse(UnitSummary):
    lessons: list[LessonSummary] = Field(default_factory=list)


class CourseDetailResponse(CourseResponse):
    """Course with units and lessons, both ascending by ``sort_order``."""

    units: list[UnitWithLessonsResponse] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# User progress
# ---------------------------------------------------------------------------


class UserProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    user_name: str
    user_image_src: str
    active_course_id: int | None
    hearts: int
    points: int
    active_course: CourseResponse | None = None


# ---------------------------------------------------------------------------
# Learn tree
# ---------------------------------------------------------------------------


class LessonStatus(LessonSummary):
    completed: bool = Field(
        default=False,
        description="True when the lesson has challenges and every one is completed.",
    )


class UnitProgressResponse(UnitSummary):
    lessons: list[LessonStatus] = Field(default_factory=list)


class ActiveLessonResponse(LessonSummary):
    unit: UnitSummary | None = None


class CourseProgressResponse(BaseModel):
    active_lesson: ActiveLessonResponse | None = None
    active_lesson_id: int | None = None


# ---------------------------------------------------------------------------
# Lesson player
# ---------------------------------------------------------------------------


class ChallengeOptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    option_id: int
    challenge_id: int
    text: str
    correct: bool
    image_src: str | None
    audio_src: str | None


class ChallengeProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    progress_id: int
    challenge_id: int
    user_id: str
    completed: bool


class ChallengeStatus(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    challenge_id: int
    lesson_id: int
    type: ChallengeType
    question: str
    sort_order: int
    options: list[ChallengeOptionResponse] = Field(default_factory=list)
    progress: list[ChallengeProgressResponse] = Field(
        default_factory=list,
        description="The caller's progress rows only.",
    )
    completed: bool = False


class LessonDetailResponse(LessonSummary):
    challenges: list[ChallengeStatus] = Field(default_factory=list)


class LessonPercentageResponse(BaseModel):
    percentage: int = Field(ge=0, le=100)
