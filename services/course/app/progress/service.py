"""Progress service: read-only business logic, no FastAPI imports.

One ``ProgressQueryService`` is built per request with the caller's identity
and a fresh ``RequestCache``. Missing identity, missing active course or a
missing row are normal outcomes and come back as ``None``, ``[]`` or ``0``.
Repository failures propagate unchanged.
"""

from __future__ import annotations

import logging

from app.progress.cache import RequestCache, request_memoized
from app.progress.completion import (
    completion_percentage,
    find_active_lesson,
    is_challenge_completed,
    is_lesson_completed,
)
from app.progress.repository import ProgressRepository
from app.progress.schemas import (
    ActiveLessonResponse,
    ChallengeStatus,
    CourseDetailResponse,
    CourseProgressResponse,
    CourseResponse,
    LessonDetailResponse,
    LessonStatus,
    LessonSummary,
    UnitProgressResponse,
    UnitSummary,
    UserProgressResponse,
)

logger = logging.getLogger(__name__)


class ProgressQueryService:
    def __init__(
        self,
        repository: ProgressRepository,
        user_id: str | None,
        cache: RequestCache | None = None,
    ):
        self.repository = repository
        self.user_id = user_id
        self.cache = cache if cache is not None else RequestCache()

    # ------------------------------------------------------------------
    # Identity & active course
    # ------------------------------------------------------------------

    @request_memoized
    async def get_user_progress(self) -> UserProgressResponse | None:
        if not self.user_id:
            logger.debug("Anonymous caller, no user progress")
            return None

        row = await self.repository.get_user_progress(self.user_id)
        if row is None:
            return None
        return UserProgressResponse.model_validate(row)

    async def _active_course_id(self) -> int | None:
        if not self.user_id:
            return None
        user_progress = await self.get_user_progress()
        if user_progress is None or user_progress.active_course_id is None:
            logger.debug("User %s has no active course", self.user_id)
            return None
        return user_progress.active_course_id

    # ------------------------------------------------------------------
    # Learn tree
    # ------------------------------------------------------------------

    @request_memoized
    async def get_units(self) -> list[UnitProgressResponse]:
        course_id = await self._active_course_id()
        if course_id is None:
            return []

        units = await self.repository.list_units_with_progress(course_id, self.user_id)
        return [
            UnitProgressResponse(
                **UnitSummary.model_validate(unit).model_dump(),
                lessons=[
                    LessonStatus.model_validate(lesson).model_copy(
                        update={"completed": is_lesson_completed(lesson)}
                    )
                    for lesson in unit.lessons
                ],
            )
            for unit in units
        ]

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    @request_memoized
    async def get_courses(self) -> list[CourseResponse]:
        courses = await self.repository.list_courses()
        return [CourseResponse.model_validate(c) for c in courses]

    @request_memoized
    async def get_course_by_id(self, course_id: int) -> CourseDetailResponse | None:
        course = await self.repository.get_course_with_units(course_id)
        if course is None:
            return None
        return CourseDetailResponse.model_validate(course)

    # ------------------------------------------------------------------
    # Active lesson
    # ------------------------------------------------------------------

    @request_memoized
    async def get_course_progress(self) -> CourseProgressResponse | None:
        course_id = await self._active_course_id()
        if course_id is None:
            return None

        units = await self.repository.list_units_with_progress(course_id, self.user_id)
        found = find_active_lesson(units)
        if found is None:
            return CourseProgressResponse()
        unit, lesson = found
        return CourseProgressResponse(
            active_lesson=ActiveLessonResponse(
                **LessonSummary.model_validate(lesson).model_dump(),
                unit=UnitSummary.model_validate(unit),
            ),
            active_lesson_id=lesson.lesson_id,
        )

    @request_memoized
    async def get_lesson(self, lesson_id: int | None = None) -> LessonDetailResponse | None:
        if not self.user_id:
            return None

        if lesson_id is None:
            course_progress = await self.get_course_progress()
            lesson_id = course_progress.active_lesson_id if course_progress else None
        if lesson_id is None:
            return None

        lesson = await self.repository.get_lesson_with_challenges(lesson_id, self.user_id)
        if lesson is None or lesson.challenges is None:
            return None

        return LessonDetailResponse(
            **LessonSummary.model_validate(lesson).model_dump(),
            challenges=[
                ChallengeStatus.model_validate(challenge).model_copy(
                    update={"completed": is_challenge_completed(challenge.progress)}
                )
                for challenge in lesson.challenges
            ],
        )

    @request_memoized
    async def get_lesson_percentage(self) -> int:
        course_progress = await self.get_course_progress()
        if course_progress is None or course_progress.active_lesson_id is None:
            return 0

        lesson = await self.get_lesson(course_progress.active_lesson_id)
        if lesson is None:
            return 0

        completed = sum(1 for c in lesson.challenges if c.completed)
        return completion_percentage(completed, len(lesson.challenges))
