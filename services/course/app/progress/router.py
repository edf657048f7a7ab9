"""Progress router: HTTP layer only.

Read endpoints for the learn page, course catalog and lesson player.
Delegates to the controller; anonymous callers get empty bodies, not 401s.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from app.dependencies import get_progress_service
from app.progress import controller
from app.progress.schemas import (
    CourseDetailResponse,
    CourseProgressResponse,
    CourseResponse,
    LessonDetailResponse,
    LessonPercentageResponse,
    UnitProgressResponse,
    UserProgressResponse,
)
from app.progress.service import ProgressQueryService

router = APIRouter(tags=["Progress"])


# ======================================================================
# User progress
# ======================================================================


@router.get(
    "/progress/me",
    response_model=UserProgressResponse | None,
    summary="Current user's progress row",
    description="Hearts, points and active course of the caller. "
    "Null for anonymous callers or users who have not picked a course yet.",
)
async def get_user_progress(
    service: ProgressQueryService = Depends(get_progress_service),
) -> UserProgressResponse | None:
    return await controller.get_user_progress(service)


@router.get(
    "/progress/units",
    response_model=list[UnitProgressResponse],
    summary="Units of the active course with lesson completion",
)
async def get_units(
    service: ProgressQueryService = Depends(get_progress_service),
) -> list[UnitProgressResponse]:
    return await controller.get_units(service)


@router.get(
    "/progress/course",
    response_model=CourseProgressResponse | None,
    summary="Active lesson of the active course",
    description="First lesson, in unit then lesson order, that still has an "
    "unfinished challenge. Both fields are null once the course is complete.",
)
async def get_course_progress(
    service: ProgressQueryService = Depends(get_progress_service),
) -> CourseProgressResponse | None:
    return await controller.get_course_progress(service)


@router.get(
    "/progress/lesson-percentage",
    response_model=LessonPercentageResponse,
    summary="Completion percentage of the active lesson",
)
async def get_lesson_percentage(
    service: ProgressQueryService = Depends(get_progress_service),
) -> LessonPercentageResponse:
    return await controller.get_lesson_percentage(service)


# ======================================================================
# Catalog
# ======================================================================


@router.get(
    "/courses",
    response_model=list[CourseResponse],
    summary="List all courses",
)
async def list_courses(
    service: ProgressQueryService = Depends(get_progress_service),
) -> list[CourseResponse]:
    return await controller.list_courses(service)


@router.get(
    "/courses/{course_id}",
    response_model=CourseDetailResponse,
    summary="Course with ordered units and lessons",
    responses={404: {"description": "Course not found."}},
)
async def get_course(
    course_id: int = Path(description="Course ID."),
    service: ProgressQueryService = Depends(get_progress_service),
) -> CourseDetailResponse:
    return await controller.get_course(service, course_id)


# ======================================================================
# Lessons
# ======================================================================


@router.get(
    "/lessons/active",
    response_model=LessonDetailResponse | None,
    summary="Active lesson with challenges and completion",
)
async def get_active_lesson(
    service: ProgressQueryService = Depends(get_progress_service),
) -> LessonDetailResponse | None:
    return await controller.get_lesson(service)


@router.get(
    "/lessons/{lesson_id}",
    response_model=LessonDetailResponse | None,
    summary="Lesson with challenges, options and completion",
)
async def get_lesson(
    lesson_id: int = Path(description="Lesson ID."),
    service: ProgressQueryService = Depends(get_progress_service),
) -> LessonDetailResponse | None:
    return await controller.get_lesson(service, lesson_id)
