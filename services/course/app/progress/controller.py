"""Progress controller: maps service results to HTTP responses, catches domain exceptions."""

from __future__ import annotations

from fastapi import HTTPException, status

from app.exceptions import CourseNotFoundError
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


def _handle_domain_error(exc: CourseNotFoundError) -> HTTPException:
    # Store failures are not domain errors; they reach the error envelope untouched.
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


async def get_user_progress(service: ProgressQueryService) -> UserProgressResponse | None:
    return await service.get_user_progress()


async def get_units(service: ProgressQueryService) -> list[UnitProgressResponse]:
    return await service.get_units()


async def get_course_progress(service: ProgressQueryService) -> CourseProgressResponse | None:
    return await service.get_course_progress()


async def get_lesson_percentage(service: ProgressQueryService) -> LessonPercentageResponse:
    return LessonPercentageResponse(percentage=await service.get_lesson_percentage())


async def list_courses(service: ProgressQueryService) -> list[CourseResponse]:
    return await service.get_courses()


async def get_course(service: ProgressQueryService, course_id: int) -> CourseDetailResponse:
    try:
        course = await service.get_course_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(str(course_id))
        return course
    except CourseNotFoundError as exc:
        raise _handle_domain_error(exc) from exc


async def get_lesson(
    service: ProgressQueryService, lesson_id: int | None = None
) -> LessonDetailResponse | None:
    return await service.get_lesson(lesson_id)
