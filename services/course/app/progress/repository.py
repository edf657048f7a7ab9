"""Typed read queries behind the progress service.

``ProgressRepository`` is what the service depends on. The SQLAlchemy
implementation eager-loads every relation the service touches, because the
models use ``lazy="noload"`` and nothing may lazy-load under asyncio.

Per-user progress is loaded through ``relationship.and_()`` criteria so a
challenge's ``progress`` collection only ever holds the caller's rows.
``populate_existing`` refreshes collections that an earlier query in the same
session may have filled for a different user.
"""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.challenge import Challenge
from app.models.course import Course
from app.models.lesson import Lesson
from app.models.progress import ChallengeProgress, UserProgress
from app.models.unit import Unit


class ProgressRepository(Protocol):
    async def get_user_progress(self, user_id: str) -> UserProgress | None: ...

    async def list_courses(self) -> list[Course]: ...

    async def get_course_with_units(self, course_id: int) -> Course | None: ...

    async def list_units_with_progress(self, course_id: int, user_id: str) -> list[Unit]: ...

    async def get_lesson_with_challenges(self, lesson_id: int, user_id: str) -> Lesson | None: ...


class SqlAlchemyProgressRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_progress(self, user_id: str) -> UserProgress | None:
        stmt = (
            select(UserProgress)
            .where(UserProgress.user_id == user_id)
            .options(selectinload(UserProgress.active_course))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_courses(self) -> list[Course]:
        result = await self.db.execute(select(Course).order_by(Course.course_id))
        return list(result.scalars().all())

    async def get_course_with_units(self, course_id: int) -> Course | None:
        stmt = (
            select(Course)
            .where(Course.course_id == course_id)
            .options(selectinload(Course.units).selectinload(Unit.lessons))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_units_with_progress(self, course_id: int, user_id: str) -> list[Unit]:
        stmt = (
            select(Unit)
            .where(Unit.course_id == course_id)
            .order_by(Unit.sort_order)
            # Child paths only: eager-loading Lesson.unit back up resets Unit.lessons.
            .options(
                selectinload(Unit.lessons)
                .selectinload(Lesson.challenges)
                .selectinload(
                    Challenge.progress.and_(ChallengeProgress.user_id == user_id)
                ),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_lesson_with_challenges(self, lesson_id: int, user_id: str) -> Lesson | None:
        stmt = (
            select(Lesson)
            .where(Lesson.lesson_id == lesson_id)
            .options(
                selectinload(Lesson.challenges).selectinload(Challenge.options),
                selectinload(Lesson.challenges).selectinload(
                    Challenge.progress.and_(ChallengeProgress.user_id == user_id)
                ),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
