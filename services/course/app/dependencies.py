"""Request-scoped wiring for the progress service.

FastAPI caches dependencies per request, so every endpoint helper that
asks for ``get_progress_service`` during one request shares one service and
one ``RequestCache``.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.progress.cache import RequestCache
from app.progress.repository import SqlAlchemyProgressRepository
from app.progress.service import ProgressQueryService
from shared.auth.dependencies import get_current_user_optional
from shared.models.user import CurrentUser


async def get_optional_user_id(
    user: CurrentUser | None = Depends(get_current_user_optional),
) -> str | None:
    return user.id if user is not None else None


async def get_progress_service(
    db: AsyncSession = Depends(get_db),
    user_id: str | None = Depends(get_optional_user_id),
) -> ProgressQueryService:
    return ProgressQueryService(
        SqlAlchemyProgressRepository(db),
        user_id,
        cache=RequestCache(),
    )
