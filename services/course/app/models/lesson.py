from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.database.postgres import Base


class Lesson(Base):
    __tablename__ = "lessons"

    lesson_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("units.unit_id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False)

    unit = relationship("Unit", back_populates="lessons", lazy="noload")
    challenges = relationship(
        "Challenge", back_populates="lesson", order_by="Challenge.sort_order", lazy="noload"
    )

    __table_args__ = (
        Index("ix_lessons_unit_id", "unit_id"),
    )
