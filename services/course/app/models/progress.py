from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.database.postgres import Base


class ChallengeProgress(Base):
    __tablename__ = "challenge_progress"

    progress_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Subject id from the identity provider; no local users table.
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    challenge_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("challenges.challenge_id", ondelete="CASCADE"),
        nullable=False,
    )
    # Several rows per (user, challenge) are allowed: each retry adds one.
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    challenge = relationship("Challenge", back_populates="progress", lazy="noload")

    __table_args__ = (
        Index("ix_challenge_progress_user_challenge", "user_id", "challenge_id"),
    )


class UserProgress(Base):
    __tablename__ = "user_progress"

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(200), nullable=False, default="User")
    user_image_src: Mapped[str] = mapped_column(
        String(500), nullable=False, default="/mascot.svg"
    )
    active_course_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("courses.course_id", ondelete="CASCADE"),
        nullable=True,
    )
    hearts: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    active_course = relationship("Course", back_populates="user_progress", lazy="noload")
