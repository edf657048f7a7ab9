from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.database.postgres import Base

from .enums import ChallengeType, challenge_type_enum


class Challenge(Base):
    __tablename__ = "challenges"

    challenge_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lesson_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("lessons.lesson_id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[ChallengeType] = mapped_column(challenge_type_enum, nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False)

    lesson = relationship("Lesson", back_populates="challenges", lazy="noload")
    options = relationship(
        "ChallengeOption",
        back_populates="challenge",
        order_by="ChallengeOption.option_id",
        lazy="noload",
    )
    # Always loaded with a user_id criteria; unfiltered access is never meaningful.
    progress = relationship("ChallengeProgress", back_populates="challenge", lazy="noload")

    __table_args__ = (
        Index("ix_challenges_lesson_id", "lesson_id"),
    )


class ChallengeOption(Base):
    __tablename__ = "challenge_options"

    option_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    challenge_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("challenges.challenge_id", ondelete="CASCADE"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    image_src: Mapped[str | None] = mapped_column(String(500), nullable=True)
    audio_src: Mapped[str | None] = mapped_column(String(500), nullable=True)

    challenge = relationship("Challenge", back_populates="options", lazy="noload")

    __table_args__ = (
        Index("ix_challenge_options_challenge_id", "challenge_id"),
    )
