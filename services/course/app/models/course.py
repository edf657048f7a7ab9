from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.database.postgres import Base


class Course(Base):
    __tablename__ = "courses"

    course_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    image_src: Mapped[str] = mapped_column(String(500), nullable=False)

    units = relationship(
        "Unit", back_populates="course", order_by="Unit.sort_order", lazy="noload"
    )
    user_progress = relationship("UserProgress", back_populates="active_course", lazy="noload")
