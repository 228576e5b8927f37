from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Text
from app.db.base import Base

class Survey(Base):
    __tablename__ = "surveys"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # ISO-8601 UTC string, see app.db.ids.utc_now_iso
    created_at: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    questions = relationship(
        "Question",
        back_populates="survey",
        order_by="Question.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    responses = relationship(
        "Response",
        back_populates="survey",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    survey_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("surveys.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    survey = relationship("Survey", back_populates="questions")


class Response(Base):
    __tablename__ = "responses"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str | None] = mapped_column(String(64))
    survey_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("surveys.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    submitted_at: Mapped[str] = mapped_column(String(32), nullable=False)
    # answers map serialized as JSON text
    answers_json: Mapped[str] = mapped_column(Text, nullable=False)

    survey = relationship("Survey", back_populates="responses")
