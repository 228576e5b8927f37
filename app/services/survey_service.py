# app/services/survey_service.py
"""
Survey and response persistence.

Surveys are created together with their questions in a single transaction.
Responses are only accepted when every answer key is a question id of the
target survey; server-assigned question ids are the only valid keys.
"""
import json
import logging

from sqlalchemy import select, desc
from sqlalchemy.orm import Session, selectinload

from app.core.errors import SurveyNotFound, ValidationFailed
from app.db.ids import new_id, utc_now_iso
from app.models.survey import Question, Response, Survey
from app.schemas.survey import ResponseItem, ResponseSubmit, SurveyCreate, SurveyOut

logger = logging.getLogger(__name__)


def _to_item(row: Response) -> ResponseItem:
    return ResponseItem(
        id=row.id,
        survey_id=row.survey_id,
        answers=json.loads(row.answers_json),
        submitted_at=row.submitted_at,
    )


def _survey_exists(db: Session, survey_id: str) -> bool:
    return db.scalar(select(Survey.id).where(Survey.id == survey_id)) is not None


def create_survey(db: Session, payload: SurveyCreate) -> SurveyOut:
    survey = Survey(id=new_id(), title=payload.title, created_at=utc_now_iso())
    survey.questions = [
        Question(id=new_id(), position=i, text=q.text, description=q.description)
        for i, q in enumerate(payload.questions)
    ]
    db.add(survey)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("created survey id=%s questions=%d", survey.id, len(survey.questions))
    return SurveyOut.model_validate(survey)


def list_surveys(db: Session) -> list[SurveyOut]:
    """All surveys, newest first, questions attached."""
    rows = db.execute(
        select(Survey)
        .options(selectinload(Survey.questions))
        .order_by(desc(Survey.created_at))
    ).scalars().all()
    return [SurveyOut.model_validate(s) for s in rows]


def get_survey_by_id(db: Session, survey_id: str) -> SurveyOut | None:
    survey = db.execute(
        select(Survey)
        .options(selectinload(Survey.questions))
        .where(Survey.id == survey_id)
    ).scalars().first()
    if survey is None:
        return None
    return SurveyOut.model_validate(survey)


def submit_response(db: Session, payload: ResponseSubmit, user_id: str | None = None) -> ResponseItem:
    if not _survey_exists(db, payload.survey_id):
        raise SurveyNotFound()

    allowed = set(
        db.scalars(select(Question.id).where(Question.survey_id == payload.survey_id)).all()
    )
    unknown = [qid for qid in payload.answers if qid not in allowed]
    if unknown:
        raise ValidationFailed(issues=[
            {"path": ["answers", qid], "message": "unknown question id"} for qid in unknown
        ])

    row = Response(
        id=new_id(),
        user_id=user_id,
        survey_id=payload.survey_id,
        submitted_at=utc_now_iso(),
        answers_json=json.dumps(payload.answers),
    )
    db.add(row)
    db.commit()

    logger.info("recorded response id=%s survey=%s", row.id, row.survey_id)
    return _to_item(row)


def list_responses(db: Session, survey_id: str) -> list[ResponseItem]:
    """Responses for one survey, newest first."""
    if not _survey_exists(db, survey_id):
        raise SurveyNotFound()

    rows = db.execute(
        select(Response)
        .where(Response.survey_id == survey_id)
        .order_by(desc(Response.submitted_at))
    ).scalars().all()
    return [_to_item(r) for r in rows]
