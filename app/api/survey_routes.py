# app/api/survey_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.deps import require_auth
from app.core.config import settings
from app.core.errors import NotFound
from app.db.session import get_db
from app.schemas.survey import (
    ResponseList,
    ResponseSubmit,
    ResponseSubmitted,
    SurveyCreate,
    SurveyCreated,
    SurveyDetail,
    SurveyList,
)
from app.services import survey_service

router = APIRouter(prefix="/surveys", tags=["Surveys"])

@router.post("", response_model=SurveyCreated, response_model_exclude_none=True, status_code=201)
def create_survey(payload: SurveyCreate, db: Session = Depends(get_db)):
    created = survey_service.create_survey(db, payload)
    return {"message": "created", "data": created}

@router.get("", response_model=SurveyList, response_model_exclude_none=True, summary="List surveys (newest first)")
def list_surveys(db: Session = Depends(get_db)):
    surveys = survey_service.list_surveys(db)
    return {"count": len(surveys), "data": surveys}

# Declared before /{survey_id} routes; only POST exists on this path.
@router.post("/responses", response_model=ResponseSubmitted, status_code=201)
def submit_response(
    payload: ResponseSubmit,
    user_id: str = Depends(require_auth),
    db: Session = Depends(get_db),
):
    respondent = user_id if settings.RECORD_RESPONDENT_ID else settings.ANONYMOUS_RESPONDENT_ID
    item = survey_service.submit_response(db, payload, user_id=respondent)
    return {"message": "submitted", "data": item}

@router.get("/{survey_id}", response_model=SurveyDetail, response_model_exclude_none=True)
def get_survey(survey_id: str, db: Session = Depends(get_db)):
    survey = survey_service.get_survey_by_id(db, survey_id)
    if survey is None:
        raise NotFound()
    return {"data": survey}

@router.get("/{survey_id}/responses", response_model=ResponseList, summary="List responses for a survey (newest first)")
def list_responses(survey_id: str, db: Session = Depends(get_db)):
    items = survey_service.list_responses(db, survey_id)
    return {"count": len(items), "data": items}
