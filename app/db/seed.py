# app/db/seed.py
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.db.ids import new_id, utc_now_iso
from app.models.survey import Question, Survey

DEMO_TITLE = "Waterlily Intake"

SEED_QUESTIONS = [
    ("How did you discover us?", "Open text"),
    ("Hours per day doing care tasks?", "Number"),
    ("Do you have LTC insurance?", "true/false"),
]

def seed_demo_survey(db: Session) -> int:
    # if any survey exists, skip
    existing = db.execute(select(Survey.id)).scalars().first()
    if existing:
        return 0
    survey = Survey(id=new_id(), title=DEMO_TITLE, created_at=utc_now_iso())
    survey.questions = [
        Question(id=new_id(), position=i, text=text, description=desc)
        for i, (text, desc) in enumerate(SEED_QUESTIONS)
    ]
    db.add(survey)
    db.commit()
    return len(SEED_QUESTIONS)
