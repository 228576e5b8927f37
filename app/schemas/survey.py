# app/schemas/survey.py
from typing import Annotated, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# JSON NaN / Infinity are not numbers an answer can hold
FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]

# bool first so JSON true/false never coerces to a number
AnswerValue = Union[StrictBool, StrictInt, FiniteFloat, StrictStr]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ---------- Requests ----------
class QuestionCreate(CamelModel):
    text: str = Field(min_length=1)
    description: str | None = None

class SurveyCreate(CamelModel):
    title: str = Field(min_length=1)
    questions: list[QuestionCreate] = Field(min_length=1)

class ResponseSubmit(CamelModel):
    survey_id: str = Field(min_length=1)
    answers: dict[str, AnswerValue]


# ---------- Responses ----------
class QuestionOut(CamelModel):
    id: str
    text: str
    description: str | None = None

class SurveyOut(CamelModel):
    id: str
    title: str
    created_at: str
    questions: list[QuestionOut]

class ResponseItem(CamelModel):
    id: str
    survey_id: str
    answers: dict[str, AnswerValue]
    submitted_at: str


class SurveyCreated(BaseModel):
    message: str = "created"
    data: SurveyOut

class SurveyList(BaseModel):
    count: int
    data: list[SurveyOut]

class SurveyDetail(BaseModel):
    data: SurveyOut

class ResponseSubmitted(BaseModel):
    message: str = "submitted"
    data: ResponseItem

class ResponseList(BaseModel):
    count: int
    data: list[ResponseItem]
