from sqlalchemy import func, select

from app.core.config import settings
from app.models.survey import Response


def _create(client, payload):
    resp = client.post("/surveys", json=payload)
    assert resp.status_code == 201
    return resp.json()["data"]


# --- POST /surveys ---

def test_create_survey(client, sample_survey):
    resp = client.post("/surveys", json=sample_survey)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "created"
    data = body["data"]
    assert data["title"] == "Care intake"
    assert data["createdAt"].endswith("Z")
    assert len(data["questions"]) == 3
    assert len({q["id"] for q in data["questions"]}) == 3


def test_create_survey_omits_absent_description(client, sample_survey):
    data = _create(client, sample_survey)
    assert data["questions"][0]["description"] == "Open text"
    assert "description" not in data["questions"][1]


def test_create_survey_ignores_client_question_ids(client):
    data = _create(client, {"title": "T", "questions": [{"id": "mine", "text": "Q1"}]})
    assert data["questions"][0]["id"] != "mine"


def test_create_survey_requires_title_and_questions(client):
    resp = client.post("/surveys", json={"title": "", "questions": []})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "validation_error"
    assert {tuple(i["path"]) for i in body["issues"]} == {("title",), ("questions",)}
    assert all(i["message"] for i in body["issues"])


def test_create_survey_requires_question_text(client):
    resp = client.post("/surveys", json={"title": "T", "questions": [{"text": ""}]})
    assert resp.status_code == 400
    assert resp.json()["issues"][0]["path"] == ["questions", 0, "text"]


def test_create_survey_rejects_malformed_json(client):
    resp = client.post("/surveys", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"


# --- GET /surveys, GET /surveys/{id} ---

def test_list_surveys(client, sample_survey):
    assert client.get("/surveys").json() == {"count": 0, "data": []}
    created = _create(client, sample_survey)

    body = client.get("/surveys").json()
    assert body["count"] == 1
    assert body["data"][0] == created


def test_get_survey_matches_created(client, sample_survey):
    created = _create(client, sample_survey)
    resp = client.get(f"/surveys/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"data": created}


def test_get_unknown_survey_is_404(client):
    resp = client.get("/surveys/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "not_found"}


# --- POST /surveys/responses, GET /surveys/{id}/responses ---

def test_submit_and_review_scenario(client, auth_headers):
    survey = _create(client, {"title": "T", "questions": [{"text": "Q1"}]})
    qid = survey["questions"][0]["id"]

    resp = client.post(
        "/surveys/responses",
        json={"surveyId": survey["id"], "answers": {qid: "hello"}},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "submitted"
    assert body["data"]["surveyId"] == survey["id"]
    assert body["data"]["submittedAt"].endswith("Z")

    listed = client.get(f"/surveys/{survey['id']}/responses").json()
    assert listed["count"] == 1
    assert listed["data"][0]["answers"][qid] == "hello"
    assert listed["data"][0] == body["data"]


def test_submit_mixed_answer_types(client, auth_headers, sample_survey):
    survey = _create(client, sample_survey)
    q1, q2, q3 = (q["id"] for q in survey["questions"])
    answers = {q1: "friend", q2: 3, q3: True}

    client.post("/surveys/responses", json={"surveyId": survey["id"], "answers": answers}, headers=auth_headers)
    assert client.get(f"/surveys/{survey['id']}/responses").json()["data"][0]["answers"] == answers


def test_submit_unknown_question_is_400(client, auth_headers, db, sample_survey):
    survey = _create(client, sample_survey)
    resp = client.post(
        "/surveys/responses",
        json={"surveyId": survey["id"], "answers": {"bogus": "x"}},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "validation_error",
        "issues": [{"path": ["answers", "bogus"], "message": "unknown question id"}],
    }
    assert db.scalar(select(func.count()).select_from(Response)) == 0


def test_submit_rejects_non_scalar_answers(client, auth_headers, sample_survey):
    survey = _create(client, sample_survey)
    qid = survey["questions"][0]["id"]
    for bad in (None, ["a"], {"nested": 1}):
        resp = client.post(
            "/surveys/responses",
            json={"surveyId": survey["id"], "answers": {qid: bad}},
            headers=auth_headers,
        )
        assert resp.status_code == 400
        assert resp.json()["issues"][0]["path"][:2] == ["answers", qid]


def test_submit_rejects_non_finite_numbers(client, auth_headers, sample_survey, db):
    survey = _create(client, sample_survey)
    qid = survey["questions"][0]["id"]
    for literal in ("NaN", "Infinity", "-Infinity"):
        resp = client.post(
            "/surveys/responses",
            content=f'{{"surveyId": "{survey["id"]}", "answers": {{"{qid}": {literal}}}}}',
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert resp.status_code == 400, literal
        assert resp.json()["error"] == "validation_error"
        assert resp.json()["issues"][0]["path"][:2] == ["answers", qid]
    assert db.scalar(select(func.count()).select_from(Response)) == 0


def test_submit_requires_survey_id(client, auth_headers):
    resp = client.post("/surveys/responses", json={"surveyId": "", "answers": {}}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["issues"][0]["path"] == ["surveyId"]


def test_submit_to_missing_survey_is_404(client, auth_headers, db):
    resp = client.post("/surveys/responses", json={"surveyId": "missing", "answers": {}}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "survey_not_found"}
    assert db.scalar(select(func.count()).select_from(Response)) == 0


def test_submit_without_token_is_401(client, sample_survey):
    survey = _create(client, sample_survey)
    resp = client.post("/surveys/responses", json={"surveyId": survey["id"], "answers": {}})
    assert resp.status_code == 401
    assert resp.json() == {"error": "unauthorized"}


def test_list_responses_for_missing_survey_is_404(client):
    resp = client.get("/surveys/missing/responses")
    assert resp.status_code == 404
    assert resp.json() == {"error": "survey_not_found"}


# --- respondent identity ---

def _stored_user_ids(db):
    return db.scalars(select(Response.user_id)).all()


def test_respondent_is_placeholder_by_default(client, auth_headers, db, sample_survey):
    survey = _create(client, sample_survey)
    client.post("/surveys/responses", json={"surveyId": survey["id"], "answers": {}}, headers=auth_headers)
    assert _stored_user_ids(db) == [settings.ANONYMOUS_RESPONDENT_ID]


def test_respondent_recorded_when_enabled(client, credentials, db, sample_survey, monkeypatch):
    monkeypatch.setattr(settings, "RECORD_RESPONDENT_ID", True)
    user = client.post("/auth/register", json=credentials).json()["user"]
    token = client.post("/auth/login", json=credentials).json()["token"]
    survey = _create(client, sample_survey)

    client.post(
        "/surveys/responses",
        json={"surveyId": survey["id"], "answers": {}},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert _stored_user_ids(db) == [user["id"]]
