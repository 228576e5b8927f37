"""WaterlilyClient driven against the in-process app through TestClient."""
import pytest

from app.client import ApiError, WaterlilyClient


@pytest.fixture
def api(client):
    return WaterlilyClient(base_url="http://testserver", session=client)


def test_full_respondent_flow(api, credentials):
    survey = api.create_survey("Intake", [{"text": "Name?"}, {"text": "Age?", "description": "Number"}])

    api.register(**credentials)
    user = api.login("  ME@test.com ", credentials["password"])
    assert user["email"] == credentials["email"]
    assert api.token

    listed = api.list_surveys()
    assert [s["id"] for s in listed] == [survey["id"]]

    fetched = api.get_survey(survey["id"])
    answers = {fetched["questions"][0]["id"]: "Ada", fetched["questions"][1]["id"]: 36}
    item = api.submit_response(survey["id"], answers)

    assert api.list_responses(survey["id"]) == [item]


def test_errors_carry_status_and_code(api):
    with pytest.raises(ApiError) as exc:
        api.get_survey("missing")
    assert exc.value.status_code == 404
    assert exc.value.code == "not_found"


def test_submit_after_logout_is_unauthorized(api, credentials):
    api.register(**credentials)
    api.login(**credentials)
    api.logout()
    with pytest.raises(ApiError) as exc:
        api.submit_response("anything", {})
    assert (exc.value.status_code, exc.value.code) == (401, "unauthorized")


def test_health(api):
    assert api.health()["status"] == "ok"


def test_default_base_url_comes_from_settings():
    assert WaterlilyClient().base_url == "http://localhost:3000"
