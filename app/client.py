# app/client.py
"""
Thin HTTP client for the Waterlily API, used by the single-page client and scripts.

    client = WaterlilyClient("http://localhost:3000")
    client.login("me@test.com", "secret123")
    survey = client.list_surveys()[0]
    client.submit_response(survey["id"], {survey["questions"][0]["id"]: "hi"})
"""
from typing import Any

import requests

from app.core.config import settings


class ApiError(RuntimeError):
    def __init__(self, status_code: int, code: str):
        self.status_code = status_code
        self.code = code
        super().__init__(f"{status_code}: {code}")


class WaterlilyClient:
    def __init__(self, base_url: str | None = None, token: str | None = None,
                 session: Any = None, timeout: float = 20):
        self.base_url = (base_url or settings.API_BASE).rstrip("/")
        self.token = token
        # anything with a requests-style .request(method, url, json=, headers=, timeout=)
        self.session = session or requests.Session()
        self.timeout = timeout

    # ---------- plumbing ----------
    def _request(self, method: str, path: str, body: Any = None) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        r = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=body,
            headers=headers,
            timeout=self.timeout,
        )
        if r.status_code >= 400:
            raise ApiError(r.status_code, _error_code(r))
        if r.status_code == 204:
            return None
        return r.json()

    # ---------- auth ----------
    def health(self) -> dict:
        return self._request("GET", "/health")

    def register(self, email: str, password: str) -> dict:
        return self._request("POST", "/auth/register", {"email": email, "password": password})["user"]

    def login(self, email: str, password: str) -> dict:
        res = self._request("POST", "/auth/login", {"email": email.strip().lower(), "password": password})
        self.token = res["token"]
        return res["user"]

    def logout(self) -> None:
        self.token = None

    # ---------- surveys ----------
    def list_surveys(self) -> list[dict]:
        return self._request("GET", "/surveys")["data"]

    def get_survey(self, survey_id: str) -> dict:
        return self._request("GET", f"/surveys/{survey_id}")["data"]

    def create_survey(self, title: str, questions: list[dict]) -> dict:
        return self._request("POST", "/surveys", {"title": title, "questions": questions})["data"]

    def submit_response(self, survey_id: str, answers: dict) -> dict:
        return self._request("POST", "/surveys/responses", {"surveyId": survey_id, "answers": answers})["data"]

    def list_responses(self, survey_id: str) -> list[dict]:
        return self._request("GET", f"/surveys/{survey_id}/responses")["data"]


def _error_code(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return f"HTTP {r.status_code}"
    if isinstance(body, dict):
        return body.get("error") or body.get("message") or f"HTTP {r.status_code}"
    return f"HTTP {r.status_code}"
