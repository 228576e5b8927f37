# app/core/errors.py
"""
Structured errors and the single place that turns them into HTTP responses.

Services raise an AppError subclass; routes never build error bodies
themselves. Every error body has the shape {"error": code, "issues"?: [...]}.
"""
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

Issue = dict[str, Any]  # {"path": [...], "message": str}


class AppError(Exception):
    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, code: str | None = None, issues: list[Issue] | None = None):
        if code is not None:
            self.code = code
        self.issues = issues
        super().__init__(self.code)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code}
        if self.issues:
            body["issues"] = self.issues
        return body


class ValidationFailed(AppError):
    status_code = 400
    code = "validation_error"


class Unauthorized(AppError):
    status_code = 401
    code = "unauthorized"


class InvalidToken(Unauthorized):
    code = "invalid_token"


class InvalidCredentials(Unauthorized):
    code = "invalid_credentials"


class Conflict(AppError):
    status_code = 409
    code = "conflict"


class EmailExists(Conflict):
    code = "email_exists"


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class SurveyNotFound(NotFound):
    code = "survey_not_found"


def _issues_from_validation(exc: RequestValidationError) -> list[Issue]:
    issues = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        issues.append({"path": loc, "message": err.get("msg", "invalid value")})
    return issues


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = ValidationFailed(issues=_issues_from_validation(exc))
    return JSONResponse(status_code=err.status_code, content=err.to_body())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal_error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
