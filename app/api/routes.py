# app/api/routes.py
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.user import Credentials, LoginOut, Registered
from app.services import auth_service

router = APIRouter()

STARTED_AT = time.monotonic()

@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root():
    return "Hello Waterlily"

@router.get("/health")
def health():
    return {
        "status": "ok",
        "uptime": time.monotonic() - STARTED_AT,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }

@router.post("/auth/register", response_model=Registered, status_code=201)
def register(creds: Credentials, db: Session = Depends(get_db)):
    """Create a new user"""
    user = auth_service.register(db, creds.email, creds.password)
    return {"user": user}

@router.post("/auth/login", response_model=LoginOut)
def login(creds: Credentials, db: Session = Depends(get_db)):
    """Authenticate user and return JWT"""
    return auth_service.login(db, creds.email, creds.password)
