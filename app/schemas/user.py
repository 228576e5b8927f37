# app/schemas/user.py
from pydantic import BaseModel, EmailStr, Field

class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)

class UserOut(BaseModel):
    id: str
    email: str

    class Config:
        from_attributes = True  # pydantic v2: allow ORM objects

class Registered(BaseModel):
    user: UserOut

class LoginOut(BaseModel):
    token: str
    user: UserOut
