from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class User(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class SignUpRequest(BaseModel):
    uid: str
    name: str
    email: EmailStr


class SignInRequest(BaseModel):
    email: EmailStr
    id_token: str = Field(..., alias="idToken")

    class Config:
        populate_by_name = True # allows camelcase and snake_case interchangeably


class AuthResult(BaseModel):
    success: bool
    message: str
