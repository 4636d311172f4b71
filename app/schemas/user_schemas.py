import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.utils.hash import MAX_PASSWORD_BYTES

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserRegister(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def validate_fields(self):
        # checked in order, first failure wins
        if not (self.first_name and self.last_name and self.email and self.password):
            raise ValueError("All fields are required")
        if len(self.first_name.strip()) < 2:
            raise ValueError("First name must be at least 2 characters")
        if len(self.last_name.strip()) < 2:
            raise ValueError("Last name must be at least 2 characters")
        if not EMAIL_PATTERN.match(self.email):
            raise ValueError("Please provide a valid email address")
        if len(self.password) < 6:
            raise ValueError("Password must be at least 6 characters")
        if len(self.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return self


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def validate_fields(self):
        if not self.email or not self.password:
            raise ValueError("Email and password are required")
        return self


class PublicUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser
