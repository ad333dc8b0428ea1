# backend/auth/schemas.py

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints


# passwords are hashed exactly as typed; only identity fields are trimmed
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
CpfStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=14)]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class RegisterSchema(BaseModel):
    cpf: CpfStr
    name: NameStr
    email: EmailStr
    password: str = Field(min_length=1)


class LoginSchema(BaseModel):
    # any unknown email, well-formed or not, is a 404 at login
    email: TrimmedStr
    password: str = Field(min_length=1)
