from pydantic import BaseModel, Field

from models.user import AccountType


class SignupRequest(BaseModel):
    name: str | None = None
    email: str = Field(..., min_length=1)
    age: int | None = Field(None, ge=0, le=150)
    phone: str | None = None
    password: str = Field(..., min_length=1)
    domain: str | None = None
    account_type: AccountType | None = None


class LoginRequest(BaseModel):
    email: str
    password: str

    @property
    def normalized_email(self) -> str:
        return self.email.lower().strip()
