from datetime import datetime

from pydantic import BaseModel


class BookSessionRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    subject: str | None = None
    preferred_time: datetime  # naive UTC
    message: str | None = None
