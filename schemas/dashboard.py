from datetime import datetime

from pydantic import BaseModel


class DashboardUser(BaseModel):
    name: str | None
    email: str


class DoubtItem(BaseModel):
    id: str
    doubt_text: str | None
    image_path: str | None = None
    created_at: datetime


class BookedSessionItem(BaseModel):
    id: str
    name: str | None
    email: str
    phone: str | None
    subject: str | None
    preferred_time: datetime
    message: str | None


class DashboardView(BaseModel):
    user: DashboardUser
    doubts: list[DoubtItem]
    bookasessions: list[BookedSessionItem]
