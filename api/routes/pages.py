from fastapi import APIRouter
from fastapi.responses import FileResponse

from core.config import settings

router = APIRouter()


@router.get("/login")
def login_page():
    return FileResponse(settings.views_dir / "login.html")


@router.get("/signup")
def signup_page():
    return FileResponse(settings.views_dir / "signup.html")


@router.get("/home")
def home_page():
    return FileResponse(settings.views_dir / "home.html")
