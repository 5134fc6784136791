from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "DoubtNLearn"
    env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    database_url: str = f"sqlite:///{BASE_DIR / 'doubtnlearn.db'}"

    session_secret: str = "CHANGE_ME"
    session_algorithm: str = "HS256"
    session_cookie_name: str = "doubtnlearn_session"
    session_ttl_seconds: int = 60 * 60

    uploads_dir: Path = BASE_DIR / "uploads"
    views_dir: Path = BASE_DIR / "views"
    templates_dir: Path = BASE_DIR / "templates"
    public_dir: Path = BASE_DIR / "public"


settings = Settings()
