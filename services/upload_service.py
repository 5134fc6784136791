import logging
import shutil
import time
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "image"
UPLOAD_URL_PREFIX = "uploads"


def build_upload_filename(original: str, now_ms: int | None = None) -> str:
    # Millisecond timestamp + original extension; same-millisecond uploads collide.
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}{Path(original).suffix}"


def save_upload(upload: UploadFile | None, uploads_dir: Path) -> str | None:
    """
    Persist a single uploaded file into `uploads_dir` (which must already exist).
    Returns the public path reference ("uploads/<name>") or None if nothing was sent.
    """
    if upload is None or not upload.filename:
        return None

    filename = build_upload_filename(upload.filename)
    target = Path(uploads_dir) / filename
    with target.open("wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("Stored upload %r as %s", upload.filename, target)
    return f"{UPLOAD_URL_PREFIX}/{filename}"
