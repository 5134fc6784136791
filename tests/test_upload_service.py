import io

from fastapi import UploadFile

from services.upload_service import build_upload_filename, save_upload


def test_filename_is_timestamp_plus_extension():
    assert build_upload_filename("photo.JPG", now_ms=1717236000000) == "1717236000000.JPG"
    assert build_upload_filename("archive.tar.gz", now_ms=5) == "5.gz"
    assert build_upload_filename("noext", now_ms=5) == "5"


def test_no_file_yields_no_path(tmp_path):
    assert save_upload(None, tmp_path) is None
    assert save_upload(UploadFile(file=io.BytesIO(b""), filename=""), tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_file_is_written_and_path_returned(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"\x89PNG fake"), filename="question.png")

    path = save_upload(upload, tmp_path)

    assert path.startswith("uploads/")
    assert path.endswith(".png")
    stored = tmp_path / path.split("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG fake"
