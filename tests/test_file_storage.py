import io
import re

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from heroflicks.shared.adapters.file_storage import LocalFileStorage
from heroflicks.shared.core.exceptions import FileTooLargeError, InvalidFileTypeError


def make_upload(filename, content, content_type):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_build_filename_sanitizes_and_keeps_extension():
    name = LocalFileStorage.build_filename("Spider Man #1.pdf")

    assert re.fullmatch(r"Spider_Man__1-\d+-\d+\.pdf", name)


def test_build_filename_without_name():
    assert re.fullmatch(r"file-\d+-\d+", LocalFileStorage.build_filename(None))


def test_build_filename_drops_directories():
    assert LocalFileStorage.build_filename("../../etc/passwd").startswith("passwd-")


@pytest.mark.parametrize(
    "content_type, allowed",
    [
        ("application/pdf", True),
        ("image/jpeg", True),
        ("image/png", True),
        ("text/plain", False),
        ("application/zip", False),
        (None, False),
    ],
)
def test_media_type_policy(content_type, allowed):
    assert LocalFileStorage.is_allowed(content_type) is allowed


async def test_save_and_delete(tmp_path):
    storage = LocalFileStorage(str(tmp_path / "comics"), max_bytes=1024)

    stored = await storage.save(make_upload("a.pdf", b"%PDF-1.4 data", "application/pdf"))

    assert stored.path.startswith(str(tmp_path / "comics") + "/")
    assert stored.size == len(b"%PDF-1.4 data")
    assert LocalFileStorage.resolve(stored.path) is not None

    assert await storage.delete(stored.path) is True
    assert await storage.delete(stored.path) is False
    assert LocalFileStorage.resolve(stored.path) is None


async def test_save_rejects_unsupported_type(tmp_path):
    storage = LocalFileStorage(str(tmp_path), max_bytes=1024)

    with pytest.raises(InvalidFileTypeError):
        await storage.save(make_upload("notes.txt", b"hello", "text/plain"))


async def test_oversize_file_is_removed(tmp_path):
    upload_dir = tmp_path / "comics"
    storage = LocalFileStorage(str(upload_dir), max_bytes=10)

    with pytest.raises(FileTooLargeError):
        await storage.save(make_upload("big.pdf", b"x" * 11, "application/pdf"))

    assert list(upload_dir.iterdir()) == []
