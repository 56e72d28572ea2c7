from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from heroflicks.shared.models.enums import Editorial
from heroflicks.shared.schemas.comic import TagInfo, format_timestamp, map_comic


def make_comic(**overrides):
    fields = dict(
        id=42,
        title="Amazing Spider-Man #1",
        editorial=Editorial.MARVEL,
        pdf_path="public/comics/asm1.pdf",
        is_collection=0,
        family="Spider-Man",
        cover_image="public/comics/asm1.jpg",
        created_at=datetime(2026, 10, 19, 10, 30, 0, 123456, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_map_comic_builds_canonical_shape():
    comic = map_comic(make_comic(), [{"id": 4, "name": "Acción"}], "3", 1)

    assert comic.model_dump(by_alias=True) == {
        "id": "42",
        "title": "Amazing Spider-Man #1",
        "editorial": "Marvel",
        "pdfPath": "public/comics/asm1.pdf",
        "isCollection": False,
        "family": "Spider-Man",
        "imageUrl": "public/comics/asm1.jpg",
        "createdAt": "2026-10-19T10:30:00.123Z",
        "likesCount": 3,
        "commentsCount": 1,
        "tags": [{"id": 4, "name": "Acción"}],
    }


def test_map_comic_counts_default_to_zero():
    comic = map_comic(make_comic(), None, None, "not-a-number")

    assert comic.likes_count == 0
    assert comic.comments_count == 0
    assert comic.tags == []


def test_map_comic_keeps_tag_order():
    tags = [TagInfo(id=9, name="Zeta"), TagInfo(id=1, name="Alfa")]

    comic = map_comic(make_comic(), tags)

    assert [tag.id for tag in comic.tags] == [9, 1]


def test_map_comic_accepts_plain_string_editorial():
    assert map_comic(make_comic(editorial="DC")).editorial == "DC"


def test_format_timestamp_treats_naive_as_utc():
    assert format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05.000Z"


def test_format_timestamp_converts_to_utc():
    value = datetime(2026, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(value) == "2026-01-02T03:00:00.000Z"


def test_format_timestamp_none():
    assert format_timestamp(None) is None
    assert map_comic(make_comic(created_at=None)).created_at is None
