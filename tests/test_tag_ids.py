import pytest

from heroflicks.shared.utils.tag_ids import (
    DelimitedTagIds,
    TagIdList,
    parse_tag_ids,
    tag_ids_from_form,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        (DelimitedTagIds(""), []),
        (DelimitedTagIds("1,2"), [1, 2]),
        (DelimitedTagIds(" 3 , 1 ,3"), [3, 1]),
        (DelimitedTagIds("1,abc,,-2,0,2.5,4"), [1, 4]),
        (TagIdList(("2", "1", "2")), [2, 1]),
        (TagIdList((5, "6", None, True, "x")), [5, 6]),
        (TagIdList(("1,2", "3")), [1, 2, 3]),
    ],
)
def test_parse_tag_ids(value, expected):
    assert parse_tag_ids(value) == expected


def test_non_ascii_digits_are_dropped():
    assert parse_tag_ids(DelimitedTagIds("١,2")) == [2]


def test_unknown_input_type_is_rejected():
    with pytest.raises(TypeError):
        parse_tag_ids("1,2")


def test_tag_ids_from_form_classifies_shapes():
    assert tag_ids_from_form(None) is None
    assert tag_ids_from_form([]) is None
    assert tag_ids_from_form(["1,2"]) == DelimitedTagIds("1,2")
    assert tag_ids_from_form(["1", "2"]) == TagIdList(("1", "2"))
