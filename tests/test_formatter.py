import pytest

from rcli.core.formatter import format_to_text, get_db_index


@pytest.mark.parametrize(
    ("reply", "expected"),
    [
        (None, "(nil)"),
        ("OK", "OK"),
        ("line one\nline two", "line one\nline two"),
        (b"bar", "bar"),
        (42, "(integer) 42"),
        (True, "(integer) 1"),
        (1.5, "(double) 1.5"),
        ([], "(empty list or set)"),
    ],
)
def test_format_scalar_and_empty_replies(reply: object, expected: str) -> None:
    assert format_to_text(reply) == expected


def test_format_flat_array_numbers_and_quotes_items() -> None:
    assert format_to_text(["a", "b c", None, 3]) == '1) "a"\n2) "b c"\n3) (nil)\n4) (integer) 3'


def test_format_nested_array_indents_following_lines() -> None:
    reply = [["a", "b"], "c"]
    assert format_to_text(reply, "XRANGE s - +") == '1) 1) "a"\n   2) "b"\n2) "c"'


def test_format_mapping_is_flattened_to_pairs() -> None:
    assert format_to_text({"field": "value", "count": 1}) == '1) "field"\n2) "value"\n3) "count"\n4) (integer) 1'


def test_db_index_label() -> None:
    assert get_db_index() == ""
    assert get_db_index(0) == ""
    assert get_db_index(None) == ""
    assert get_db_index(3) == "[db3]"
