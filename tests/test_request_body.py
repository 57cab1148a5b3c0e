import pytest

from app.utils.request_body import is_json_content_type, parse_json_body


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b'{"a": 1}', {"a": 1}),
        (b'[1, 2, 3]', [1, 2, 3]),
        (b"", {}),
        (b"   \n", {}),
        (b"{not json", {}),
        (b'"just a string"', {}),
        (b"42", {}),
        (b"null", {}),
        (b"\xff\xfe\x00", {}),
    ],
)
def test_parse_json_body(raw, expected):
    assert parse_json_body(raw) == expected


@pytest.mark.parametrize(
    "content_type,expected",
    [
        ("application/json", True),
        ("application/json; charset=utf-8", True),
        ("Application/JSON", True),
        ("application/merge-patch+json", True),
        ("text/plain", False),
        ("application/x-www-form-urlencoded", False),
        ("", False),
        (None, False),
    ],
)
def test_is_json_content_type(content_type, expected):
    assert is_json_content_type(content_type) is expected
