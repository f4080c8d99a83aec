import pytest

from transfers24 import error_codes


def test_describe_known_code() -> None:
    assert error_codes.describe("err00") == "Incorrect call"
    assert error_codes.describe(" ERR161 ") == "Transaction request terminated by user."


@pytest.mark.parametrize("code", ["0", "100", "", None, "err999"])
def test_describe_unknown_code(code: object) -> None:
    assert error_codes.describe(code) is None


@pytest.mark.parametrize(
    "raw_key, expected",
    [
        ("err102", "err102"),
        ("ERR102", "err102"),
        ("err00 Incorrect call", "err00"),
        ("err54:Incorrect transaction value", "err54"),
        ("102", "err102"),
        ("00", "err00"),
        ("token", None),
        ("err999", None),
        ("", None),
        (None, None),
    ],
)
def test_approximate_match(raw_key: object, expected: str | None) -> None:
    assert error_codes.approximate_match(raw_key) == expected


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        error_codes.codes()["err00"] = "changed"  # type: ignore[index]


def test_catalog_entries_are_described() -> None:
    table = error_codes.codes()
    assert list(table)[0] == "err00"
    assert all(code.startswith("err") and description for code, description in table.items())
