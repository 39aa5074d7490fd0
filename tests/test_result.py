"""Tests for the Result container."""

import pytest

import optionkit as ox


def test_constructors() -> None:
    """Test the free constructors."""
    assert ox.make_ok(1) == ox.Ok(1)
    assert ox.make_err("boom") == ox.Err("boom")


def test_unwrap() -> None:
    """Test unwrapping both variants."""
    assert ox.Ok(1).unwrap() == 1
    assert ox.Err("boom").unwrap_err() == "boom"
    with pytest.raises(ox.ResultUnwrapError, match="'boom'"):
        ox.Err("boom").unwrap()
    with pytest.raises(ox.ResultUnwrapError):
        ox.Ok(1).unwrap_err()


def test_expect() -> None:
    """Test expect and expect_err messages."""
    with pytest.raises(ox.ResultUnwrapError, match="^loading: boom$"):
        ox.Err("boom").expect("loading")
    with pytest.raises(ox.ResultUnwrapError, match=r"expected Err, got Ok\(1\)"):
        ox.Ok(1).expect_err("loading")
    assert ox.Err("boom").expect_err("loading") == "boom"


def test_unwrap_or() -> None:
    """Test fallbacks on Err."""
    assert ox.Ok(1).unwrap_or(0) == 1
    assert ox.Err("boom").unwrap_or(0) == 0


def test_map_and_map_err() -> None:
    """Test that each map only touches its own variant."""
    assert ox.Ok(2).map(str) == ox.Ok("2")
    assert ox.Err("boom").map(str) == ox.Err("boom")
    assert ox.Err("boom").map_err(str.upper) == ox.Err("BOOM")
    assert ox.Ok(2).map_err(str.upper) == ox.Ok(2)


def test_and_then_or_else() -> None:
    """Test chaining result-returning functions."""

    def parse(raw: str) -> ox.Result[int, str]:
        return ox.Ok(int(raw)) if raw.isdigit() else ox.Err(f"not a number: {raw}")

    assert ox.Ok("12").and_then(parse) == ox.Ok(12)
    assert ox.Ok("x").and_then(parse) == ox.Err("not a number: x")
    assert ox.Err("x").or_else(lambda e: ox.Ok(len(e))) == ox.Ok(1)


def test_map_or_else() -> None:
    """Test folding both variants."""
    assert ox.Ok(2).map_or_else(lambda v: v * 2, len) == 4
    assert ox.Err("abc").map_or_else(lambda v: v * 2, len) == 3


def test_to_option() -> None:
    """Test conversions to Option."""
    assert ox.Ok(1).ok() == ox.Some(1)
    assert ox.Ok(1).err() == ox.NONE
    assert ox.Err("boom").err() == ox.Some("boom")


def test_wire_shape() -> None:
    """Test conversion to and from the tagged dict shape."""
    assert ox.Ok(1).to_dict() == {"type": "ok", "value": 1}
    assert ox.Err("boom").to_dict() == {"type": "err", "error": "boom"}
    assert ox.Result.from_dict({"type": "ok", "value": 1}) == ox.Ok(1)
    assert ox.Result.from_dict({"type": "err", "error": "boom"}) == ox.Err("boom")


@pytest.mark.parametrize(
    "data",
    [{"type": "some", "value": 1}, {"type": "ok"}, {"type": "err", "value": 1}],
)
def test_from_dict_invalid(data: dict[str, object]) -> None:
    """Test that malformed shapes are rejected."""
    with pytest.raises(ValueError, match="result"):
        ox.Result.from_dict(data)
