"""Tests for the Option container."""

import dataclasses

import pytest

import optionkit as ox


class TestVariants:
    """Test the two Option variants."""

    def test_some_is_some(self) -> None:
        """Test that Some reports presence."""
        opt = ox.Some(1)
        assert opt.is_some()
        assert not opt.is_none()

    def test_none_is_none(self) -> None:
        """Test that NONE reports absence."""
        assert ox.NONE.is_none()
        assert not ox.NONE.is_some()

    def test_none_equality(self) -> None:
        """Test that every NoneOption equals the shared NONE."""
        assert ox.NoneOption() == ox.NONE
        assert ox.Some(None) != ox.NONE

    def test_some_equality(self) -> None:
        """Test structural equality of Some."""
        assert ox.Some([1, 2]) == ox.Some([1, 2])
        assert ox.Some(1) != ox.Some(2)

    def test_immutable(self) -> None:
        """Test that a Some cannot be mutated once built."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ox.Some(1).value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        """Test the repr of both variants."""
        assert repr(ox.Some("a")) == "Some(value='a')"
        assert repr(ox.NONE) == "NONE"


class TestUnwrap:
    """Test the unwrapping methods."""

    def test_unwrap_none_message(self) -> None:
        """Test the message raised by unwrapping NONE."""
        with pytest.raises(ox.OptionUnwrapError, match="^Cannot unwrap None$"):
            ox.NONE.unwrap()

    def test_unwrap_error_is_runtime_error(self) -> None:
        """Test that OptionUnwrapError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            ox.NONE.unwrap()

    def test_expect_carries_exact_message(self) -> None:
        """Test that expect raises with exactly the given message."""
        with pytest.raises(ox.OptionUnwrapError) as exc_info:
            ox.NONE.expect("config missing")
        assert str(exc_info.value) == "config missing"

    def test_expect_some(self) -> None:
        """Test that expect returns the value of a Some."""
        assert ox.Some(3).expect("unused") == 3

    def test_unwrap_or_else_not_called_on_some(self) -> None:
        """Test that the default factory is not called on Some."""
        calls: list[int] = []

        def _default() -> int:
            calls.append(1)
            return 0

        assert ox.Some(5).unwrap_or_else(_default) == 5
        assert calls == []
        assert ox.NONE.unwrap_or_else(_default) == 0
        assert calls == [1]


class TestChaining:
    """Test map, and_then and or_else."""

    def test_map_exception_propagates(self) -> None:
        """Test that map does not catch errors raised by the function."""
        with pytest.raises(ZeroDivisionError):
            ox.Some(1).map(lambda x: x / 0)

    def test_and_then(self) -> None:
        """Test chaining option-returning functions."""

        def half(x: int) -> ox.Option[int]:
            return ox.Some(x // 2) if x % 2 == 0 else ox.NONE

        assert ox.Some(8).and_then(half).and_then(half) == ox.Some(2)
        assert ox.Some(6).and_then(half).and_then(half) == ox.NONE

    def test_or_else(self) -> None:
        """Test falling back to another option."""
        assert ox.NONE.or_else(lambda: ox.Some(1)) == ox.Some(1)
        assert ox.Some(2).or_else(lambda: ox.Some(1)) == ox.Some(2)

    def test_into_and_inspect(self) -> None:
        """Test piping an option into functions."""
        seen: list[ox.Option[int]] = []
        value = ox.Some(2).inspect(seen.append).into(ox.unwrap_or, 0)
        assert value == 2
        assert seen == [ox.Some(2)]


class TestWireShape:
    """Test conversion to and from the tagged dict shape."""

    def test_to_dict(self) -> None:
        """Test the dict shape of both variants."""
        assert ox.Some({"a": 1}).to_dict() == {"type": "some", "value": {"a": 1}}
        assert ox.NONE.to_dict() == {"type": "none"}

    def test_from_dict(self) -> None:
        """Test parsing both variants."""
        assert ox.Option.from_dict({"type": "some", "value": 0}) == ox.Some(0)
        assert ox.Option.from_dict({"type": "none"}) is ox.NONE

    def test_from_dict_some_with_none_value(self) -> None:
        """Test that a null payload is still a present value."""
        assert ox.Option.from_dict({"type": "some", "value": None}) == ox.Some(None)

    @pytest.mark.parametrize(
        "data",
        [{}, {"type": "ok", "value": 1}, {"type": "SOME", "value": 1}, {"type": "some"}],
    )
    def test_from_dict_invalid(self, data: dict[str, object]) -> None:
        """Test that malformed shapes are rejected."""
        with pytest.raises(ValueError, match="option"):
            ox.Option.from_dict(data)
