import pytest

from heartwood import Either, IllegalStateError, Left, Right


def test_left():
    e = Either.left("x")
    assert e.is_left()
    assert not e.is_right()
    assert e.get_left() == "x"
    assert e.left_value() == "x"
    assert e.right_value() is None
    with pytest.raises(IllegalStateError, match="No right value"):
        e.get_right()


def test_right():
    e = Either.right(42)
    assert e.is_right()
    assert not e.is_left()
    assert e.get_right() == 42
    assert e.right_value() == 42
    assert e.left_value() is None
    with pytest.raises(IllegalStateError, match="No left value"):
        e.get_left()


def test_one_of():
    assert Either.one_of("x", None) == Left("x")
    assert Either.one_of(None, 42) == Right(42)
    # falsy values are still values
    assert Either.one_of(0, None) == Left(0)
    assert Either.one_of(None, "") == Right("")


@pytest.mark.parametrize("left,right", [(None, None), ("x", 42)])
def test_one_of__invalid(left, right):
    with pytest.raises(ValueError, match="Exactly one of left or right must be None"):
        Either.one_of(left, right)


def test_equality():
    assert Left("x") == Left("x")
    assert Left("x") != Left("y")
    assert Right([1]) == Right([1])
    assert Left("x") != Right("x")
    assert Right(None) != Left(None)
    assert hash(Left("x")) == hash(Left("x"))
    assert len({Left(1), Left(1), Right(1)}) == 2


def test_hash__unhashable_value():
    with pytest.raises(TypeError, match="unhashable"):
        hash(Right([1]))


def test_str():
    assert str(Left("x")) == "Left {x}"
    assert str(Right(42)) == "Right {42}"
    assert repr(Left("x")) == "Left(value='x')"


def test_immutable():
    e = Either.right(42)
    with pytest.raises(AttributeError):
        e.value = 43  # type: ignore[misc]
