import pytest

from hofkit.sequence import (
    tuple_cat,
    tuple_dot,
    tuple_filter,
    tuple_fold,
    tuple_for_each,
    tuple_join,
    tuple_transform,
    tuple_zip_with,
)


def test_transform_square():
    assert tuple_transform((1, 2), lambda i: i * i) == (1, 4)


@pytest.mark.parametrize("value", [(1, 2), (1,), ()])
def test_transform_identity(value):
    assert tuple_transform(value, lambda x: x) == value


@pytest.mark.parametrize("value", [(1, 2, 3, 4), (1, 2, 3), (1,), ()])
def test_transform_compose(value):
    f = lambda x: x * x
    g = lambda x: x + x
    assert tuple_transform(value, lambda x: f(g(x))) == tuple_transform(
        tuple_transform(value, g), f
    )


def test_transform_list_gives_tuple():
    assert tuple_transform([1, 2, 3], lambda x: -x) == (-1, -2, -3)


def test_for_each_visits_in_order():
    seen = []
    assert tuple_for_each((1, 2), seen.append) is None
    assert seen == [1, 2]


def test_fold_sum():
    assert tuple_fold((1, 2, 3, 4), lambda x, y: x + y) == 10


def test_fold_is_left_to_right():
    assert tuple_fold(("a", "b", "c"), lambda x, y: f"({x}{y})") == "((ab)c)"


def test_fold_empty_raises():
    with pytest.raises(TypeError):
        tuple_fold((), lambda x, y: x + y)


def test_cat():
    assert tuple_cat((1, 2), (), (3,)) == (1, 2, 3)


def test_join():
    assert tuple_join(((1,), (2, 3), ())) == (1, 2, 3)


def test_filter_ints():
    assert tuple_filter((1, 2, "x", 3), lambda x: isinstance(x, int)) == (1, 2, 3)


def test_filter_none_kept():
    assert tuple_filter((1, 2, 3), lambda x: x > 5) == ()


def test_zip_and_fold():
    p = tuple_zip_with((1, 2), (3, 4), lambda x, y: x * y)
    assert p == (3, 8)
    assert tuple_fold(p, lambda x, y: x + y) == 1 * 3 + 4 * 2


def test_zip_length_mismatch_raises():
    with pytest.raises(ValueError):
        tuple_zip_with((1, 2), (3,), lambda x, y: x * y)


def test_dot():
    assert tuple_dot((1, 2), (3, 4)) == 1 * 3 + 4 * 2