import pytest

from hofkit.mutable import MutableAdaptor, mutable_


class MutableFun:
    def __init__(self):
        self.x = 1

    def __call__(self, i):
        self.x += i
        return self.x


def test_mutable_call():
    assert mutable_(MutableFun())(3) == 4


def test_mutable_keeps_state_across_calls():
    mut_fun = MutableFun()
    by_5 = mutable_(mut_fun)
    assert by_5(5) == 6
    assert by_5(5) == 11


def test_mutable_shares_state_with_wrapped_object():
    mut_fun = MutableFun()
    m = mutable_(mut_fun)
    m(5)
    m(5)
    assert mut_fun.x == 11


def test_mutable_forwards_keywords():
    assert mutable_(MutableFun())(i=3) == 4


def test_mutable_requires_callable():
    with pytest.raises(TypeError):
        MutableAdaptor(3)