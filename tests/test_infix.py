import operator

import pytest

from hofkit.infix import InfixAdaptor, PostfixAdaptor, infix

sum_infix = infix(lambda x, y: x + y)
plus = InfixAdaptor(operator.add)
minus = infix(operator.sub)


def test_sum_infix():
    assert 3 == (1 | sum_infix | 2)


def test_plus_example():
    r = 3 | plus | 2
    assert r == 5


def test_direct_call():
    assert sum_infix(1, 2) == 3


def test_left_operand_bound():
    partial = 10 | minus
    assert partial.left == 10
    assert partial | 4 == 6
    assert partial(4) == 6


def test_postfix_adaptor_directly():
    p = PostfixAdaptor("ab", operator.add)
    assert p | "cd" == "abcd"


def test_left_to_right_associativity():
    assert (10 | minus | 3 | minus | 2) == ((10 | minus | 3) | minus | 2)
    assert (10 | minus | 3 | minus | 2) == operator.sub(operator.sub(10, 3), 2)


def test_arithmetic_binds_tighter():
    assert (1 + 2 | minus | 3) == 0
    assert (2 * 3 | minus | 1) == 5
    assert (10 | minus | 2 * 3) == 4


def test_order_of_operands():
    cat = infix(lambda a, b: a + b)
    assert ("x" | cat | "y") == "xy"


def test_not_callable():
    with pytest.raises(TypeError):
        infix("not a function")