# hofkit

Small, composable adaptors for building functions out of functions.

## Installation

```
pip install hofkit
```

For running the test suite:

```
pip install "hofkit[test]"
pytest
```

## Overview

| Module | What it provides |
| --- | --- |
| `hofkit.limit` | `LimitAdaptor`, `limit(n)`, `limit_c(n, f)`, `function_param_limit(f)`: cap the number of arguments a function accepts |
| `hofkit.capture` | `capture`, `capture_forward`, `capture_basic`: prepend stored values to a function's arguments (`capture` stores shallow copies, the other two store the values themselves) |
| `hofkit.construct` | `Construct`, `construct`, `construct_forward`, `construct_basic`, `construct_meta`: callables that build objects |
| `hofkit.mutable` | `mutable_(f)`: wrap a stateful callable |
| `hofkit.fix` | `fix(f)`: fixed-point combinator for writing recursive functions |
| `hofkit.infix` | `infix(f)`: use a binary function as an infix operator, `x |op| y` |
| `hofkit.protect` | `protect(f)`: wrap a function so that it is treated as an ordinary callable |
| `hofkit.partial` | `partial(f)`: collect arguments across calls until the function can be called |
| `hofkit.unpack` | `unpack(f)`, `is_unpackable(x)`: call a function with the elements of one or more sequences |
| `hofkit.sequence` | tuple helpers built on the adaptors: `tuple_transform`, `tuple_for_each`, `tuple_fold`, `tuple_cat`, `tuple_join`, `tuple_filter`, `tuple_zip_with`, `tuple_dot` |

## Examples

```python
from hofkit.capture import capture
from hofkit.fix import fix
from hofkit.infix import infix
from hofkit.limit import limit_c, function_param_limit
from hofkit.partial import partial
from hofkit.unpack import unpack
from hofkit.sequence import tuple_transform, tuple_filter, tuple_dot

add = lambda x, y: x + y

capture(1)(add)(2)                      # 3
partial(add)(1)(2)                      # 3
limit_c(2, add)(1, 2)                   # 3
function_param_limit(limit_c(2, add))   # 2
unpack(add)((3, 2))                     # 5
1 |infix(add)| 2                        # 3

factorial = fix(lambda self, n: 1 if n == 0 else n * self(n - 1))
factorial(5)                            # 120

tuple_transform((1, 2), lambda i: i * i)                    # (1, 4)
tuple_filter((1, 2, "x", 3), lambda v: isinstance(v, int))  # (1, 2, 3)
tuple_dot((1, 2), (3, 4))                                   # 11
```

## Errors

Adaptors raise `TypeError` when they are given something that is not
callable, or when a call cannot be carried out: a `LimitAdaptor` called with
more arguments than its limit, a `partial` whose collected arguments reach the
function's limit without being accepted, or `unpack` called with no sequence
or with a string, bytes or other non-iterable. `limit` and `limit_c` raise
`ValueError` for a negative limit. `tuple_zip_with` and `tuple_dot` raise
`ValueError` when the two sequences differ in length.

## What is not included

There is no adaptor for applying a function repeatedly a given number of
times; compose the calls yourself or use a loop.