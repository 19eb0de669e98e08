# src/story_kit/diff/equality.py

"""Structural equality used by the differ.

Rules:
- Mappings are equal when they have the same key set and equal values;
  key order is ignored.
- Lists and tuples are compared element-wise, in order.
- Dataclass instances are equal when they have the same type and equal
  fields.
- A missing key differs from a key holding ``None``, and ``None`` differs
  from an empty container.
- ``True``/``False`` never equal ``1``/``0``.
- Two float NaNs are equal to each other.
- Any other values are compared with ``==``.

The walk uses an explicit stack, so deeply nested metadata cannot hit the
recursion limit.
"""

import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any


def structurally_equal(a: Any, b: Any) -> bool:
    stack = [(a, b)]

    while stack:
        x, y = stack.pop()

        if isinstance(x, bool) or isinstance(y, bool):
            if type(x) is not type(y) or x != y:
                return False
        elif _is_dataclass_instance(x):
            if type(x) is not type(y):
                return False
            stack.extend((getattr(x, f.name), getattr(y, f.name)) for f in fields(x))
        elif isinstance(x, Mapping):
            if not isinstance(y, Mapping) or set(x) != set(y):
                return False
            stack.extend((x[k], y[k]) for k in x)
        elif isinstance(x, (list, tuple)):
            if not isinstance(y, (list, tuple)) or len(x) != len(y):
                return False
            stack.extend(zip(x, y))
        elif x is None or y is None:
            if x is not y:
                return False
        elif _is_container(y):
            return False
        elif _is_nan(x) and _is_nan(y):
            continue
        elif x != y:
            return False

    return True


def _is_dataclass_instance(value: Any) -> bool:
    return is_dataclass(value) and not isinstance(value, type)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple)) or _is_dataclass_instance(value)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
