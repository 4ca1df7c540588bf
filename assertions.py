"""Shallow comparison of log records against expectations."""

import math


class _AnyValue:
    """Marker for expected values that should not be compared."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "<ANY_VALUE>"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


ANY_VALUE = _AnyValue()


def strict_equal(actual, expected):
    """Deep equality that also requires matching types at every level.

    ``True`` does not equal ``1`` and ``[1]`` does not equal ``(1,)``.
    Nested dicts are compared by key set, not key order. NaN equals NaN.
    """
    if type(actual) is not type(expected):
        return False

    if isinstance(actual, dict):
        if actual.keys() != expected.keys():
            return False
        return all(strict_equal(actual[key], expected[key]) for key in actual)

    if isinstance(actual, (list, tuple)):
        if len(actual) != len(expected):
            return False
        return all(strict_equal(a, e) for a, e in zip(actual, expected))

    if isinstance(actual, float) and math.isnan(actual) and math.isnan(expected):
        return True

    return actual == expected


def validate_object(actual, expected):
    """Assert that ``actual`` has exactly the keys of ``expected``, in order,
    and that every value matches unless the expected value is ANY_VALUE.

    Raises:
        AssertionError: on the first key-list or value mismatch.
    """
    actual_keys = list(actual.keys())
    expected_keys = list(expected.keys())

    if actual_keys != expected_keys:
        raise AssertionError(
            f"Key mismatch: actual keys {actual_keys!r} != expected keys {expected_keys!r}"
        )

    for key in actual_keys:
        value = actual[key]
        expected_value = expected[key]

        if expected_value is ANY_VALUE:
            continue

        if not strict_equal(value, expected_value):
            raise AssertionError(
                f"Value mismatch for key {key!r}: actual {value!r} != expected {expected_value!r}"
            )
