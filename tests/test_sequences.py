from __future__ import annotations

import numpy as np
import pytest

from closurekit import sequences as seq
from closurekit.errors import InvalidCallableError, InvalidSequenceError


class Scale:
    def __init__(self, factor: int) -> None:
        self.factor = factor

    def apply(self, value: int) -> int:
        return value * self.factor

    def combine(self, left: int, right: int) -> int:
        return (left + right) * self.factor

    def above(self, value: int) -> bool:
        return value > self.factor


def test_map_identity_preserves_elements():
    items = [3, "a", None, 0.5, (1, 2)]
    assert seq.map(items, lambda x: x) == items


def test_map_does_not_mutate_input_and_returns_new_list():
    items = [2, 4]
    result = seq.map(items, lambda arg: arg**2)
    assert result == [4, 16]
    assert items == [2, 4]
    assert result is not items


def test_map_empty_returns_empty_list():
    assert seq.map([], lambda x: x) == []


def test_map_threads_context_as_first_argument():
    assert seq.map([1, 2, 3], Scale.apply, Scale(10)) == [10, 20, 30]


def test_map_accepts_numpy_arrays():
    result = seq.map(np.arange(3), lambda x: int(x) + 1)
    assert result == [1, 2, 3]


def test_filter_keeps_order_of_truthy_elements():
    assert seq.filter([2, 4, 6], lambda arg: arg > 2) == [4, 6]
    assert seq.filter([0, "", "x", [], [1]], lambda x: x) == ["x", [1]]


def test_filter_result_satisfies_every():
    predicate = lambda x: x % 3 == 0
    kept = seq.filter(range(20), predicate)
    assert seq.every(kept, predicate)


def test_filter_with_context():
    assert seq.filter([1, 5, 10, 3], Scale.above, Scale(4)) == [5, 10]


def test_foreach_calls_in_order_and_returns_none():
    seen = []
    assert seq.foreach([2, 3, 5], lambda item: seen.append(item**2)) is None
    assert seen == [4, 9, 25]


def test_foreach_with_context():
    seen = []

    class Sink:
        def push(self, item):
            seen.append((self, item))

    sink = Sink()
    seq.foreach("ab", Sink.push, sink)
    assert seen == [(sink, "a"), (sink, "b")]


def test_every_and_any_on_examples():
    assert seq.every([2, 5, 7], lambda arg: arg > 0) is True
    assert seq.every([2, -5, 7], lambda arg: arg > 0) is False
    assert seq.any([2, 5, 10], lambda arg: arg > 9) is True
    assert seq.any([2, 5, 8], lambda arg: arg > 9) is False


def test_every_and_any_on_empty_sequence():
    assert seq.every([], lambda x: False) is True
    assert seq.any([], lambda x: True) is False


def test_every_invokes_predicate_for_all_elements_after_failure():
    calls = []

    def predicate(value):
        calls.append(value)
        return value > 0

    assert seq.every([-1, 2, 3], predicate) is False
    assert calls == [-1, 2, 3]


def test_any_invokes_predicate_for_all_elements_after_success():
    calls = []

    def predicate(value):
        calls.append(value)
        return value > 0

    assert seq.any([1, -2, -3], predicate) is True
    assert calls == [1, -2, -3]


def test_every_returns_bool_for_truthy_results():
    assert seq.every(["a", "b"], lambda x: x) is True
    assert seq.any(["", "b"], lambda x: x) is True


def test_zip_truncates_to_shorter_sequence():
    result = seq.zip(["a", "b", "c"], ["x", "y"], lambda left, right: left + right)
    assert result == ["ax", "by"]


def test_zip_example_and_context():
    assert seq.zip([2, 4], [5, 10], lambda x, y: x * y) == [10, 40]
    assert seq.zip([1, 2], [3, 4, 5], Scale.combine, Scale(2)) == [8, 12]


def test_zip_with_numpy_and_empty():
    assert seq.zip(np.array([1, 2, 3]), [10, 20], lambda x, y: int(x * y)) == [10, 40]
    assert seq.zip([], [1, 2], lambda x, y: x) == []


def test_non_callable_fails_at_first_invocation():
    assert seq.map([], 42) == []
    assert seq.every([], None) is True
    with pytest.raises(InvalidCallableError):
        seq.map([1], 42)
    with pytest.raises(InvalidCallableError):
        seq.filter([1], "not callable")
    with pytest.raises(InvalidCallableError):
        seq.zip([1], [2], object())


def test_invalid_callable_is_a_type_error():
    with pytest.raises(TypeError):
        seq.foreach([1], 3)


def test_non_iterable_raises_invalid_sequence():
    with pytest.raises(InvalidSequenceError) as excinfo:
        seq.map(5, lambda x: x)
    assert isinstance(excinfo.value.__cause__, TypeError)
    with pytest.raises(InvalidSequenceError):
        seq.any(None, lambda x: x)


def test_zip_requires_length_and_indexing():
    with pytest.raises(InvalidSequenceError):
        seq.zip(iter([1, 2]), [1, 2], lambda x, y: x)
    with pytest.raises(InvalidSequenceError):
        seq.zip({1, 2}, [1, 2], lambda x, y: x)


def test_zip_on_mapping_without_integer_keys_raises_invalid_sequence():
    with pytest.raises(InvalidSequenceError) as excinfo:
        seq.zip({"a": 1}, [1], lambda x, y: x)
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_errors_from_callable_propagate_unchanged():
    def boom(value):
        raise ValueError(value)

    with pytest.raises(ValueError):
        seq.map([1], boom)
