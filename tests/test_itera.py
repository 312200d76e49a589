"""Tests for the iteration helpers."""

import pytest
from toru.core.itera import apply, ensure_traversable


class TestEnsureTraversable:
    def test_iterator_passes_through(self):
        it = iter([1, 2])
        assert ensure_traversable(it) is it

    def test_generator_passes_through(self):
        gen = (x for x in 'ab')
        assert ensure_traversable(gen) is gen

    def test_list_becomes_iterator(self):
        it = ensure_traversable([1, 2, 3])
        assert next(it) == 1
        assert list(it) == [2, 3]

    def test_dict_yields_keys(self):
        assert list(ensure_traversable({'a': 1, 'b': 2})) == ['a', 'b']

    def test_non_iterable_rejected(self):
        with pytest.raises(TypeError):
            ensure_traversable(7)


class TestApply:
    def test_maps_values(self):
        assert list(apply([1, 2, 3], lambda x: x * 10)) == [10, 20, 30]

    def test_is_lazy(self):
        seen = []

        def fn(x):
            seen.append(x)
            return x

        mapped = apply([1, 2], fn)
        assert seen == []
        assert next(mapped) == 1
        assert seen == [1]
