"""Tests for Registry."""

import logging

import pytest

from bindfx import Computed, Observable, Registry, UnknownBindingError


class TestRegistry:
    def test_creation_from_schema(self):
        r = Registry.from_schema({"first": "John", "count": 0})
        assert r.get("first") == "John"
        assert r.get("count") == 0
        assert isinstance(r["first"], Observable)

    def test_initial_overrides(self):
        r = Registry.from_schema({"x": 10, "y": "hello"}, initial={"x": 99})
        assert r.get("x") == 99
        assert r.get("y") == "hello"

    def test_creation_from_mapping(self):
        first = Observable("John")
        r = Registry({"first": first})
        assert r["first"] is first
        assert "first" in r
        assert len(r) == 1

    def test_register_returns_observable(self):
        r = Registry()
        o = Observable(1)
        assert r.register("o", o) is o

    def test_iteration_in_registration_order(self):
        r = Registry.from_schema({"b": 1, "a": 2, "c": 3})
        assert list(r) == ["b", "a", "c"]

    def test_set(self):
        r = Registry.from_schema({"x": 0})
        log = []
        r["x"].subscribe(log.append)
        r.set("x", 42)
        assert r.get("x") == 42
        assert log == [42]

    def test_set_computed_fails(self):
        o = Observable(1)
        r = Registry({"o": o, "double": Computed(lambda: o.value * 2, [o])})
        with pytest.raises(AttributeError):
            r.set("double", 5)

    def test_register_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="bindfx.registry"):
            Registry().register("first", Observable("John"))
        assert "Registered 'first'" in caplog.text

    def test_repr(self):
        r = Registry.from_schema({"a": 1})
        assert repr(r) == "Registry(['a'])"


class TestUnknownNames:
    def test_resolve_unknown(self):
        r = Registry.from_schema({"x": 1})
        with pytest.raises(UnknownBindingError, match="nope"):
            r.resolve("nope")

    def test_is_a_key_error(self):
        r = Registry()
        with pytest.raises(KeyError):
            r["missing"]

    def test_get_and_set_unknown(self):
        r = Registry()
        with pytest.raises(UnknownBindingError):
            r.get("missing")
        with pytest.raises(UnknownBindingError):
            r.set("missing", 1)

    def test_error_carries_name(self):
        err = UnknownBindingError("fulll")
        assert err.name == "fulll"
        assert str(err) == "no observable registered under 'fulll'"


class TestValidation:
    @pytest.mark.parametrize("name", ["", "1st", "first name", "a.b", None, 3])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError, match="invalid binding name"):
            Registry().register(name, Observable(0))

    @pytest.mark.parametrize("name", ["first", "_private", "full-name", "item_2"])
    def test_valid_names(self, name):
        r = Registry()
        r.register(name, Observable(0))
        assert name in r

    def test_duplicate_name(self):
        r = Registry.from_schema({"x": 1})
        with pytest.raises(ValueError, match="already registered"):
            r.register("x", Observable(2))

    def test_non_observable(self):
        with pytest.raises(TypeError):
            Registry().register("x", 5)

    def test_mapping_entries_are_validated(self):
        with pytest.raises(ValueError):
            Registry({"bad name": Observable(0)})
