"""
Tests for the primary store surface of IndexedMap.

Covers:
- set/get/overwrite and the dict protocol
- remove/del semantics
- clear keeping index registrations
- try_get and contains_key
- enumeration behaviour
- atomicity of set() when a key factory fails
"""

import pytest

from indexedmap import IndexedMap, KeyNotFoundError, InvalidArgumentError, LookupResult


class TestPrimaryStore:
    """Primary key operations, independent of indexes."""

    def setup_method(self):
        self.m = IndexedMap()
        self.m.set("a", {"cat": "X"})
        self.m.set("b", {"cat": "Y"})

    # =================== SET / GET ===================

    def test_set_and_get(self):
        assert self.m["a"] == {"cat": "X"}
        assert len(self.m) == 2

    def test_setitem_is_set(self):
        self.m["c"] = {"cat": "Z"}
        assert self.m["c"] == {"cat": "Z"}
        assert len(self.m) == 3

    def test_set_overwrites(self):
        self.m.set("a", {"cat": "Q"})
        assert self.m["a"] == {"cat": "Q"}
        assert len(self.m) == 2

    def test_get_missing_raises_key_not_found(self):
        with pytest.raises(KeyNotFoundError) as exc_info:
            self.m["missing"]
        assert exc_info.value.key == "missing"

    def test_key_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            self.m["missing"]

    def test_mapping_get_with_default(self):
        assert self.m.get("missing") is None
        assert self.m.get("missing", 5) == 5
        assert self.m.get("a") == {"cat": "X"}

    def test_try_get(self):
        result = self.m.try_get("a")
        assert result == LookupResult(True, {"cat": "X"})
        assert result

        found, value = self.m.try_get("missing")
        assert found is False
        assert value is None

    def test_contains_key(self):
        assert self.m.contains_key("a")
        assert not self.m.contains_key("missing")
        assert "b" in self.m
        assert "missing" not in self.m

    def test_contains_unhashable_raises_like_dict(self):
        with pytest.raises(TypeError):
            [1, 2] in self.m
        with pytest.raises(TypeError):
            self.m.contains_key([1, 2])

    def test_non_string_primary_keys(self):
        m = IndexedMap()
        m[1] = "one"
        m[(2, 3)] = "pair"
        assert m[1] == "one"
        assert m[(2, 3)] == "pair"

    def test_unhashable_key_rejected_without_side_effects(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        with pytest.raises(TypeError):
            self.m.set(["bad"], {"cat": "X"})
        assert len(self.m) == 2
        assert set(self.m.lookup("by_cat", "X")) == {"a"}

    # =================== REMOVE ===================

    def test_remove_returns_true_then_false(self):
        assert self.m.remove("a") is True
        assert "a" not in self.m
        assert self.m.remove("a") is False

    def test_del_missing_raises(self):
        with pytest.raises(KeyNotFoundError):
            del self.m["missing"]

    def test_del_existing(self):
        del self.m["a"]
        assert len(self.m) == 1

    def test_pop_and_popitem(self):
        assert self.m.pop("a") == {"cat": "X"}
        assert self.m.pop("a", None) is None
        key, _ = self.m.popitem()
        assert key == "b"
        assert len(self.m) == 0

    # =================== CLEAR ===================

    def test_clear_empties_store_keeps_indexes(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        self.m.clear()

        assert len(self.m) == 0
        assert self.m.contains_index("by_cat")
        assert self.m.get_index_keys("by_cat") == set()

    def test_clear_then_reuse(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        self.m.clear()
        self.m["z"] = {"cat": "X"}
        assert dict(self.m.lookup("by_cat", "X")) == {"z": {"cat": "X"}}

    # =================== ENUMERATION ===================

    def test_iteration_covers_all_keys(self):
        assert set(self.m) == {"a", "b"}
        assert set(self.m.keys()) == {"a", "b"}
        assert dict(self.m.items()) == {"a": {"cat": "X"}, "b": {"cat": "Y"}}

    def test_independent_iterators(self):
        first = iter(self.m)
        second = iter(self.m)
        assert next(first) == next(second) == "a"
        assert list(first) == ["b"]
        assert list(second) == ["b"]

    def test_enumeration_is_restartable(self):
        assert list(self.m) == list(self.m)

    def test_equality_with_dict(self):
        assert self.m == {"a": {"cat": "X"}, "b": {"cat": "Y"}}

    # =================== CONSTRUCTION ===================

    def test_init_from_mapping(self):
        m = IndexedMap({"x": 1, "y": 2})
        assert dict(m) == {"x": 1, "y": 2}

    def test_init_from_pairs(self):
        m = IndexedMap([("x", 1), ("y", 2)])
        assert len(m) == 2

    def test_update_routes_through_indexes(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        self.m.update({"c": {"cat": "Y"}})
        assert set(self.m.lookup("by_cat", "Y")) == {"b", "c"}

    def test_setdefault(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        assert self.m.setdefault("a", {"cat": "Q"}) == {"cat": "X"}
        self.m.setdefault("d", {"cat": "Q"})
        assert set(self.m.lookup("by_cat", "Q")) == {"d"}

    def test_str(self):
        assert str(self.m) == "IndexedMap(2 entries, 0 indexes)"

    # =================== ATOMIC SET ===================

    def test_failing_key_factory_leaves_map_untouched(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        self.m.add_index("by_owner", lambda v: v.get("owner", "nobody"))

        with pytest.raises(KeyError):
            self.m.set("a", {"owner": "alice"})

        assert self.m["a"] == {"cat": "X"}
        assert set(self.m.lookup("by_cat", "X")) == {"a"}
        assert set(self.m.lookup("by_owner", "nobody")) == {"a", "b"}

    def test_non_string_derived_key_rejected(self):
        self.m.add_index("by_cat", lambda v: v["cat"])
        with pytest.raises(InvalidArgumentError):
            self.m.set("c", {"cat": 7})
        assert "c" not in self.m
