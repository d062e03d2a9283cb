"""Tests for shape inference over single JSON values."""

import os
import sys
import unittest
from dataclasses import asdict

from jsoncomparison import NO_DIFF, Compare

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from quicktypegen.shape_inference import (
    ANY,
    BOOLEAN,
    DATE,
    NUMBER,
    STRING,
    ArrayOf,
    NamedReference,
    Registry,
    ShapeInferrer,
    infer_types,
    shape_signature,
)


class TestPrimitiveInference(unittest.TestCase):
    """Test cases for primitive and array values."""

    def setUp(self):
        self.inferrer = ShapeInferrer()

    def test_primitives(self):
        """Primitives map to their TypeScript keywords."""
        self.assertEqual(self.inferrer.infer(True, 'X'), BOOLEAN)
        self.assertEqual(self.inferrer.infer(False, 'X'), BOOLEAN)
        self.assertEqual(self.inferrer.infer(3.14, 'X'), NUMBER)
        self.assertEqual(self.inferrer.infer(42, 'X'), NUMBER)
        self.assertEqual(self.inferrer.infer("x", 'X'), STRING)
        self.assertEqual(self.inferrer.infer(None, 'X'), ANY)
        self.assertEqual(self.inferrer.declarations, [])

    def test_empty_array(self):
        """An empty array is any[] and declares nothing."""
        self.assertEqual(self.inferrer.infer([], 'X'), ArrayOf(ANY))
        self.assertEqual(self.inferrer.declarations, [])

    def test_array_uses_first_element_only(self):
        """Heterogeneous arrays are typed from their first element."""
        self.assertEqual(self.inferrer.infer([1, "two", None], 'X'), ArrayOf(NUMBER))
        self.assertEqual(self.inferrer.infer([[True]], 'X'), ArrayOf(ArrayOf(BOOLEAN)))

    def test_unknown_kind_is_any(self):
        """Values that are not JSON fall back to any."""
        self.assertEqual(self.inferrer.infer(object(), 'X'), ANY)
        self.assertEqual(self.inferrer.infer({1, 2}, 'X'), ANY)

    def test_date_strings(self):
        """Date-time strings stay strings unless date detection is on."""
        self.assertEqual(self.inferrer.infer("2011-01-25T18:44:36Z", 'X'), STRING)
        self.assertEqual(ShapeInferrer(detect_dates=True).infer("2011-01-25T18:44:36Z", 'X'), DATE)
        self.assertEqual(ShapeInferrer(detect_dates=True).infer("2011-01-25", 'X'), STRING)


class TestObjectInference(unittest.TestCase):
    """Test cases for object shapes and declarations."""

    def test_nested_object_naming(self):
        """Nested objects are named after their parent and key."""
        declarations, root_type = infer_types({"user": {"id": 1}}, 'Root')
        self.assertEqual(root_type, NamedReference('Root'))
        self.assertEqual([d.name for d in declarations], ['RootUser', 'Root'])
        self.assertEqual(declarations[0].fields[0].name, 'id')
        self.assertEqual(declarations[0].fields[0].type, NUMBER)
        self.assertEqual(declarations[1].fields[0].type, NamedReference('RootUser'))

    def test_array_of_objects_deduplicated(self):
        """Array elements with the same keys share one declaration."""
        declarations, root_type = infer_types([{"a": 1, "b": 2}, {"a": 3, "b": 4}], 'Root')
        self.assertEqual(len(declarations), 1)
        self.assertEqual(declarations[0].name, 'RootItem')
        self.assertEqual(declarations[0].signature, 'a,b')
        self.assertEqual(root_type, ArrayOf(NamedReference('RootItem')))

    def test_same_keys_reuse_first_declaration(self):
        """Deduplication is by key set, so the first shape wins."""
        declarations, _ = infer_types({"x": {"a": 1}, "y": {"a": "text"}}, 'Root')
        self.assertEqual([d.name for d in declarations], ['RootX', 'Root'])
        root = declarations[1]
        self.assertEqual(root.fields[0].type, NamedReference('RootX'))
        self.assertEqual(root.fields[1].type, NamedReference('RootX'))
        self.assertEqual(declarations[0].fields[0].type, NUMBER)

    def test_key_order_preserved(self):
        """Fields keep the order of the source object."""
        declarations, _ = infer_types({"z": 1, "a": "s", "m": None}, 'Root')
        self.assertEqual([f.name for f in declarations[0].fields], ['z', 'a', 'm'])
        self.assertEqual(declarations[0].signature, 'a,m,z')

    def test_digit_leading_field_name(self):
        """Keys starting with a digit get an underscore prefix."""
        declarations, _ = infer_types({"123abc": 1}, 'Root')
        self.assertEqual(declarations[0].fields[0].name, '_123abc')

    def test_array_property_item_naming(self):
        """Objects inside array properties get an Item suffix."""
        declarations, _ = infer_types({"orders": [{"id": 1}]}, 'Shop')
        self.assertEqual([d.name for d in declarations], ['ShopOrdersItem', 'Shop'])
        self.assertEqual(declarations[1].fields[0].type, ArrayOf(NamedReference('ShopOrdersItem')))

    def test_name_collision_gets_numeric_suffix(self):
        """Different shapes whose hints map to the same name are disambiguated."""
        declarations, _ = infer_types({"user_info": {"a": 1}, "user-info": {"b": 2}}, 'Root')
        self.assertEqual([d.name for d in declarations], ['RootUserInfo', 'RootUserInfo2', 'Root'])

    def test_in_progress_name_is_reserved(self):
        """A nested object cannot take the name of an enclosing object."""
        declarations, root_type = infer_types({"": {"z": 1}}, 'Root')
        self.assertEqual([d.name for d in declarations], ['Root2', 'Root'])
        self.assertEqual(root_type, NamedReference('Root'))

    def test_declarations_as_dicts(self):
        """Declarations are plain data and convert to dictionaries."""
        declarations, _ = infer_types({"ok": True}, 'Status')
        expected = {
            'name': 'Status',
            'signature': 'ok',
            'fields': [{'name': 'ok', 'type': {'keyword': 'boolean'}}],
        }
        actual = asdict(declarations[0])
        actual['fields'] = list(actual['fields'])
        self.assertEqual(Compare().check(expected, actual), NO_DIFF)

    def test_determinism(self):
        """The same input always yields the same declarations."""
        value = {"b": [{"c": 1}], "a": {"d": None}}
        self.assertEqual(infer_types(value, 'Root'), infer_types(value, 'Root'))


class TestRegistry(unittest.TestCase):
    """Test cases for the per-run registry."""

    def test_reserve_name(self):
        """Names are handed out once, then suffixed."""
        registry = Registry()
        self.assertEqual(registry.reserve_name('Item'), 'Item')
        self.assertEqual(registry.reserve_name('Item'), 'Item2')
        self.assertEqual(registry.reserve_name('Item'), 'Item3')

    def test_shape_signature(self):
        """Signatures are sorted and comma-joined."""
        self.assertEqual(shape_signature({"b": 1, "a": 2}), 'a,b')
        self.assertEqual(shape_signature({}), '')
        self.assertEqual(shape_signature({"a,b": 1}), 'a,b')

    def test_comma_in_key_shares_signature(self):
        """A key containing a comma matches the split key set."""
        declarations, _ = infer_types({"x": {"a,b": 1}, "y": {"a": 1, "b": 2}}, 'Root')
        self.assertEqual([d.name for d in declarations], ['RootX', 'Root'])
        self.assertEqual(declarations[1].fields[1].type, NamedReference('RootX'))


if __name__ == '__main__':
    unittest.main()
