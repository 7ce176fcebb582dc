"""
Utility helper tests (Unset, coalesce, mirror).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import pickle
import unittest
from unittest import TestCase

from argloom.utils import Unset, UnsetType, coalesce, mirror


class TestUnset(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testSealed(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertIsNone(coalesce(Unset))


class TestMirror(TestCase):

    class Holder:
        items = mirror("items")
        label = mirror("label")

        def __init__(self):
            self._items = [("a", ""), {"k": [1]}]
            self._label = "name"

    def testReadOnly(self):
        holder = self.Holder()
        with self.assertRaises(AttributeError):
            holder.label = "other"
        self.assertEqual(holder.label, "name")

    def testContainersAreCopies(self):
        holder = self.Holder()
        items = holder.items
        items.append("new")
        items[1]["k"].append(2)
        self.assertEqual(holder.items, [("a", ""), {"k": [1]}])

    def testTuplesKeptAsIs(self):
        holder = self.Holder()
        self.assertIsInstance(holder.items[0], tuple)

    def testGetterCarriesTheMirroredName(self):
        self.assertEqual(self.Holder.items.fget.__name__, "items")

    def testNameMustBeAString(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == "__main__":
    unittest.main()
