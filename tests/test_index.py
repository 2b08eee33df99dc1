import unittest

from indexedcollection import FieldIndex, IndexConsistencyError
from indexedcollection.record import MISSING


class FieldIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.index = FieldIndex("name")

    def test_add_and_lookup(self) -> None:
        a = {"name": "a"}
        b = {"name": "b"}
        a2 = {"name": "a"}
        for record in (a, b, a2):
            self.index.add(record)

        found = self.index.lookup("a")
        self.assertEqual(len(found), 2)
        self.assertIs(found[0], a)
        self.assertIs(found[1], a2)
        self.assertEqual(self.index.lookup("zzz"), [])

    def test_lookup_returns_copy(self) -> None:
        self.index.add({"name": "a"})
        found = self.index.lookup("a")
        found.clear()
        self.assertEqual(len(self.index.lookup("a")), 1)

    def test_record_without_field_goes_to_missing_bucket(self) -> None:
        self.index.add({"id": 1})
        self.assertEqual(self.index.lookup(None), [])
        self.assertEqual(self.index.size(), 1)
        self.assertEqual(self.index.distinct_values(), 0)

    def test_remove_by_identity(self) -> None:
        first = {"name": "a"}
        twin = {"name": "a"}
        self.index.add(first)
        self.index.add(twin)

        removed = self.index.remove("a", twin)
        self.assertEqual(removed, 1)
        remaining = self.index.lookup("a")
        self.assertEqual(len(remaining), 1)
        self.assertIs(remaining[0], first)

    def test_remove_unknown_record_raises(self) -> None:
        self.index.add({"name": "a"})
        with self.assertRaises(IndexConsistencyError):
            self.index.remove("a", {"name": "a"})
        with self.assertRaises(AssertionError):
            self.index.remove("b", {"name": "b"})

    def test_move_keeps_all_occurrences(self) -> None:
        record = {"name": "a"}
        self.index.add(record)
        self.index.add(record)

        self.index.move("a", "b", record)
        self.assertEqual(self.index.lookup("a"), [])
        self.assertEqual(len(self.index.lookup("b")), 2)

    def test_move_from_missing(self) -> None:
        record = {"id": 1}
        self.index.add(record)
        self.index.move(MISSING, "a", record)
        self.assertEqual(self.index.lookup("a"), [record])
        self.assertEqual(self.index.size(), 1)


if __name__ == "__main__":
    unittest.main()
