"""
Unit tests for the ordered course index.

Index contract:
- in-order traversal is sorted by (upper-cased) course number
- inserting an existing key updates title/prerequisites in place
- clear() empties the index and it can be reused
"""

import unittest

from coursecatalog.index import CourseIndex, normalize_key
from coursecatalog.model import Course


def _keys(index: CourseIndex) -> list[str]:
    return [c.key for c in index.iter_ordered()]


class TestCourseIndex(unittest.TestCase):
    def test_empty_index(self) -> None:
        index = CourseIndex()
        self.assertEqual(len(index), 0)
        self.assertFalse(index)
        self.assertEqual(list(index.iter_ordered()), [])
        self.assertIsNone(index.lookup("CS101"))

    def test_ordered_regardless_of_insert_order(self) -> None:
        index = CourseIndex()
        for key in ["MATH201", "CS300", "CS100", "CSCI101", "CS200", "ACCT100"]:
            index.insert(Course(key, f"Title {key}"))
        self.assertEqual(_keys(index), ["ACCT100", "CS100", "CS200", "CS300", "CSCI101", "MATH201"])
        self.assertEqual(len(index), 6)

    def test_iteration_is_restartable(self) -> None:
        index = CourseIndex()
        index.insert(Course("B", "b"))
        index.insert(Course("A", "a"))
        self.assertEqual(_keys(index), ["A", "B"])
        self.assertEqual([c.key for c in index], ["A", "B"])

    def test_duplicate_key_updates_in_place(self) -> None:
        index = CourseIndex()
        index.insert(Course("CS200", "Old", ["CS100"]))
        index.insert(Course("CS100", "Intro"))
        index.insert(Course("CS300", "Advanced"))

        added = index.insert(Course("CS200", "New", ["CS100", "MATH201"]))

        self.assertFalse(added)
        self.assertEqual(len(index), 3)
        self.assertEqual(_keys(index), ["CS100", "CS200", "CS300"])
        course = index.lookup("CS200")
        assert course is not None
        self.assertEqual(course.title, "New")
        self.assertEqual(course.prerequisites, ["CS100", "MATH201"])

    def test_lookup_is_case_insensitive(self) -> None:
        index = CourseIndex()
        index.insert(Course("CS101", "Intro to CS"))
        course = index.lookup("cs101")
        assert course is not None
        self.assertEqual(course.key, "CS101")
        self.assertIn("Cs101", index)
        self.assertNotIn("CS102", index)
        self.assertNotIn(101, index)

    def test_lowercase_duplicate_is_update(self) -> None:
        # Stored display key stays the first one parsed
        index = CourseIndex()
        index.insert(Course("CS101", "Intro"))
        index.insert(Course("cs101", "Intro (updated)"))
        self.assertEqual(len(index), 1)
        self.assertEqual(_keys(index), ["CS101"])
        self.assertEqual(index.lookup("CS101").title, "Intro (updated)")

    def test_looked_up_course_reflects_later_update(self) -> None:
        # lookup() hands out the stored entry; updates go through insert()
        index = CourseIndex()
        index.insert(Course("CS200", "Old", ["CS100"]))
        seen = index.lookup("CS200")
        index.insert(Course("cs200", "New", []))
        self.assertIs(index.lookup("CS200"), seen)
        self.assertEqual(seen.title, "New")
        self.assertEqual(seen.prerequisites, [])

    def test_lookup_returns_most_recent_insert(self) -> None:
        index = CourseIndex()
        for title in ["one", "two", "three"]:
            index.insert(Course("X1", title))
        self.assertEqual(index.lookup("X1").title, "three")

    def test_index_owns_its_copy(self) -> None:
        prereqs = ["CS100"]
        course = Course("CS200", "DS", prereqs)
        index = CourseIndex()
        index.insert(course)
        prereqs.append("MATH201")
        course.title = "changed"
        stored = index.lookup("CS200")
        self.assertEqual(stored.title, "DS")
        self.assertEqual(stored.prerequisites, ["CS100"])

    def test_clear_then_reuse(self) -> None:
        index = CourseIndex()
        for key in ["C", "A", "B"]:
            index.insert(Course(key, key))
        index.clear()
        self.assertEqual(list(index.iter_ordered()), [])
        self.assertEqual(len(index), 0)
        self.assertIsNone(index.lookup("A"))

        index.insert(Course("Z", "z"))
        self.assertEqual(_keys(index), ["Z"])

    def test_sorted_input_does_not_recurse(self) -> None:
        # A sorted catalog degenerates the tree into a list
        index = CourseIndex()
        n = 2000
        for i in range(n):
            index.insert(Course(f"C{i:05d}", "t"))
        self.assertEqual(index.height(), n)
        self.assertEqual(len(list(index.iter_ordered())), n)
        self.assertIsNotNone(index.lookup(f"C{n - 1:05d}"))

    def test_invalid_insert_raises(self) -> None:
        index = CourseIndex()
        with self.assertRaises(TypeError):
            index.insert({"key": "CS101", "title": "x"})  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            index.insert(Course("  ", "x"))

    def test_normalize_key(self) -> None:
        self.assertEqual(normalize_key(" cs101 "), "CS101")


if __name__ == "__main__":
    unittest.main()
