"""
Ordered in-memory course index.

Courses are kept in an (unbalanced) binary search tree ordered by course
number. Nodes are stored in an arena of parallel lists and addressed by
integer handles, and every walk over the tree is iterative, so very
skewed insertion orders (e.g. an already sorted catalog file) cannot hit
the interpreter's recursion limit.

Key comparison uses the upper-cased course number, while each course keeps
the key exactly as it was parsed for display:

    index.insert(Course("CS101", "Intro to CS"))
    index.lookup("cs101")  # -> Course(key="CS101", ...)
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from coursecatalog.model import Course

# Handle value meaning "no child"
NIL = -1


def normalize_key(key: str) -> str:
    """
    Return the comparison form of a course number (strip + uppercase).
    """
    return key.strip().upper()


class CourseIndex:
    """
    Key-ordered container mapping course number -> Course.

    insert() stores a copy of the given Course and an existing key is
    updated in place (title and prerequisites), so the tree shape and the
    order of other entries never change on update.
    """

    def __init__(self) -> None:
        self._courses: List[Course] = []
        self._sort_keys: List[str] = []
        self._left: List[int] = []
        self._right: List[int] = []
        self._root = NIL

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, course: Course) -> bool:
        """
        Insert a course or update the existing entry with the same key.

        Returns True when a new entry was added, False when an existing
        entry was updated.
        """
        if not isinstance(course, Course):
            raise TypeError(f"expected Course, got {type(course).__name__}")

        sort_key = normalize_key(course.key)
        if not sort_key:
            raise ValueError("course key must not be empty")

        parent = NIL
        node = self._root
        while node != NIL:
            node_key = self._sort_keys[node]
            if sort_key == node_key:
                stored = self._courses[node]
                stored.title = course.title
                stored.prerequisites = list(course.prerequisites)
                return False
            parent = node
            node = self._left[node] if sort_key < node_key else self._right[node]

        handle = self._new_node(course, sort_key)
        if parent == NIL:
            self._root = handle
        elif sort_key < self._sort_keys[parent]:
            self._left[parent] = handle
        else:
            self._right[parent] = handle
        return True

    def clear(self) -> None:
        """
        Release all entries. The index is empty and reusable afterwards.
        """
        self._courses = []
        self._sort_keys = []
        self._left = []
        self._right = []
        self._root = NIL

    def _new_node(self, course: Course, sort_key: str) -> int:
        self._courses.append(
            Course(key=course.key.strip(), title=course.title, prerequisites=list(course.prerequisites))
        )
        self._sort_keys.append(sort_key)
        self._left.append(NIL)
        self._right.append(NIL)
        return len(self._courses) - 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _find(self, key: str) -> int:
        sort_key = normalize_key(key)
        node = self._root
        while node != NIL:
            node_key = self._sort_keys[node]
            if sort_key == node_key:
                return node
            node = self._left[node] if sort_key < node_key else self._right[node]
        return NIL

    def lookup(self, key: str) -> Optional[Course]:
        """
        Exact (case-insensitive) lookup. Returns None if the key is unknown.

        The returned Course is the stored entry, not a copy: treat it as
        read-only and go through insert() to change it.
        """
        handle = self._find(key)
        if handle == NIL:
            return None
        return self._courses[handle]

    def iter_ordered(self) -> Iterator[Course]:
        """
        Yield all courses in ascending key order (in-order walk with an explicit stack).

        Every call starts a new traversal. Modifying the index while
        iterating is not supported.
        """
        stack: List[int] = []
        node = self._root
        while stack or node != NIL:
            while node != NIL:
                stack.append(node)
                node = self._left[node]
            node = stack.pop()
            yield self._courses[node]
            node = self._right[node]

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path (0 for an empty index).
        """
        best = 0
        stack = [(self._root, 1)] if self._root != NIL else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (self._left[node], self._right[node]):
                if child != NIL:
                    stack.append((child, depth + 1))
        return best

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._courses)

    def __bool__(self) -> bool:
        return self._root != NIL

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key) != NIL

    def __iter__(self) -> Iterator[Course]:
        return self.iter_ordered()

    def __repr__(self) -> str:
        return f"CourseIndex(size={len(self)})"
