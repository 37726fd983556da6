"""An ordered mapping built on a binary search tree, with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class _Node:
    """A tree node; ``red`` is only meaningful for balanced subclasses."""

    __slots__ = ("key", "value", "parent", "left", "right", "red")

    def __init__(self, key: Any, value: Any, nil: _Node | None = None) -> None:
        self.key = key
        self.value = value
        sentinel = self if nil is None else nil
        self.parent = sentinel
        self.left = sentinel
        self.right = sentinel
        self.red = False


class Dictionary:
    """A mapping from ordered keys to values kept in a binary search tree.

    Besides the usual mapping operations it carries a *current* cursor that
    can be placed at the first or last pair and stepped through the keys in
    order.
    """

    __hash__ = None  # mutable container

    def __init__(
        self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None
    ) -> None:
        self._nil = _Node("", 0)
        self._root = self._nil
        self._current = self._nil
        self._size = 0
        if pairs is not None:
            source = pairs.items() if isinstance(pairs, Mapping) else pairs
            for key, value in source:
                self.set_value(key, value)

    # Tree helpers -------------------------------------------------------

    def _search(self, key: Any) -> _Node:
        node = self._root
        while node is not self._nil:
            if key == node.key:
                return node
            node = node.right if node.key < key else node.left
        return self._nil

    def _locate(self, key: Any, operation: str) -> _Node:
        node = self._search(key)
        if node is self._nil:
            raise KeyError(f"Dictionary: {operation}(): key {key!r} does not exist")
        return node

    def _find_min(self, node: _Node) -> _Node:
        if node is self._nil:
            return self._nil
        while node.left is not self._nil:
            node = node.left
        return node

    def _find_max(self, node: _Node) -> _Node:
        if node is self._nil:
            return self._nil
        while node.right is not self._nil:
            node = node.right
        return node

    def _successor(self, node: _Node) -> _Node:
        if node is self._nil:
            return self._nil
        if node.right is not self._nil:
            return self._find_min(node.right)
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def _predecessor(self, node: _Node) -> _Node:
        if node is self._nil:
            return self._nil
        if node.left is not self._nil:
            return self._find_max(node.left)
        parent = node.parent
        while parent is not self._nil and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def _transplant(self, u: _Node, v: _Node) -> None:
        """Replace the subtree rooted at u with the one rooted at v."""
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not self._nil:
            v.parent = u.parent

    def _insert(self, key: Any, value: Any) -> _Node | None:
        """Insert or overwrite; return the new node, or None on overwrite."""
        parent = self._nil
        node = self._root
        while node is not self._nil:
            if key == node.key:
                node.value = value
                return None
            parent = node
            node = node.left if key < node.key else node.right
        new = _Node(key, value, self._nil)
        new.parent = parent
        if parent is self._nil:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        return new

    def _delete_node(self, z: _Node) -> None:
        if z.left is self._nil:
            self._transplant(z, z.right)
        elif z.right is self._nil:
            self._transplant(z, z.left)
        else:
            y = self._find_min(z.right)
            if y.parent is not z:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y

    def _in_order(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _pre_order(self) -> Iterator[_Node]:
        if self._root is self._nil:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not self._nil:
                stack.append(node.right)
            if node.left is not self._nil:
                stack.append(node.left)

    # Container protocol -------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        try:
            return self._search(key) is not self._nil
        except TypeError:
            return False

    def __getitem__(self, key: Any) -> Any:
        return self.get_value(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set_value(key, value)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in list(self._in_order()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return len(self) == len(other) and list(self.items()) == list(other.items())

    def __str__(self) -> str:
        return "".join(f"{node.key} : {node.value}\n" for node in self._in_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

    def copy(self) -> Dictionary:
        """Return an independent copy built by a pre-order walk; it has no current pair."""
        clone = type(self)()
        for node in self._pre_order():
            clone.set_value(node.key, node.value)
        return clone

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in key order."""
        for node in list(self._in_order()):
            yield node.key, node.value

    # Access -------------------------------------------------------------

    def get_value(self, key: Any) -> Any:
        """Return the value stored under key."""
        return self._locate(key, "getValue").value

    def has_current(self) -> bool:
        """Return True if the cursor is on a pair."""
        return self._current is not self._nil

    def _require_current(self, operation: str) -> _Node:
        if self._current is self._nil:
            raise LookupError(f"Dictionary: {operation}(): current doesn't exist")
        return self._current

    def current_key(self) -> Any:
        """Return the key at the cursor."""
        return self._require_current("currentKey").key

    def current_val(self) -> Any:
        """Return the value at the cursor."""
        return self._require_current("currentVal").value

    def set_current_val(self, value: Any) -> None:
        """Overwrite the value at the cursor."""
        self._require_current("currentVal").value = value

    # Manipulation -------------------------------------------------------

    def set_value(self, key: Any, value: Any) -> None:
        """Overwrite the value for key, or insert the pair if key is new."""
        self._insert(key, value)

    def remove(self, key: Any) -> None:
        """Delete the pair for key; if it is current, the cursor becomes undefined."""
        node = self._locate(key, "remove")
        if self._current is node:
            self._current = self._nil
        self._delete_node(node)
        self._size -= 1

    def clear(self) -> None:
        """Remove every pair."""
        self._root = self._nil
        self._current = self._nil
        self._size = 0

    def begin(self) -> None:
        """Place the cursor at the first pair, if any."""
        if self._size > 0:
            self._current = self._find_min(self._root)

    def end(self) -> None:
        """Place the cursor at the last pair, if any."""
        if self._size > 0:
            self._current = self._find_max(self._root)

    def next(self) -> None:
        """Advance the cursor; past the last pair it becomes undefined."""
        if self.has_current():
            self._current = self._successor(self._current)

    def prev(self) -> None:
        """Step the cursor back; before the first pair it becomes undefined."""
        if self.has_current():
            self._current = self._predecessor(self._current)

    # Other --------------------------------------------------------------

    def pre_string(self) -> str:
        """Return the keys in pre-order, each followed by a newline."""
        return "".join(f"{node.key}\n" for node in self._pre_order())