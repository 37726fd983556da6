"""An ordered mapping kept balanced as a red-black tree."""

from __future__ import annotations

from typing import Any

from adtkit.dictionary import Dictionary, _Node


class RedBlackDictionary(Dictionary):
    """A Dictionary whose tree is rebalanced with red-black rules.

    Insertions and removals keep the height logarithmic in the number of
    pairs. Lookups, iteration and cursor movement are inherited unchanged.
    """

    # Rotations ----------------------------------------------------------

    def _left_rotate(self, x: _Node) -> None:
        nil = self._nil
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: _Node) -> None:
        nil = self._nil
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    # Insertion ----------------------------------------------------------

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.red:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grandparent.red = True
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._left_rotate(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grandparent.red = True
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._right_rotate(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._left_rotate(z.parent.parent)
        self._root.red = False

    def set_value(self, key: Any, value: Any) -> None:
        """Overwrite the value for key, or insert the pair and rebalance."""
        node = self._insert(key, value)
        if node is not None:
            node.red = True
            self._insert_fixup(node)

    # Removal ------------------------------------------------------------

    def _rb_transplant(self, u: _Node, v: _Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _delete_fixup(self, x: _Node) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                w = x.parent.right
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._left_rotate(x.parent)
                    w = x.parent.right
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.right.red:
                        w.left.red = False
                        w.red = True
                        self._right_rotate(w)
                        w = x.parent.right
                    w.red = x.parent.red
                    x.parent.red = False
                    w.right.red = False
                    self._left_rotate(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._right_rotate(x.parent)
                    w = x.parent.left
                if not w.right.red and not w.left.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.left.red:
                        w.right.red = False
                        w.red = True
                        self._left_rotate(w)
                        w = x.parent.left
                    w.red = x.parent.red
                    x.parent.red = False
                    w.left.red = False
                    self._right_rotate(x.parent)
                    x = self._root
        x.red = False

    def _rb_delete(self, z: _Node) -> None:
        nil = self._nil
        y = z
        y_was_red = y.red
        if z.left is nil:
            x = z.right
            self._rb_transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._rb_transplant(z, z.left)
        else:
            y = self._find_min(z.right)
            y_was_red = y.red
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._rb_transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._rb_transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.red = z.red
        if not y_was_red:
            self._delete_fixup(x)
        self._nil.red = False

    def remove(self, key: Any) -> None:
        """Delete the pair for key and rebalance; a current pair removed makes the cursor undefined."""
        node = self._locate(key, "remove")
        if self._current is node:
            self._current = self._nil
        self._rb_delete(node)
        self._size -= 1

    # Checking -----------------------------------------------------------

    def black_height(self) -> int:
        """Return the number of black nodes on every root-to-leaf path.

        Raises ValueError if the red-black properties do not hold.
        """
        nil = self._nil
        if self._root is not nil and self._root.red:
            raise ValueError("root is red")

        def walk(node: _Node) -> int:
            if node is nil:
                return 0
            if node.red and (node.left.red or node.right.red):
                raise ValueError(f"red node {node.key!r} has a red child")
            left = walk(node.left)
            right = walk(node.right)
            if left != right:
                raise ValueError(f"unequal black heights below {node.key!r}")
            return left + (0 if node.red else 1)

        return walk(self._root)