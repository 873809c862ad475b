# radixtable/utils/trie.py
from typing import TypeVar, Generic, Dict, Iterator, Optional, Tuple, Union, Any

V = TypeVar("V")  # 值类型
Key = Union[str, bytes]


def longest_prefix(k1: Key, k2: Key) -> int:
    """Return the length of the common leading run of two keys."""
    limit = min(len(k1), len(k2))
    i = 0
    while i < limit and k1[i] == k2[i]:
        i += 1
    return i


class Node(Generic[V]):
    """A radix tree node; `prefix` is the edge label from its parent."""

    __slots__ = ("prefix", "children", "depth", "has_value", "value")

    def __init__(self, prefix: Key, depth: int):
        self.prefix = prefix
        self.children: Dict[Any, "Node[V]"] = {}  # 首元素 -> 子节点
        self.depth = depth
        self.has_value = False
        self.value: Optional[V] = None

    def set(self, value: V) -> None:
        self.has_value = True
        self.value = value

    def clear(self) -> None:
        self.has_value = False
        self.value = None

    def add_child(self, prefix: Key, value: V) -> "Node[V]":
        child = Node(prefix, self.depth + 1)
        child.set(value)
        self.children[prefix[0]] = child
        return child

    def find_child(self, key: Key) -> Tuple[Optional["Node[V]"], int]:
        """Return the child sharing a leading run with `key` and that run's length."""
        child = self.children.get(key[0])
        if child is None:
            return None, 0
        return child, longest_prefix(child.prefix, key)

    def split(self, index: int) -> None:
        """Insert a branch point `index` elements into this node's edge.

        The tail of the edge moves to a new single child which inherits
        this node's value and children; this node keeps the head and
        loses its value.
        """
        if not 0 < index < len(self.prefix):
            raise AssertionError(f"split index {index} out of range for prefix {self.prefix!r}")
        tail = Node(self.prefix[index:], self.depth + 1)
        tail.has_value, tail.value = self.has_value, self.value
        tail.children = self.children
        self.prefix = self.prefix[:index]
        self.clear()
        self.children = {tail.prefix[0]: tail}

    def __repr__(self) -> str:
        return f"Node(prefix={self.prefix!r}, depth={self.depth}, has_value={self.has_value})"


class RadixTree(Generic[V]):
    """A compressed prefix tree mapping str or bytes keys to values.

    Children are keyed by the leading element of their prefix, so no two
    siblings can share a leading run. Deleting only clears a node's value;
    nodes are never pruned or merged, so depths stay stable.

    The tree is not synchronized: callers serialize mutations themselves.
    """

    def __init__(self):
        self.root: Node[V] = Node("", 0)

    def insert(self, key: Key, value: V) -> int:
        """Insert or overwrite the value for `key`, return the holding node's depth."""
        node, remaining = self.root, key
        while remaining:
            child, common = node.find_child(remaining)
            if child is None:
                return node.add_child(remaining, value).depth
            if common < len(child.prefix):
                child.split(common)
            node, remaining = child, remaining[common:]
        if not key:
            self.root.prefix = key  # 根键保持与调用方相同的类型
        node.set(value)
        return node.depth

    def delete(self, key: Key) -> Tuple[int, bool]:
        """Clear the value stored at exactly `key`.

        Returns the depth reached and whether a node spelling `key` exists.
        Nothing is mutated when the key diverges from the tree.
        """
        node, remaining = self.root, key
        while remaining:
            child, common = node.find_child(remaining)
            if child is None:
                return node.depth, False
            if common < len(child.prefix):
                return child.depth, False
            node, remaining = child, remaining[common:]
        node.clear()
        return node.depth, True

    def _exact(self, key: Key) -> Optional[Node[V]]:
        node, remaining = self.root, key
        while remaining:
            child, common = node.find_child(remaining)
            if child is None or common < len(child.prefix):
                return None
            node, remaining = child, remaining[common:]
        return node

    def match(self, key: Key, default: Any = None) -> Any:
        """Exact lookup; returns `default` when no value is stored at `key`."""
        node = self._exact(key)
        if node is None or not node.has_value:
            return default
        return node.value

    def match_longest(self, key: Key, default: Any = None) -> Any:
        """Return the value of the deepest node on `key`'s path that holds one."""
        node, remaining = self.root, key
        best = node if node.has_value else None
        while remaining:
            child, common = node.find_child(remaining)
            if child is None or common < len(child.prefix):
                break
            node, remaining = child, remaining[common:]
            if node.has_value:
                best = node
        return best.value if best is not None else default

    def items(self) -> Iterator[Tuple[Key, V]]:
        """Yield (key, value) for every stored value, depth first."""
        stack = [(self.root, ())]
        while stack:
            node, parts = stack.pop()
            if node.has_value:
                yield (parts[0][:0].join(parts) if parts else node.prefix), node.value
            for child in reversed(list(node.children.values())):
                stack.append((child, parts + (child.prefix,)))

    def keys(self) -> Iterator[Key]:
        return (key for key, _ in self.items())

    @property
    def node_count(self) -> int:
        """Number of structural nodes, root included."""
        count, stack = 0, [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, key: Key) -> bool:
        node = self._exact(key)
        return node is not None and node.has_value

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def __repr__(self) -> str:
        return f"RadixTree(size={len(self)}, nodes={self.node_count})"


# 示例用法
if __name__ == "__main__":
    tree = RadixTree[int]()
    tree.insert("foo", 1)
    tree.insert("foobar", 2)
    print(tree.match("foobar"))  # 输出: 2
    print(tree.match_longest("foobaz"))  # 输出: 1
    print(list(tree.items()))  # 输出: [('foo', 1), ('foobar', 2)]
