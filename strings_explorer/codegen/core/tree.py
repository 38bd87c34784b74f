"""
Namespace tree for localization keys.

Dotted keys such as ``settings.account.title`` are merged into a tree of
namespaces (``settings`` -> ``account``) with one leaf per key. The tree is
then sorted into a canonical shape and renamed until no identifier clashes
with a sibling or with its parent.
"""

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .naming import NameSanitizer

logger = get_logger(__name__)


@dataclass(frozen=True)
class Namespace:
    """A grouping container generated for a shared key segment."""

    name: str


@dataclass(frozen=True)
class Leaf:
    """An accessor generated for one full key."""

    name: str
    key: str  # Runtime lookup key, never renamed
    text: str


NodeValue = Union[Namespace, Leaf]


@dataclass(frozen=True)
class Entry:
    """A single key/text pair read from a table."""

    key: str
    text: str


def sort_key(value: NodeValue) -> Tuple:
    """
    Ordering relation over node values.

    Namespaces come before leaves, then names ascend. Leaves sharing a name
    are ordered by key and text so the order never depends on input order.
    """
    if isinstance(value, Namespace):
        return (0, value.name, "", "")
    return (1, value.name, value.key, value.text)


@dataclass
class Node:
    """A mutable tree node owning its children."""

    value: NodeValue
    children: List["Node"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.value.name

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.value, Leaf)

    def add_child(self, child: "Node") -> "Node":
        """Append ``child`` and return it."""
        assert not self.is_leaf, f"Leaf '{self.name}' cannot have children"
        self.children.append(child)
        return child

    def find_namespace(self, name: str) -> Optional["Node"]:
        """Return the first namespace child currently named ``name``."""
        for child in self.children:
            if isinstance(child.value, Namespace) and child.name == name:
                return child
        return None

    def underscore_name(self, sanitizer: NameSanitizer):
        """Rename this node, keeping a leaf's key and text."""
        self.value = replace(self.value, name=sanitizer.underscore(self.name))

    def walk(self) -> Iterator["Node"]:
        """Iterate over this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> List[Leaf]:
        """All leaf values below this node, in tree order."""
        return [node.value for node in self.walk() if node.is_leaf]


class NamespaceTree:
    """Builds, sorts and de-duplicates a tree of localization accessors."""

    def __init__(self, top_level_name: str, sanitizer: NameSanitizer):
        """
        Initialize an empty tree.

        Args:
            top_level_name: Name of the root namespace, used verbatim
            sanitizer: Sanitizer for key segments and collision renaming
        """
        self.sanitizer = sanitizer
        self.root = Node(Namespace(top_level_name))

    def insert(self, key: str, text: str) -> bool:
        """
        Insert one key/text pair.

        Namespaces along the path are shared with earlier keys; the leaf
        itself is always new, even when an equally named leaf exists.

        Returns:
            False when the key has no segments and was skipped
        """
        segments = [segment for segment in key.split(".") if segment]
        if not segments:
            logger.warning("Skipping key without segments: %r", key)
            return False

        *path, leaf_name = [self.sanitizer.sanitize(segment) for segment in segments]

        node = self.root
        for name in path:
            child = node.find_namespace(name)
            if child is None:
                child = node.add_child(Node(Namespace(name)))
            node = child

        node.add_child(Node(Leaf(leaf_name, key, text)))
        return True

    def insert_all(self, entries) -> int:
        """Insert ``Entry`` objects, returning how many were added."""
        return sum(1 for entry in entries if self.insert(entry.key, entry.text))

    def sort(self, node: Optional[Node] = None):
        """Recursively order children by :func:`sort_key`."""
        node = node or self.root
        node.children.sort(key=lambda child: sort_key(child.value))
        for child in node.children:
            self.sort(child)

    def sanitize(self, node: Optional[Node] = None):
        """
        Rename children until no two siblings share a name and no child is
        named like its parent, then do the same one level down.
        """
        node = node or self.root

        modified = True
        while modified:
            modified = False
            seen = Counter()
            for child in node.children:
                for _ in range(seen[child.name]):
                    old_name = child.name
                    child.underscore_name(self.sanitizer)
                    logger.debug("Renamed '%s' to '%s' in '%s'", old_name, child.name, node.name)
                    modified = True
                seen[child.name] += 1
                if child.name == node.name:
                    child.underscore_name(self.sanitizer)
                    logger.debug("Renamed child of '%s' to '%s'", node.name, child.name)
                    modified = True

        for child in node.children:
            self.sanitize(child)

    def finalize(self) -> Node:
        """Run sort and sanitize, then sort again so renamed siblings stay ordered."""
        self.sort()
        self.sanitize()
        self.sort()
        return self.root
