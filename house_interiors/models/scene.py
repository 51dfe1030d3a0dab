"""
Scene graph model for House Interiors Generator.

Provides SceneNode (transform + children + optional mesh) and Scene, the
in-memory stand-in for an editor scene: a list of root nodes, an active
selection and an undo stack of whole generation runs.

Ownership is strictly tree-shaped: a node has at most one parent, owns its
children and its mesh, and never appears twice in the tree.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .geometry import Vector3, ZERO, ONE
from .mesh import MeshData
from ..utils.math_utils import Matrix4, identity_matrix, matrix_multiply, trs_matrix


@dataclass(eq=False)
class SceneNode:
    """
    Transform node in the generated hierarchy.

    Attributes:
        name: Node name (not required to be unique)
        position: Local position relative to the parent
        rotation: Local Euler rotation in degrees (XYZ order)
        scale: Local scale
        mesh: Optional owned mesh
        components: Leaf metadata such as {"collider": "mesh"} or {"light": {...}}
    """
    name: str
    position: Vector3 = ZERO
    rotation: Vector3 = ZERO
    scale: Vector3 = ONE
    mesh: Optional[MeshData] = None
    components: Dict[str, Any] = field(default_factory=dict)
    parent: Optional['SceneNode'] = field(default=None, repr=False)
    children: List['SceneNode'] = field(default_factory=list, repr=False)

    def add_child(self, child: 'SceneNode') -> 'SceneNode':
        """
        Attach child as the last child of this node.

        Raises:
            ValueError: If child already has a parent or is an ancestor of self
        """
        if child.parent is not None:
            raise ValueError(f"Node '{child.name}' already has parent '{child.parent.name}'")

        ancestor: Optional[SceneNode] = self
        while ancestor is not None:
            if ancestor is child:
                raise ValueError(f"Attaching '{child.name}' under '{self.name}' would create a cycle")
            ancestor = ancestor.parent

        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: 'SceneNode') -> None:
        """Detach a direct child (and its whole subtree)."""
        self.children.remove(child)
        child.parent = None

    def find(self, name: str) -> Optional['SceneNode']:
        """Depth-first search for the first node with the given name (self included)."""
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def walk(self) -> Iterator['SceneNode']:
        """Iterate over this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        """Number of nodes in this subtree, self included."""
        return sum(1 for _ in self.walk())

    def path(self) -> str:
        """Slash-joined names from the tree root down to this node."""
        names = []
        node: Optional[SceneNode] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))

    def local_matrix(self) -> Matrix4:
        """Local-to-parent transform."""
        return trs_matrix(self.position, self.rotation, self.scale)

    def world_matrix(self) -> Matrix4:
        """Local-to-world transform (product of all ancestor transforms)."""
        matrix = identity_matrix()
        node: Optional[SceneNode] = self
        while node is not None:
            matrix = matrix_multiply(node.local_matrix(), matrix)
            node = node.parent
        return matrix

    def __repr__(self) -> str:
        mesh = f", mesh={self.mesh!r}" if self.mesh is not None else ""
        return f"SceneNode({self.name!r}, children={len(self.children)}{mesh})"


@dataclass
class UndoGroup:
    """
    One reversible unit: everything a single generation run changed.

    Attributes:
        label: Human readable name ("Generate Attic")
        created: Root node attached by the run
        removed: Previous root detached by the run (None if there was none)
        removed_index: Position the previous root occupied among scene roots
    """
    label: str
    created: SceneNode
    removed: Optional[SceneNode] = None
    removed_index: int = -1


class Scene:
    """
    Minimal editor scene: ordered root nodes, active selection, undo stack.
    """

    def __init__(self):
        self.roots: List[SceneNode] = []
        self.active: Optional[SceneNode] = None
        self.undo_stack: List[UndoGroup] = []

    def add_root(self, node: SceneNode, index: Optional[int] = None) -> SceneNode:
        """Attach a parentless node as a scene root."""
        if node.parent is not None:
            raise ValueError(f"Node '{node.name}' is not a root (parent '{node.parent.name}')")
        if index is None or index < 0 or index > len(self.roots):
            self.roots.append(node)
        else:
            self.roots.insert(index, node)
        return node

    def remove_root(self, node: SceneNode) -> int:
        """
        Detach a root node and its whole subtree.

        Returns:
            Index the root occupied
        """
        index = self.roots.index(node)
        del self.roots[index]
        if self.active is not None and _is_in_subtree(self.active, node):
            self.active = None
        return index

    def find(self, name: str) -> Optional[SceneNode]:
        """Find the first root node with the given name."""
        for root in self.roots:
            if root.name == name:
                return root
        return None

    def push_undo(self, group: UndoGroup) -> None:
        """Record a completed run as one undo step."""
        self.undo_stack.append(group)

    def undo(self) -> Optional[UndoGroup]:
        """
        Revert the most recent run: remove what it created, restore what it
        removed. Returns the reverted group, or None if nothing to undo.
        """
        if not self.undo_stack:
            return None

        group = self.undo_stack.pop()
        if group.created in self.roots:
            self.remove_root(group.created)
        if group.removed is not None:
            self.add_root(group.removed, group.removed_index)
            self.active = group.removed
        return group

    def node_count(self) -> int:
        """Total number of nodes under all roots."""
        return sum(root.node_count() for root in self.roots)


def _is_in_subtree(node: SceneNode, root: SceneNode) -> bool:
    current: Optional[SceneNode] = node
    while current is not None:
        if current is root:
            return True
        current = current.parent
    return False
