"""
Regeneration lifecycle for House Interiors Generator.

A generated structure lives under one named root in the scene. Running a
generator replaces that root as a single undoable step:

    IDLE -> BUILDING -> DESTROYING_PREVIOUS -> COMMITTED

The new tree is staged on a detached root first. Only when the build
returns does the previous root get detached and the new one attached
(commit-then-delete). If the build raises, the scene is left exactly as it
was and the exception propagates.
"""

from enum import Enum
from typing import Callable, Optional
import logging

from ..models.scene import Scene, SceneNode, UndoGroup

logger = logging.getLogger(__name__)

BuildFunction = Callable[[SceneNode], object]


class GenerationState(Enum):
    """Lifecycle state of a StructureRegenerator."""
    IDLE = "idle"
    BUILDING = "building"
    DESTROYING_PREVIOUS = "destroying_previous"
    COMMITTED = "committed"


class StructureRegenerator:
    """
    Replaces one named root in a scene with a freshly built tree.
    """

    def __init__(self, scene: Scene, root_name: str, undo_label: Optional[str] = None):
        """
        Initialize regenerator.

        Args:
            scene: Scene to modify
            root_name: Name of the structure's root node
            undo_label: Label of the undo group (default "Generate {root_name}")
        """
        self.scene = scene
        self.root_name = root_name
        self.undo_label = undo_label or f"Generate {root_name}"
        self.state = GenerationState.IDLE

    def run(self, build: BuildFunction) -> SceneNode:
        """
        Build a new structure and swap it in for the previous one.

        Args:
            build: Called with the staged, detached root; populates it

        Returns:
            The new root, attached to the scene and active

        Raises:
            Whatever build raises; the scene is unchanged in that case
        """
        root = SceneNode(name=self.root_name)

        self.state = GenerationState.BUILDING
        try:
            build(root)
        except Exception:
            self.state = GenerationState.IDLE
            logger.error(f"Building '{self.root_name}' failed; previous structure kept")
            raise

        self.state = GenerationState.DESTROYING_PREVIOUS
        previous = self.scene.find(self.root_name)
        previous_index = -1
        if previous is not None:
            previous_index = self.scene.remove_root(previous)
            logger.debug(f"Removed previous '{self.root_name}' ({previous.node_count()} nodes)")

        self.scene.add_root(root, previous_index if previous is not None else None)
        self.scene.push_undo(UndoGroup(
            label=self.undo_label,
            created=root,
            removed=previous,
            removed_index=previous_index,
        ))
        self.scene.active = root
        self.state = GenerationState.COMMITTED

        logger.info(f"{self.undo_label}: {root.node_count()} nodes")
        return root
