"""Tests for the regeneration lifecycle and undo."""
import pytest

from house_interiors.commands import generate_attic, generate_basement
from house_interiors.io.hierarchy_exporter import scene_to_dict
from house_interiors.models import SceneNode
from house_interiors.processing.regeneration import GenerationState, StructureRegenerator


def populate(root):
    root.add_child(SceneNode("Child"))


class TestStructureRegenerator:

    def test_first_run_commits(self, scene):
        regenerator = StructureRegenerator(scene, "Thing")
        root = regenerator.run(populate)

        assert regenerator.state is GenerationState.COMMITTED
        assert scene.roots == [root]
        assert scene.active is root
        assert scene.undo_stack[-1].label == "Generate Thing"
        assert scene.undo_stack[-1].removed is None

    def test_second_run_replaces_in_place(self, scene):
        scene.add_root(SceneNode("Before"))
        first = StructureRegenerator(scene, "Thing").run(populate)
        scene.add_root(SceneNode("After"))

        second = StructureRegenerator(scene, "Thing").run(populate)

        assert second is not first
        assert [r.name for r in scene.roots] == ["Before", "Thing", "After"]
        assert scene.roots[1] is second
        assert first.parent is None

    def test_failed_build_keeps_previous(self, scene):
        previous = StructureRegenerator(scene, "Thing").run(populate)
        depth = len(scene.undo_stack)

        def broken(root):
            root.add_child(SceneNode("Partial"))
            raise ValueError("boom")

        regenerator = StructureRegenerator(scene, "Thing")
        with pytest.raises(ValueError, match="boom"):
            regenerator.run(broken)

        assert regenerator.state is GenerationState.IDLE
        assert scene.roots == [previous]
        assert len(scene.undo_stack) == depth
        assert previous.find("Partial") is None

    def test_undo_restores_previous(self, scene):
        first = StructureRegenerator(scene, "Thing").run(populate)
        StructureRegenerator(scene, "Thing").run(populate)

        group = scene.undo()
        assert group.removed is first
        assert scene.roots == [first]
        assert scene.active is first

        scene.undo()
        assert scene.roots == []
        assert scene.undo() is None


class TestCommands:

    def test_fixed_seed_is_idempotent(self, scene, config):
        first = scene_to_dict(generate_attic(scene, config))
        second = scene_to_dict(generate_attic(scene, config))

        assert first == second
        assert [r.name for r in scene.roots] == ["Attic"]
        assert scene.node_count() == scene.roots[0].node_count()

    def test_structures_coexist(self, scene, config):
        attic = generate_attic(scene, config)
        basement = generate_basement(scene, config)
        attic_again = generate_attic(scene, config)

        assert scene.roots == [attic_again, basement]
        assert attic.parent is None
        assert [g.label for g in scene.undo_stack] == ["Generate Attic", "Generate Basement", "Generate Attic"]

    def test_undo_after_regeneration(self, scene, config):
        attic = generate_attic(scene, config)
        generate_attic(scene, config)
        scene.undo()
        assert scene.roots == [attic]
