"""
House Interiors Generator - Blender Operators

One operator per structure plus a clear operator. Generation runs on an
in-memory Scene through the same commands as the CLI, then the tree is
converted to Blender objects. Blender's own undo system records each
operator call as one step.
"""

import bpy
from bpy.types import Operator
import time


def _config_from_props(props):
    from ..config import GeneratorConfig

    return GeneratorConfig(
        seed=props.seed,
        stair_strategy=props.stair_strategy,
        prop_count=props.prop_count,
        materials_path=bpy.path.abspath(props.materials_path) if props.materials_path else None,
    )


class _GenerateStructure:
    """Shared execute for the generate operators."""

    structure = ""

    def execute(self, context):
        try:
            from ..commands import COMMANDS
            from ..models.scene import Scene
            from .scene_converter import scene_to_blender
        except ImportError as e:
            self.report({'ERROR'}, f"Failed to import generator modules: {e}")
            return {'CANCELLED'}

        props = context.scene.house_interiors
        start_time = time.time()

        try:
            config = _config_from_props(props)
            root = COMMANDS[self.structure](Scene(), config)
            root_obj = scene_to_blender(root)
        except (OSError, ValueError) as e:
            self.report({'ERROR'}, f"Generation failed: {e}")
            return {'CANCELLED'}

        elapsed_ms = int((time.time() - start_time) * 1000)
        props.last_node_count = root.node_count()
        props.last_time_ms = elapsed_ms
        props.last_structure = self.structure

        context.view_layer.objects.active = root_obj
        self.report({'INFO'}, f"Generated {root.name}: {root.node_count()} nodes in {elapsed_ms}ms")
        return {'FINISHED'}


class HOUSE_OT_generate_attic(_GenerateStructure, Operator):
    """Regenerate the attic interior"""

    bl_idname = "house.generate_attic"
    bl_label = "Generate Attic"
    bl_description = "Replace the attic with a freshly generated one"
    bl_options = {'REGISTER', 'UNDO'}

    structure = "attic"


class HOUSE_OT_generate_basement(_GenerateStructure, Operator):
    """Regenerate the basement interior"""

    bl_idname = "house.generate_basement"
    bl_label = "Generate Basement"
    bl_description = "Replace the basement with a freshly generated one"
    bl_options = {'REGISTER', 'UNDO'}

    structure = "basement"


class HOUSE_OT_clear(Operator):
    """Remove all generated structures from the scene"""

    bl_idname = "house.clear"
    bl_label = "Clear Interiors"
    bl_description = "Remove the generated attic and basement"
    bl_options = {'REGISTER', 'UNDO'}

    @classmethod
    def poll(cls, context):
        from .scene_converter import ROOT_MARKER

        return any(ROOT_MARKER in obj for obj in bpy.data.objects)

    def execute(self, context):
        from .scene_converter import ROOT_MARKER, remove_object_tree

        roots = [obj for obj in bpy.data.objects if ROOT_MARKER in obj]
        count = 0
        for obj in roots:
            count += remove_object_tree(obj)

        props = context.scene.house_interiors
        props.last_node_count = 0
        props.last_time_ms = 0
        props.last_structure = ""

        self.report({'INFO'}, f"Removed {count} objects")
        return {'FINISHED'}


# Registration
_classes = [
    HOUSE_OT_generate_attic,
    HOUSE_OT_generate_basement,
    HOUSE_OT_clear,
]


def register():
    """Register operator classes."""
    for cls in _classes:
        bpy.utils.register_class(cls)


def unregister():
    """Unregister operator classes."""
    for cls in reversed(_classes):
        bpy.utils.unregister_class(cls)
