"""
House Interiors Generator - Blender UI Panels

Sidebar panel located in View3D > Sidebar > Interiors tab.
"""

import bpy
from bpy.types import Panel


class HOUSE_PT_main_panel(Panel):
    """Main panel for House Interiors Generator"""

    bl_label = "House Interiors"
    bl_idname = "HOUSE_PT_main_panel"
    bl_space_type = 'VIEW_3D'
    bl_region_type = 'UI'
    bl_category = "Interiors"

    def draw(self, context):
        layout = self.layout
        props = context.scene.house_interiors

        # --- Attic ---
        box = layout.box()
        box.label(text="Attic", icon='HOME')
        col = box.column(align=True)
        col.prop(props, "seed")
        col.prop(props, "prop_count")
        row = box.row()
        row.scale_y = 1.5
        row.operator("house.generate_attic", icon='MESH_CUBE')

        # --- Basement ---
        box = layout.box()
        box.label(text="Basement", icon='MOD_BUILD')
        box.prop(props, "stair_strategy", text="")
        row = box.row()
        row.scale_y = 1.5
        row.operator("house.generate_basement", icon='MESH_CUBE')

        # --- Materials ---
        box = layout.box()
        box.label(text="Materials", icon='MATERIAL')
        box.prop(props, "materials_path", text="")

        layout.separator()
        layout.operator("house.clear", icon='TRASH')

        # --- Statistics (after generation) ---
        if props.last_node_count > 0:
            box = layout.box()
            box.label(text="Last Generation", icon='INFO')
            col = box.column(align=True)
            col.label(text=f"Structure: {props.last_structure}")
            col.label(text=f"Nodes: {props.last_node_count}")
            col.label(text=f"Time: {props.last_time_ms}ms")


# Registration
_classes = [
    HOUSE_PT_main_panel,
]


def register():
    """Register panel classes."""
    for cls in _classes:
        bpy.utils.register_class(cls)


def unregister():
    """Unregister panel classes."""
    for cls in reversed(_classes):
        bpy.utils.unregister_class(cls)
