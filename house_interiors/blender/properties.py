"""
House Interiors Generator - Blender Properties

PropertyGroup mapping GeneratorConfig fields to the sidebar panel.
"""

import bpy
from bpy.props import (
    StringProperty,
    EnumProperty,
    IntProperty,
)
from bpy.types import PropertyGroup

from ..config import DEFAULT_STAIR_STRATEGY, PROP_COUNT


class HouseInteriorsProperties(PropertyGroup):
    """
    Properties for the House Interiors addon.

    These map to GeneratorConfig fields and are displayed in the UI panel.
    """

    # --- Generation ---

    seed: IntProperty(
        name="Seed",
        description="Random seed for attic prop scattering",
        default=12345,
        min=0,
    )

    prop_count: IntProperty(
        name="Props",
        description="Number of boxes scattered across the attic deck",
        default=PROP_COUNT,
        min=0,
        max=200,
    )

    stair_strategy: EnumProperty(
        name="Stair Fill",
        description="How the space under each basement stair tread is filled",
        items=[
            ('extrude', "Extrude", "Extrude each tread's underside down to the ground"),
            ('riser_box', "Riser Box", "Add a riser box under each tread"),
        ],
        default=DEFAULT_STAIR_STRATEGY,
    )

    materials_path: StringProperty(
        name="Materials",
        description="Optional JSON material library (built-in materials if empty)",
        subtype='FILE_PATH',
        default="",
    )

    # --- Statistics (read-only, updated after generation) ---

    last_node_count: IntProperty(
        name="Last Node Count",
        description="Number of nodes in the last generated structure",
        default=0,
    )

    last_time_ms: IntProperty(
        name="Last Generation Time",
        description="Processing time of last generation in milliseconds",
        default=0,
    )

    last_structure: StringProperty(
        name="Last Structure",
        description="Structure generated last",
        default="",
    )


# Registration
_classes = [
    HouseInteriorsProperties,
]


def register():
    """Register property classes."""
    for cls in _classes:
        bpy.utils.register_class(cls)

    bpy.types.Scene.house_interiors = bpy.props.PointerProperty(
        type=HouseInteriorsProperties
    )


def unregister():
    """Unregister property classes."""
    del bpy.types.Scene.house_interiors

    for cls in reversed(_classes):
        bpy.utils.unregister_class(cls)
