"""
House Interiors Generator

Procedurally generates attic and basement interiors as hierarchies of
parametric mesh primitives (boxes, planar polygons, trusses, joists, stairs),
driven entirely by dimensional constants.

Can be used as:
- CLI tool: python -m house_interiors.main attic
- Library: house_interiors.commands.COMMANDS["attic"](scene)
- Blender addon: Install house_interiors package in Blender
"""

__version__ = "0.3.0"
__author__ = "House Interiors Team"

# Blender addon metadata (must be at package root for Blender to detect)
bl_info = {
    "name": "House Interiors Generator",
    "author": "House Interiors Team",
    "version": (0, 3, 0),
    "blender": (4, 0, 0),
    "location": "View3D > Sidebar > Interiors",
    "description": "Generate parametric attic and basement interiors",
    "category": "Add Mesh",
}


def register():
    """Register addon with Blender."""
    try:
        from .blender import properties, operators, panels
        properties.register()
        operators.register()
        panels.register()
        print(f"House Interiors Generator v{__version__} registered")
    except ImportError as e:
        print(f"House Interiors: Blender modules not available ({e})")


def unregister():
    """Unregister addon from Blender."""
    try:
        from .blender import panels, operators, properties
        panels.unregister()
        operators.unregister()
        properties.unregister()
        print("House Interiors Generator unregistered")
    except ImportError:
        pass
