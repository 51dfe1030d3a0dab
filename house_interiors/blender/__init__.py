"""
House Interiors Generator - Blender Addon

Adds a sidebar panel that regenerates the attic or basement interior in
the current Blender scene. Each regeneration is a single undo step.

Usage:
    1. Install the house_interiors package as an addon
    2. Open sidebar in 3D View (press N)
    3. Navigate to "Interiors" tab
    4. Click "Generate Attic" or "Generate Basement"
"""

# Check if running inside Blender
_BLENDER_AVAILABLE = False
try:
    import bpy
    _BLENDER_AVAILABLE = True
except ImportError:
    pass


def register():
    """Register addon classes with Blender."""
    if not _BLENDER_AVAILABLE:
        print("House Interiors: Not running in Blender, skipping registration")
        return

    from . import properties
    from . import operators
    from . import panels

    # Properties first (operators and panels read them)
    properties.register()
    operators.register()
    panels.register()


def unregister():
    """Unregister addon classes from Blender."""
    if not _BLENDER_AVAILABLE:
        return

    from . import panels
    from . import operators
    from . import properties

    panels.unregister()
    operators.unregister()
    properties.unregister()
