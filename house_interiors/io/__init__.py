"""
Input/Output modules for House Interiors Generator.
"""

from .material_library import (
    BUILTIN_MATERIALS,
    MaterialLibrary,
    load_material_library,
)
from .obj_exporter import (
    ExportStats,
    export_obj,
    export_mtl,
    export_obj_with_materials,
    validate_obj_file,
)
from .hierarchy_exporter import (
    scene_to_dict,
    dict_to_scene,
    export_hierarchy,
    load_hierarchy,
)

__all__ = [
    # Materials
    'BUILTIN_MATERIALS',
    'MaterialLibrary',
    'load_material_library',
    # OBJ export
    'ExportStats',
    'export_obj',
    'export_mtl',
    'export_obj_with_materials',
    'validate_obj_file',
    # Hierarchy export
    'scene_to_dict',
    'dict_to_scene',
    'export_hierarchy',
    'load_hierarchy',
]
