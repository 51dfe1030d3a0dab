"""
House Interiors Generator - Scene Converter

Converts a generated SceneNode tree into Blender objects: one object per
node, parented the same way, with meshes, per-loop UVs, materials, point
lights and collider tags. The generator is Y-up; the root object carries
the axis conversion to Blender's Z-up so every child keeps its local
transform unchanged.
"""

import math
from typing import Dict, List, Optional, Tuple

import bpy
from bpy_extras.io_utils import axis_conversion
from mathutils import Matrix

from ..models.material import Material
from ..models.scene import SceneNode

COLLECTION_NAME = "House Interiors"
ROOT_MARKER = "house_interiors_root"

# Blender watts per unit of generator light intensity
LIGHT_POWER_SCALE = 100.0


def get_collection(name: str = COLLECTION_NAME) -> bpy.types.Collection:
    """Create or get the collection that holds generated structures."""
    if name in bpy.data.collections:
        return bpy.data.collections[name]

    collection = bpy.data.collections.new(name)
    bpy.context.scene.collection.children.link(collection)
    return collection


def _blender_material(material: Material, cache: Dict[str, bpy.types.Material]) -> bpy.types.Material:
    if material.name in cache:
        return cache[material.name]

    bl_material = bpy.data.materials.get(material.name)
    if bl_material is None:
        bl_material = bpy.data.materials.new(material.name)
        bl_material.diffuse_color = material.color
        bl_material.metallic = material.metallic
        bl_material.roughness = 1.0 - material.glossiness

    cache[material.name] = bl_material
    return bl_material


def _mesh_object(node: SceneNode, cache: Dict[str, bpy.types.Material]) -> bpy.types.Object:
    mesh_data = node.mesh
    mesh = bpy.data.meshes.new(node.name)

    # Faces are already 0-based
    mesh.from_pydata(list(mesh_data.vertices), [], [list(face) for face in mesh_data.faces])

    if mesh_data.has_uvs() and len(mesh_data.uvs) == len(mesh_data.vertices):
        # UVs are per-vertex here, Blender stores them per-loop
        uv_layer = mesh.uv_layers.new(name="UVMap")
        for loop in mesh.loops:
            uv_layer.data[loop.index].uv = mesh_data.uvs[loop.vertex_index]

    if mesh_data.material is not None:
        mesh.materials.append(_blender_material(mesh_data.material, cache))

    mesh.update()
    return bpy.data.objects.new(node.name, mesh)


def _light_object(node: SceneNode) -> bpy.types.Object:
    settings = node.components["light"]
    light = bpy.data.lights.new(node.name, type='POINT')
    light.color = tuple(settings.get("color", (1.0, 1.0, 1.0)))
    light.energy = settings.get("intensity", 1.0) * LIGHT_POWER_SCALE
    light.use_shadow = settings.get("shadows", "none") != "none"
    if hasattr(light, "use_custom_distance"):
        light.use_custom_distance = True
        light.cutoff_distance = settings.get("range", 25.0)
    return bpy.data.objects.new(node.name, light)


def _node_object(node: SceneNode, cache: Dict[str, bpy.types.Material]) -> bpy.types.Object:
    if node.mesh is not None and not node.mesh.is_empty():
        obj = _mesh_object(node, cache)
    elif "light" in node.components:
        obj = _light_object(node)
    else:
        obj = bpy.data.objects.new(node.name, None)
        obj.empty_display_size = 0.5

    if "collider" in node.components:
        obj["collider"] = node.components["collider"]
    return obj


def _convert(
    node: SceneNode,
    parent: Optional[bpy.types.Object],
    collection: bpy.types.Collection,
    cache: Dict[str, bpy.types.Material],
    created: List[Tuple[bpy.types.Object, str]]
) -> bpy.types.Object:
    obj = _node_object(node, cache)
    collection.objects.link(obj)
    created.append((obj, node.name))

    obj.parent = parent
    obj.rotation_mode = 'XYZ'
    obj.location = tuple(node.position)
    obj.rotation_euler = tuple(math.radians(a) for a in node.rotation)
    obj.scale = tuple(node.scale)

    for child in node.children:
        _convert(child, obj, collection, cache, created)
    return obj


def find_root_object(name: str) -> Optional[bpy.types.Object]:
    """Find a previously generated root object by node name."""
    for obj in bpy.data.objects:
        if obj.get(ROOT_MARKER) == name:
            return obj
    return None


def remove_object_tree(obj: bpy.types.Object) -> int:
    """
    Delete an object and all its descendants.

    Returns:
        Number of objects removed
    """
    objects = [obj] + list(obj.children_recursive)
    for child in reversed(objects):
        bpy.data.objects.remove(child, do_unlink=True)
    return len(objects)


def scene_to_blender(root: SceneNode, collection_name: str = COLLECTION_NAME) -> bpy.types.Object:
    """
    Build Blender objects for a generated tree, replacing any earlier tree
    with the same root name.

    The new objects are created before the old ones are deleted, so a
    failure while converting leaves the previous structure in place.

    Args:
        root: Root of the generated tree
        collection_name: Target collection

    Returns:
        The new root object
    """
    collection = get_collection(collection_name)
    previous = find_root_object(root.name)

    created: List[Tuple[bpy.types.Object, str]] = []
    root_obj = _convert(root, None, collection, {}, created)
    root_obj[ROOT_MARKER] = root.name

    # Y-up to Z-up on the root only
    conversion = axis_conversion(from_forward='-Z', from_up='Y').to_4x4()
    root_obj.matrix_world = conversion @ Matrix(root.local_matrix())

    if previous is not None:
        remove_object_tree(previous)

    # Blender suffixes clashing names (".001"); restore them once the old tree is gone
    for obj, name in created:
        if obj.name != name:
            obj.name = name

    return root_obj
