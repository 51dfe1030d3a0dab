"""
Hierarchy exporter for House Interiors Generator.

Writes a generated tree as JSON with everything needed to rebuild it:
node names, local transforms, parent/child order, components, and mesh
vertices, faces, UVs and material names. Materials are stored once in a
table keyed by name.

load_hierarchy reads the file back into SceneNode objects; a dump of the
loaded tree is identical to a dump of the original.

File layout:
    {
        "format": "house-interiors-hierarchy",
        "version": 1,
        "materials": {"White": {"color": [...], "metallic": 0.0, "glossiness": 0.2}},
        "root": {"name": ..., "position": [...], "rotation": [...], "scale": [...],
                 "components": {...}, "mesh": {...} | null, "children": [...]}
    }
"""

import json
import os
from typing import Any, Dict, Optional
import logging

from ..models.geometry import Vector3
from ..models.material import Material
from ..models.mesh import MeshData
from ..models.scene import SceneNode
from .material_library import MaterialLibrary

logger = logging.getLogger(__name__)

HIERARCHY_FORMAT = "house-interiors-hierarchy"
HIERARCHY_VERSION = 1


def _material_to_dict(material: Material) -> Dict[str, Any]:
    return {
        "color": list(material.color),
        "metallic": material.metallic,
        "glossiness": material.glossiness,
    }


def _node_to_dict(node: SceneNode, materials: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    mesh_dict = None
    if node.mesh is not None:
        mesh = node.mesh
        material_name = None
        if mesh.material is not None:
            material_name = mesh.material.name
            materials.setdefault(material_name, _material_to_dict(mesh.material))

        mesh_dict = {
            "vertices": [list(v) for v in mesh.vertices],
            "faces": [list(face) for face in mesh.faces],
            "uvs": [list(uv) for uv in mesh.uvs],
            "material": material_name,
        }

    return {
        "name": node.name,
        "position": list(node.position),
        "rotation": list(node.rotation),
        "scale": list(node.scale),
        "components": node.components,
        "mesh": mesh_dict,
        "children": [_node_to_dict(child, materials) for child in node.children],
    }


def scene_to_dict(root: SceneNode) -> Dict[str, Any]:
    """
    Serialize a tree to plain JSON-compatible data.

    Args:
        root: Root of the tree

    Returns:
        Dictionary in the hierarchy file layout
    """
    materials: Dict[str, Dict[str, Any]] = {}
    root_dict = _node_to_dict(root, materials)
    return {
        "format": HIERARCHY_FORMAT,
        "version": HIERARCHY_VERSION,
        "materials": materials,
        "root": root_dict,
    }


def export_hierarchy(root: SceneNode, filepath: str, indent: Optional[int] = None) -> int:
    """
    Write a tree to a JSON hierarchy file.

    Args:
        root: Root of the tree
        filepath: Output file path (.json)
        indent: Optional JSON indentation

    Returns:
        Number of nodes written
    """
    data = scene_to_dict(root)

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent)

    count = root.node_count()
    logger.info(f"Exported hierarchy: {count} nodes, {len(data['materials'])} materials to {filepath}")
    return count


def _vector(values, field_name: str, node_name: str) -> Vector3:
    if not isinstance(values, list) or len(values) != 3:
        raise ValueError(f"Node '{node_name}': '{field_name}' must be a list of 3 numbers")
    return Vector3(float(values[0]), float(values[1]), float(values[2]))


def _node_from_dict(data: Dict[str, Any], materials: Dict[str, Material]) -> SceneNode:
    if "name" not in data:
        raise ValueError("Hierarchy node has no name")
    name = data["name"]

    mesh = None
    mesh_data = data.get("mesh")
    if mesh_data is not None:
        material_name = mesh_data.get("material")
        mesh = MeshData(
            vertices=[tuple(v) for v in mesh_data.get("vertices", [])],
            uvs=[tuple(uv) for uv in mesh_data.get("uvs", [])],
            material=materials.get(material_name) if material_name is not None else None,
        )
        for face in mesh_data.get("faces", []):
            mesh.add_face(list(face))

    node = SceneNode(
        name=name,
        position=_vector(data.get("position"), "position", name),
        rotation=_vector(data.get("rotation"), "rotation", name),
        scale=_vector(data.get("scale"), "scale", name),
        mesh=mesh,
        components=dict(data.get("components") or {}),
    )

    for child_data in data.get("children", []):
        node.add_child(_node_from_dict(child_data, materials))

    return node


def dict_to_scene(data: Dict[str, Any], library: Optional[MaterialLibrary] = None) -> SceneNode:
    """
    Rebuild a tree from hierarchy data.

    Args:
        data: Dictionary in the hierarchy file layout
        library: If given, material names are resolved through it (with
            fallback); otherwise materials are rebuilt from the file's table

    Returns:
        Root node of the rebuilt (detached) tree

    Raises:
        ValueError: If the data is not a valid hierarchy
    """
    if not isinstance(data, dict) or data.get("format") != HIERARCHY_FORMAT:
        raise ValueError("Not a house-interiors hierarchy")
    if data.get("version") != HIERARCHY_VERSION:
        raise ValueError(f"Unsupported hierarchy version {data.get('version')}")

    materials: Dict[str, Material] = {}
    for name, entry in (data.get("materials") or {}).items():
        if library is not None:
            materials[name] = library.resolve(name)
        else:
            materials[name] = Material(
                name=name,
                color=tuple(entry.get("color", (1.0, 1.0, 1.0, 1.0))),
                metallic=entry.get("metallic", 0.0),
                glossiness=entry.get("glossiness", 0.2),
            )

    if "root" not in data:
        raise ValueError("Hierarchy has no root node")
    return _node_from_dict(data["root"], materials)


def load_hierarchy(filepath: str, library: Optional[MaterialLibrary] = None) -> SceneNode:
    """
    Load a tree from a JSON hierarchy file.

    Args:
        filepath: Path to hierarchy JSON
        library: Optional material library for resolving material names

    Returns:
        Root node of the loaded tree
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    root = dict_to_scene(data, library)
    logger.info(f"Loaded hierarchy '{root.name}': {root.node_count()} nodes from {filepath}")
    return root
