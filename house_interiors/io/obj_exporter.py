"""
OBJ mesh exporter for House Interiors Generator.

Exports a generated hierarchy to Wavefront OBJ:
- Vertices are transformed to world space (Y up, as generated)
- One 'g' group per mesh node, named after the node's path
- 'usemtl' per group, with an optional companion .mtl file
- Faces keep their polygon size unless triangulation is requested
"""

import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging

from ..config import OBJ_VERTEX_PRECISION, OBJ_UV_PRECISION
from ..models.material import Material
from ..models.scene import SceneNode
from ..utils.math_utils import transform_point

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from OBJ export."""
    total_vertices: int = 0
    total_uvs: int = 0
    total_faces: int = 0
    total_objects: int = 0
    file_size_bytes: int = 0


def group_name(node: SceneNode) -> str:
    """OBJ group name for a node: its path with '/' replaced by '.'."""
    return node.path().replace("/", ".").replace(" ", "_")


def mesh_nodes(root: SceneNode) -> List[SceneNode]:
    """Nodes under root (root included) that carry a non-empty mesh, pre-order."""
    return [n for n in root.walk() if n.mesh is not None and not n.mesh.is_empty()]


def _fan(face: List[int]) -> Iterable[List[int]]:
    for i in range(1, len(face) - 1):
        yield [face[0], face[i], face[i + 1]]


def export_obj(
    root: SceneNode,
    filepath: str,
    triangulate: bool = False,
    mtl_filename: Optional[str] = None,
    comment: Optional[str] = None
) -> ExportStats:
    """
    Export every mesh under root to a single OBJ file.

    Args:
        root: Root of the hierarchy to export
        filepath: Output file path (.obj)
        triangulate: Fan-triangulate faces on export
        mtl_filename: If given, reference this material library (mtllib)
        comment: Optional comment to include in file header

    Returns:
        ExportStats with export statistics
    """
    stats = ExportStats()
    nodes = mesh_nodes(root)

    vp = OBJ_VERTEX_PRECISION
    up = OBJ_UV_PRECISION

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write("# House Interiors Generator OBJ Export\n")
        f.write(f"# Root: {root.name}\n")
        f.write(f"# Objects: {len(nodes)}\n")
        if comment:
            f.write(f"# {comment}\n")
        if mtl_filename:
            f.write(f"mtllib {mtl_filename}\n")
        f.write("\n")

        # OBJ indices are global and 1-based
        vertex_offset = 1
        uv_offset = 1

        for node in nodes:
            mesh = node.mesh
            matrix = node.world_matrix()

            f.write(f"g {group_name(node)}\n")
            if mesh.material is not None:
                f.write(f"usemtl {mesh.material.name}\n")

            for vertex in mesh.vertices:
                x, y, z = transform_point(matrix, vertex)
                f.write(f"v {x:.{vp}f} {y:.{vp}f} {z:.{vp}f}\n")

            has_uvs = mesh.has_uvs() and len(mesh.uvs) == len(mesh.vertices)
            if has_uvs:
                for u, v in mesh.uvs:
                    f.write(f"vt {u:.{up}f} {v:.{up}f}\n")

            faces = mesh.faces
            if triangulate:
                faces = [tri for face in mesh.faces for tri in _fan(face)]

            for face in faces:
                if has_uvs:
                    face_str = " ".join(f"{i + vertex_offset}/{i + uv_offset}" for i in face)
                else:
                    face_str = " ".join(str(i + vertex_offset) for i in face)
                f.write(f"f {face_str}\n")

            f.write("\n")

            stats.total_vertices += len(mesh.vertices)
            stats.total_faces += len(faces)
            stats.total_objects += 1
            vertex_offset += len(mesh.vertices)
            if has_uvs:
                stats.total_uvs += len(mesh.uvs)
                uv_offset += len(mesh.uvs)

    stats.file_size_bytes = os.path.getsize(filepath)

    logger.info(
        f"Exported OBJ: {stats.total_vertices} vertices, "
        f"{stats.total_uvs} UVs, {stats.total_faces} faces, "
        f"{stats.total_objects} objects"
    )
    return stats


def collect_materials(root: SceneNode) -> Dict[str, Material]:
    """Distinct materials used under root, by name, in first-use order."""
    materials: Dict[str, Material] = {}
    for node in mesh_nodes(root):
        material = node.mesh.material
        if material is not None and material.name not in materials:
            materials[material.name] = material
    return materials


def export_mtl(materials: Iterable[Material], filepath: str) -> int:
    """
    Write a Wavefront material library.

    Colors map to Kd/d; glossiness maps to the Ns exponent (0..1000).

    Returns:
        Number of materials written
    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    count = 0
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write("# House Interiors Generator MTL Export\n")
        for material in materials:
            r, g, b, a = material.color
            f.write(f"\nnewmtl {material.name}\n")
            f.write(f"Kd {r:.4f} {g:.4f} {b:.4f}\n")
            f.write(f"d {a:.4f}\n")
            f.write(f"Ns {material.glossiness * 1000.0:.1f}\n")
            count += 1

    logger.debug(f"Wrote {count} materials to {filepath}")
    return count


def export_obj_with_materials(root: SceneNode, output_dir: str, basename: Optional[str] = None) -> str:
    """
    Export root to "{basename}.obj" plus "{basename}.mtl" in output_dir.

    Args:
        root: Root of the hierarchy to export
        output_dir: Output directory path
        basename: File base name (default: root name)

    Returns:
        Path to the OBJ file
    """
    basename = basename or root.name
    obj_path = os.path.join(output_dir, f"{basename}.obj")
    mtl_name = f"{basename}.mtl"

    export_mtl(collect_materials(root).values(), os.path.join(output_dir, mtl_name))
    export_obj(root, obj_path, mtl_filename=mtl_name, comment=f"{root.name} interior")
    return obj_path


def validate_obj_file(filepath: str) -> List[str]:
    """
    Validate an OBJ file for common issues.

    Args:
        filepath: Path to OBJ file

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not os.path.exists(filepath):
        return [f"File does not exist: {filepath}"]

    vertex_count = 0
    uv_count = 0
    face_count = 0

    with open(filepath, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, 1):
            parts = line.split()
            if not parts or parts[0].startswith('#'):
                continue

            if parts[0] == 'v':
                vertex_count += 1
                if len(parts) < 4:
                    errors.append(f"Line {line_num}: Vertex has < 3 coordinates")

            elif parts[0] == 'vt':
                uv_count += 1

            elif parts[0] == 'f':
                face_count += 1
                if len(parts) < 4:
                    errors.append(f"Line {line_num}: Face has < 3 vertices")

                for part in parts[1:]:
                    refs = part.split('/')
                    try:
                        v_idx = int(refs[0])
                        vt_idx = int(refs[1]) if len(refs) > 1 and refs[1] else None
                    except ValueError:
                        errors.append(f"Line {line_num}: Invalid index '{part}'")
                        continue

                    if not 1 <= v_idx <= vertex_count:
                        errors.append(f"Line {line_num}: Vertex index {v_idx} out of range")
                    if vt_idx is not None and not 1 <= vt_idx <= uv_count:
                        errors.append(f"Line {line_num}: UV index {vt_idx} out of range")

    if vertex_count == 0:
        errors.append("File contains no vertices")

    if face_count == 0:
        errors.append("File contains no faces")

    return errors
