"""
Primitive mesh factory for House Interiors Generator.

Stateless helpers that create one scene node per call under an explicit
parent: axis-aligned boxes, planar polygons (fan-triangulated) and
transform-only empties. Also hosts the two small mesh operations the stair
builder needs (face deletion and extrusion to a plane).

Every node is fully built here and never modified after it is returned,
apart from the caller attaching leaf components (colliders, lights).
"""

from typing import List, Optional, Sequence, Tuple
import logging

from ..config import LIGHT_TYPE, LIGHT_RANGE, LIGHT_COLOR, LIGHT_INTENSITY, LIGHT_SHADOWS
from ..models.geometry import Vector3, ZERO, ONE
from ..models.material import Material
from ..models.mesh import MeshData
from ..models.scene import SceneNode

logger = logging.getLogger(__name__)


# Unit cube corners: bottom ring (y=-0.5) then top ring (y=+0.5)
_CUBE_VERTICES: Tuple[Tuple[float, float, float], ...] = (
    (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5),
    (0.5, -0.5, 0.5),
    (-0.5, -0.5, 0.5),
    (-0.5, 0.5, -0.5),
    (0.5, 0.5, -0.5),
    (0.5, 0.5, 0.5),
    (-0.5, 0.5, 0.5),
)

# Quads, CCW seen from outside (outward normals)
_CUBE_FACES: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),  # bottom -Y
    (4, 7, 6, 5),  # top +Y
    (0, 4, 5, 1),  # front -Z
    (3, 2, 6, 7),  # back +Z
    (0, 3, 7, 4),  # left -X
    (1, 5, 6, 2),  # right +X
)


def make_empty(
    parent: Optional[SceneNode],
    name: str,
    position: Vector3 = ZERO
) -> SceneNode:
    """
    Create a transform-only node (no mesh).

    Args:
        parent: Parent node, or None for a detached node
        name: Node name
        position: Local position

    Returns:
        The new node
    """
    node = SceneNode(name=name, position=position)
    if parent is not None:
        parent.add_child(node)
    return node


def make_box(
    parent: SceneNode,
    name: str,
    size: Vector3,
    center: Vector3,
    material: Material,
    rotation: Optional[Vector3] = None,
    bake_size: bool = False
) -> SceneNode:
    """
    Create an axis-aligned box node.

    The mesh is a unit cube (8 vertices, 6 quads) centered on the node
    origin. By default the node's scale carries the size; with bake_size
    the size is written into the vertex positions and the scale stays 1.

    Args:
        parent: Parent node
        name: Node name
        size: Box extents (x, y, z)
        center: Box center in the parent's local frame
        material: Shared material reference
        rotation: Optional Euler rotation in degrees
        bake_size: Bake size into vertices instead of node scale

    Returns:
        The new box node
    """
    if bake_size:
        vertices = [(x * size.x, y * size.y, z * size.z) for x, y, z in _CUBE_VERTICES]
        scale = ONE
    else:
        vertices = list(_CUBE_VERTICES)
        scale = size

    mesh = MeshData(
        vertices=vertices,
        faces=[list(face) for face in _CUBE_FACES],
        material=material,
    )

    node = SceneNode(
        name=name,
        position=center,
        rotation=rotation if rotation is not None else ZERO,
        scale=scale,
        mesh=mesh,
    )
    parent.add_child(node)
    return node


def make_polygon(
    parent: SceneNode,
    name: str,
    points: Sequence[Vector3],
    material: Material
) -> Optional[SceneNode]:
    """
    Create a planar polygon node from an ordered boundary.

    The vertex list is exactly the input points in order; faces are the
    triangle fan (0, i, i+1). Winding follows the input order, so callers
    pick the facing side by the order they pass points in.

    Args:
        parent: Parent node
        name: Node name
        points: Boundary points (>= 3) in the parent's local frame
        material: Shared material reference

    Returns:
        The new node, or None if fewer than 3 points were given
    """
    if points is None or len(points) < 3:
        count = 0 if points is None else len(points)
        logger.debug(f"Skipping polygon '{name}': {count} points (need at least 3)")
        return None

    vertices = [(p.x, p.y, p.z) for p in points]
    faces = [[0, i, i + 1] for i in range(1, len(vertices) - 1)]

    mesh = MeshData(
        vertices=vertices,
        faces=faces,
        uvs=planar_uvs(vertices),
        material=material,
    )

    node = SceneNode(name=name, mesh=mesh)
    parent.add_child(node)
    return node


def add_collider(node: SceneNode, kind: str = "mesh") -> SceneNode:
    """Attach a static collider marker to a node."""
    node.components["collider"] = kind
    return node


def add_light(
    node: SceneNode,
    light_type: str = LIGHT_TYPE,
    light_range: float = LIGHT_RANGE,
    color: Tuple[float, float, float] = LIGHT_COLOR,
    intensity: float = LIGHT_INTENSITY,
    shadows: str = LIGHT_SHADOWS
) -> SceneNode:
    """
    Attach light metadata to a node.

    The node stays a placeholder; the light itself is created by whatever
    consumes the scene (the Blender add-on, an engine importer).
    """
    node.components["light"] = {
        "type": light_type,
        "range": light_range,
        "color": list(color),
        "intensity": intensity,
        "shadows": shadows,
    }
    return node


def planar_uvs(vertices: Sequence[Tuple[float, float, float]]) -> List[Tuple[float, float]]:
    """
    Project vertices onto the plane of the dominant normal axis.

    Face mostly points up/down -> (x, z); left/right -> (z, y);
    front/back -> (x, y).
    """
    nx = ny = nz = 0.0
    n = len(vertices)
    for i in range(n):
        x0, y0, z0 = vertices[i]
        x1, y1, z1 = vertices[(i + 1) % n]
        nx += (y0 - y1) * (z0 + z1)
        ny += (z0 - z1) * (x0 + x1)
        nz += (x0 - x1) * (y0 + y1)

    ax, ay, az = abs(nx), abs(ny), abs(nz)

    if ay >= ax and ay >= az:
        return [(x, z) for x, _, z in vertices]
    elif ax >= az:
        return [(z, y) for _, y, z in vertices]
    else:
        return [(x, y) for x, y, _ in vertices]


def delete_faces_facing(
    mesh: MeshData,
    direction: Vector3,
    threshold: float = 0.99
) -> List[List[int]]:
    """
    Delete every face whose normal points along direction.

    Args:
        mesh: Mesh to modify
        direction: Unit direction to test against
        threshold: Minimum dot product between face normal and direction

    Returns:
        Removed faces (vertex index lists, original winding)
    """
    removed = []
    for i in range(len(mesh.faces) - 1, -1, -1):
        nx, ny, nz = mesh.face_normal(i)
        if nx * direction.x + ny * direction.y + nz * direction.z > threshold:
            removed.append(mesh.remove_face(i))

    removed.reverse()
    return removed


def extrude_boundary_to_plane(mesh: MeshData, loop: Sequence[int], plane_y: float) -> int:
    """
    Extrude an open boundary loop straight down (or up) to a horizontal plane.

    The loop is the index list of a deleted face, in that face's original
    winding. New vertices are created at plane_y under each loop vertex,
    side quads join the loop to them, and a cap closes the new boundary
    with the deleted face's orientation.

    Args:
        mesh: Mesh to modify
        loop: Boundary vertex indices (>= 3)
        plane_y: Target elevation in the mesh's local frame

    Returns:
        Number of faces added
    """
    if len(loop) < 3:
        return 0

    projected = []
    for idx in loop:
        x, _, z = mesh.vertices[idx]
        projected.append(mesh.add_vertex(x, plane_y, z))

    added = 0
    n = len(loop)
    for i in range(n):
        j = (i + 1) % n
        if mesh.add_face([loop[i], loop[j], projected[j], projected[i]]):
            added += 1

    if mesh.add_face(projected):
        added += 1

    return added
