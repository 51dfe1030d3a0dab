"""
Mesh data model for House Interiors Generator.

Provides MeshData class for the geometry owned by a scene node.

Note on indexing:
    - Faces are stored with 0-based indices into the mesh's own vertex list
    - Each face is an ordered list of >= 3 indices, fan-triangulated from
      index 0 when rendered or exported
    - UVs, when present, are per-vertex (parallel to vertices)
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional
import logging

from .material import Material

logger = logging.getLogger(__name__)


@dataclass
class MeshData:
    """
    Mesh owned by a single scene node.

    Attributes:
        vertices: List of (x, y, z) vertex positions in the node's local frame
        faces: List of faces, each a list of 0-based vertex indices
        uvs: Optional per-vertex (u, v) texture coordinates
        material: Shared material reference (not owned by the mesh)
    """
    vertices: List[Tuple[float, float, float]] = field(default_factory=list)
    faces: List[List[int]] = field(default_factory=list)
    uvs: List[Tuple[float, float]] = field(default_factory=list)
    material: Optional[Material] = None

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.vertices)

    def face_count(self) -> int:
        """Get number of faces."""
        return len(self.faces)

    def triangle_count(self) -> int:
        """Get number of triangles after fan triangulation."""
        return sum(len(face) - 2 for face in self.faces)

    def has_uvs(self) -> bool:
        """Check if mesh has UV coordinates."""
        return len(self.uvs) > 0

    def add_vertex(self, x: float, y: float, z: float) -> int:
        """
        Add a vertex and return its 0-based index.

        Args:
            x, y, z: Vertex coordinates

        Returns:
            0-based index of the new vertex
        """
        self.vertices.append((x, y, z))
        return len(self.vertices) - 1

    def add_face(self, indices: List[int]) -> bool:
        """
        Add a face with given vertex indices (0-based).

        Faces with fewer than 3 indices, or with an index outside the
        vertex list, are skipped.

        Args:
            indices: List of vertex indices

        Returns:
            True if the face was added
        """
        if len(indices) < 3:
            logger.debug(f"Skipping face with {len(indices)} indices")
            return False

        max_idx = len(self.vertices)
        if any(idx < 0 or idx >= max_idx for idx in indices):
            logger.debug(f"Skipping face {indices}: index out of range (vertices={max_idx})")
            return False

        self.faces.append(list(indices))
        return True

    def remove_face(self, index: int) -> List[int]:
        """
        Remove a face and return its index list.

        Vertices are kept; they may still be shared by other faces.
        """
        return self.faces.pop(index)

    def face_normal(self, index: int) -> Tuple[float, float, float]:
        """
        Compute the unit normal of a face using Newell's method.

        Returns (0, 0, 0) for degenerate faces.
        """
        face = self.faces[index]
        nx = ny = nz = 0.0
        n = len(face)
        for i in range(n):
            x0, y0, z0 = self.vertices[face[i]]
            x1, y1, z1 = self.vertices[face[(i + 1) % n]]
            nx += (y0 - y1) * (z0 + z1)
            ny += (z0 - z1) * (x0 + x1)
            nz += (x0 - x1) * (y0 + y1)

        length = (nx * nx + ny * ny + nz * nz) ** 0.5
        if length < 1e-12:
            return (0.0, 0.0, 0.0)
        return (nx / length, ny / length, nz / length)

    def is_empty(self) -> bool:
        """Check if mesh has no geometry."""
        return len(self.vertices) == 0

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.vertices:
            errors.append("Mesh has no vertices")
            return errors

        max_idx = len(self.vertices)

        for i, face in enumerate(self.faces):
            if len(face) < 3:
                errors.append(f"Face {i} has fewer than 3 vertices")

            for idx in face:
                if idx < 0 or idx >= max_idx:
                    errors.append(
                        f"Face {i} has invalid vertex index {idx} "
                        f"(valid range: 0-{max_idx - 1})"
                    )

        if self.uvs and len(self.uvs) != len(self.vertices):
            errors.append(
                f"UV count {len(self.uvs)} does not match vertex count {len(self.vertices)}"
            )

        return errors

    def compute_bounds(self) -> Optional[Tuple[Tuple[float, float, float],
                                                 Tuple[float, float, float]]]:
        """
        Compute bounding box of the mesh in local coordinates.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z)) or None if empty
        """
        if not self.vertices:
            return None

        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]

        return (
            (min(xs), min(ys), min(zs)),
            (max(xs), max(ys), max(zs))
        )

    def __repr__(self) -> str:
        return f"MeshData(vertices={len(self.vertices)}, faces={len(self.faces)})"
