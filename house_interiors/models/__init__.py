"""
Data models for House Interiors Generator.
"""

from .geometry import Point2D, Vector3, Rect2D, Opening
from .material import Material, DEFAULT_MATERIAL
from .mesh import MeshData
from .scene import SceneNode, Scene, UndoGroup

__all__ = [
    'Point2D', 'Vector3', 'Rect2D', 'Opening',
    'Material', 'DEFAULT_MATERIAL',
    'MeshData',
    'SceneNode', 'Scene', 'UndoGroup',
]
