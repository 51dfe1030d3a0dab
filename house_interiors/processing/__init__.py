"""
Processing modules for House Interiors Generator.

Contains the regeneration lifecycle that swaps generated structures into
a scene as single undoable steps.
"""

from .regeneration import GenerationState, StructureRegenerator

__all__ = [
    'GenerationState',
    'StructureRegenerator',
]
