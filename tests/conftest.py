"""
Shared test fixtures for house interiors tests.
"""
import logging
import random

import pytest

from house_interiors.config import AtticDimensions, BasementDimensions, GeneratorConfig
from house_interiors.io.material_library import MaterialLibrary
from house_interiors.models import Material, SceneNode, Scene


@pytest.fixture
def material():
    """A plain shared material."""
    return Material("TestWhite", color=(1.0, 1.0, 1.0, 1.0))


@pytest.fixture
def parent():
    """A detached parent node to build under."""
    return SceneNode(name="Parent")


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def library():
    """Built-in material library."""
    return MaterialLibrary()


@pytest.fixture
def attic_dims():
    return AtticDimensions()


@pytest.fixture
def basement_dims():
    return BasementDimensions()


@pytest.fixture
def config(tmp_path):
    """Default run configuration writing into a temp directory."""
    return GeneratorConfig(output_dir=str(tmp_path))


@pytest.fixture
def scene():
    return Scene()


@pytest.fixture
def restore_logging():
    """Put root logger handlers back after a test that reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def names(node):
    """Child names of a node, in order."""
    return [child.name for child in node.children]
