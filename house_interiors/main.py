"""
House Interiors Generator - Main CLI

Generates attic and basement interiors as hierarchies of parametric
meshes and exports them to OBJ and/or a JSON hierarchy file.

Usage:
    python -m house_interiors.main {attic,basement} [options]

Example:
    python -m house_interiors.main attic --seed 7 --format both --output-dir ./out
"""

import argparse
import json
import logging
import os
import sys
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from . import __version__
from .commands import COMMANDS, load_materials
from .config import GeneratorConfig, DEFAULT_STAIR_STRATEGY, PROP_COUNT, EXPORT_FORMATS
from .io.obj_exporter import export_obj_with_materials, validate_obj_file
from .io.hierarchy_exporter import export_hierarchy
from .models.scene import Scene, SceneNode

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Statistics from one generation run."""
    node_count: int = 0
    mesh_count: int = 0
    vertex_count: int = 0
    face_count: int = 0
    triangle_count: int = 0
    light_count: int = 0
    collider_count: int = 0
    processing_time_ms: int = 0


@dataclass
class GenerationReport:
    """Report from a generation run."""
    structure: str
    version: str
    success: bool
    stats: GenerationStats
    output_files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    missing_materials: List[str] = field(default_factory=list)
    config_used: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GenerationResult:
    """
    Complete result of a generation run.

    Attributes:
        success: Whether the run completed without errors
        report: Statistics and metadata
        root: Generated root node (None on failure)
        scene: Scene the root was committed to
    """
    success: bool
    report: GenerationReport
    root: Optional[SceneNode] = None
    scene: Optional[Scene] = None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def collect_stats(root: SceneNode) -> GenerationStats:
    """Count nodes, meshes and components under root."""
    stats = GenerationStats()
    for node in root.walk():
        stats.node_count += 1
        if node.mesh is not None:
            stats.mesh_count += 1
            stats.vertex_count += node.mesh.vertex_count()
            stats.face_count += node.mesh.face_count()
            stats.triangle_count += node.mesh.triangle_count()
        if "light" in node.components:
            stats.light_count += 1
        if "collider" in node.components:
            stats.collider_count += 1
    return stats


def run_generation(
    structure: str,
    config: GeneratorConfig,
    scene: Optional[Scene] = None,
    write_files: bool = True
) -> GenerationResult:
    """
    Generate one structure and export it.

    Args:
        structure: Command name ("attic" or "basement")
        config: Run configuration
        scene: Scene to generate into (a new one if None)
        write_files: Export to config.output_dir when True

    Returns:
        GenerationResult with report and the generated root
    """
    start = time.time()
    scene = scene if scene is not None else Scene()
    report = GenerationReport(
        structure=structure,
        version=__version__,
        success=False,
        stats=GenerationStats(),
        config_used=asdict(config),
    )

    command = COMMANDS.get(structure)
    if command is None:
        report.errors.append(f"Unknown structure '{structure}'")
        return GenerationResult(success=False, report=report, scene=scene)

    try:
        materials = load_materials(config)
        root = command(scene, config, materials=materials)
    except (OSError, ValueError) as e:
        logger.error(f"Generation failed: {e}")
        report.errors.append(str(e))
        return GenerationResult(success=False, report=report, scene=scene)

    report.stats = collect_stats(root)
    report.missing_materials = sorted(materials.missing)

    if write_files:
        os.makedirs(config.output_dir, exist_ok=True)

        if config.export_format in ("obj", "both"):
            obj_path = export_obj_with_materials(root, config.output_dir, structure)
            errors = validate_obj_file(obj_path)
            for error in errors:
                logger.warning(f"OBJ validation: {error}")
            report.errors.extend(errors)
            report.output_files.append(obj_path)
            report.output_files.append(os.path.splitext(obj_path)[0] + ".mtl")

        if config.export_format in ("json", "both"):
            json_path = os.path.join(config.output_dir, f"{structure}.json")
            export_hierarchy(root, json_path)
            report.output_files.append(json_path)

    report.stats.processing_time_ms = int((time.time() - start) * 1000)
    report.success = not report.errors

    if write_files:
        report_path = os.path.join(config.output_dir, f"{structure}_report.json")
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(report), f, indent=2)
        logger.info(f"Report written to {report_path}")

    return GenerationResult(success=report.success, report=report, root=root, scene=scene)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='House Interiors Generator - Generate attic and basement interiors'
    )

    parser.add_argument(
        'structure',
        choices=sorted(COMMANDS),
        help='Structure to generate'
    )

    parser.add_argument(
        '--output-dir',
        default='./output',
        help='Output directory for generated files (default: ./output)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=12345,
        help='Random seed for prop scattering (default: 12345)'
    )

    parser.add_argument(
        '--stair-strategy',
        choices=['extrude', 'riser_box'],
        default=DEFAULT_STAIR_STRATEGY,
        help=f'Fill under stair treads (default: {DEFAULT_STAIR_STRATEGY})'
    )

    parser.add_argument(
        '--prop-count',
        type=int,
        default=PROP_COUNT,
        help=f'Number of attic props to scatter (default: {PROP_COUNT})'
    )

    parser.add_argument(
        '--materials',
        default=None,
        help='JSON material library (default: built-in materials)'
    )

    parser.add_argument(
        '--format',
        choices=list(EXPORT_FORMATS),
        default='obj',
        help='Export format (default: obj)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--no-log-file',
        action='store_true',
        help='Disable log file output (only console)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    # Create output directory early so we can put log file there
    os.makedirs(args.output_dir, exist_ok=True)

    log_file = None
    if not args.no_log_file:
        log_file = os.path.join(args.output_dir, f"{args.structure}.log")

    setup_logging(args.verbose, log_file)

    try:
        config = GeneratorConfig(
            seed=args.seed,
            stair_strategy=args.stair_strategy,
            prop_count=args.prop_count,
            materials_path=args.materials,
            output_dir=args.output_dir,
            export_format=args.format,
            verbose=args.verbose,
        )

        result = run_generation(args.structure, config)
        report = result.report

        if result.success:
            stats = report.stats
            print(f"\nSuccess! Generated {args.structure}: {stats.node_count} nodes")
            print(f"Meshes: {stats.mesh_count}, {stats.vertex_count} vertices, {stats.face_count} faces")
            print(f"Lights: {stats.light_count}, colliders: {stats.collider_count}")
            print(f"Output files: {', '.join(report.output_files)}")
            if log_file:
                print(f"Log file: {log_file}")
            return 0
        else:
            print("\nGeneration failed with errors:")
            for error in report.errors:
                print(f"  - {error}")
            if log_file:
                print(f"See log file for details: {log_file}")
            return 1

    except Exception as e:
        logging.exception(f"Generation failed: {e}")
        if log_file:
            print(f"See log file for details: {log_file}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
