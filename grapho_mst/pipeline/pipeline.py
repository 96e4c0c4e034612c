"""
Pipeline that computes and draws a minimum spanning tree and a shortest path.

The pipeline runs the steps of one plotting request in order:
1. Generate a random vertex set (or reload the previous one)
2. Compute the Euclidean distance matrix
3. Find the minimum spanning tree (Prim)
4. Find the shortest path between source and target along the tree (Dijkstra)
5. Draw the tree onto the grid
6. Draw the shortest path over the tree

A failing step does not stop the request: its error is logged and added
to the plot status, and steps that need its output are skipped.
"""

import copy
import json
import logging
import os
import time
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import (DEFAULT_STATUS, GRID_CONFIG, PIPELINE_CONFIG, VERTEX_CONFIG,
                      PipelineConfigError)
from ..core import build_distance_matrix, compute_mst, compute_shortest_path
from ..io import load_vertex_set, save_vertex_set
from ..utils.geometry import Bounds, format_location, generate_vertices
from ..visualization import CellLabel, Grid, axis_labels, highlight_vertex, rasterize


class PipelineStep:
    """A single step of the pipeline."""

    def __init__(self, name: str, function: Callable, enabled: bool = True,
                 params: Dict = None, requires: List[str] = None):
        """
        Create a pipeline step.

        Args:
            name: Step name
            function: Function called with the pipeline context and params
            enabled: Whether the step runs
            params: Keyword arguments for the function
            requires: Context keys that must be set before the step can run
        """
        self.name = name
        self.function = function
        self.enabled = enabled
        self.params = params or {}
        self.requires = requires or []
        self.result = None
        self.execution_time = 0
        self.status = "pending"
        self.error = None

    def missing_requirements(self, pipeline_context: Dict) -> List[str]:
        return [key for key in self.requires if pipeline_context.get(key) is None]

    def execute(self, pipeline_context: Dict) -> Any:
        """
        Run the step.

        Args:
            pipeline_context: Pipeline context

        Returns:
            Result of the step function
        """
        if not self.enabled:
            self.status = "skipped"
            return None

        try:
            self.status = "running"
            start_time = time.time()

            self.result = self.function(pipeline_context, **self.params)

            self.execution_time = time.time() - start_time
            self.status = "completed"
            return self.result

        except Exception as e:
            self.status = "failed"
            self.error = str(e)
            logging.getLogger('grapho_mst.pipeline').error(f"Error in step '{self.name}': {e}")
            raise


class PipelineConfig:
    """Pipeline configuration."""

    def __init__(self, config_dict: Dict = None, config_file: str = None):
        """
        Create a pipeline configuration.

        Defaults come from ``grapho_mst.config``; a JSON file and then a
        dictionary are merged over them.

        Args:
            config_dict: Configuration values
            config_file: Path to a JSON configuration file
        """
        self.config = {
            **copy.deepcopy(VERTEX_CONFIG),
            'rows': GRID_CONFIG['rows'],
            'columns': GRID_CONFIG['columns'],
            'xlabels': GRID_CONFIG['xlabels'],
            'ylabels': GRID_CONFIG['ylabels'],
            'source': None,
            'target': None,
            **copy.deepcopy(PIPELINE_CONFIG)
        }

        if config_file:
            if not os.path.exists(config_file):
                raise PipelineConfigError(f"Configuration file not found: {config_file}")
            with open(config_file, 'r') as f:
                try:
                    self.config.update(json.load(f))
                except json.JSONDecodeError as e:
                    raise PipelineConfigError(f"Invalid configuration file {config_file}: {e}")

        if config_dict:
            self.config.update(config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_step_config(self, step_name: str) -> Dict:
        """
        Get the parameters of a step.

        Args:
            step_name: Step name

        Returns:
            Step parameters
        """
        for step in self.config.get('steps', []):
            if step['name'] == step_name:
                return step.get('params') or {}
        return {}

    def is_step_enabled(self, step_name: str) -> bool:
        for step in self.config.get('steps', []):
            if step['name'] == step_name:
                return step.get('enabled', True)
        return True

    def get_bounds(self) -> Bounds:
        """
        Plot bounds with reversed min/max corrected.

        Raises:
            PipelineConfigError: If the bounds are missing or have zero width or height
        """
        try:
            bounds = Bounds.from_dict(self.config['bounds']).normalized()
        except (KeyError, TypeError, ValueError) as e:
            raise PipelineConfigError(f"Invalid bounds {self.config.get('bounds')!r}: {e}")
        if not bounds.is_valid():
            raise PipelineConfigError(f"Bounds must have non-zero width and height: {bounds!r}")
        return bounds

    def get_vertex_count(self) -> int:
        vertices = self.config.get('vertices')
        try:
            vertices = int(vertices)
        except (TypeError, ValueError):
            raise PipelineConfigError(f"Vertex count {vertices!r} is not an integer")
        lo, hi = self.config['min_vertices'], self.config['max_vertices']
        if not lo <= vertices <= hi:
            raise PipelineConfigError(f"Vertex count {vertices} outside {lo}-{hi}")
        return vertices

    def has_endpoints(self) -> bool:
        return self.config.get('source') is not None and self.config.get('target') is not None


class PlotResult:
    """Everything the presentation layer shows for one request."""

    def __init__(self):
        self.grid = None            # rasterized Grid
        self.status = ""            # status of the plot
        self.xlabel = []            # x-axis labels
        self.ylabel = []            # y-axis labels
        self.distance = ""          # MST total distance
        self.vertices = ""          # number of vertices
        self.xmin = ""
        self.xmax = ""
        self.ymin = ""
        self.ymax = ""
        self.start_location = ""    # MST start vertex
        self.source_location = ""   # SP source vertex
        self.target_location = ""   # SP target vertex
        self.source = ""            # SP source index
        self.target = ""            # SP target index
        self.distance_sp = ""       # SP distance source -> target

    def to_dict(self) -> Dict:
        d = {k: v for k, v in self.__dict__.items() if k != 'grid'}
        d['grid'] = self.grid.to_css_classes() if self.grid is not None else []
        return d

    def __repr__(self):
        return f"PlotResult(vertices={self.vertices}, distance={self.distance}, status={self.status!r})"


class MSTPipeline:
    """Pipeline for one spanning tree / shortest path plotting request."""

    def __init__(self, config: Union[Dict, PipelineConfig, str] = None):
        """
        Create a pipeline.

        Args:
            config: Configuration (dictionary, PipelineConfig or path to a JSON file)
        """
        if isinstance(config, dict):
            self.config = PipelineConfig(config_dict=config)
        elif isinstance(config, PipelineConfig):
            self.config = config
        elif isinstance(config, str):
            self.config = PipelineConfig(config_file=config)
        else:
            self.config = PipelineConfig()

        self.logger = self._setup_logger()

        self.context = {
            'bounds': None,           # plot bounds
            'points': None,           # (N, 2) vertex coordinates
            'distance_matrix': None,  # (N, N) distances
            'tree': None,             # SpanningTree
            'path': None,             # PathResult
            'grid': None,             # rasterized Grid
            'plot': PlotResult(),     # presentation data
            'errors': []              # step error messages
        }

        self.steps = []
        self._setup_steps()

    def _setup_logger(self) -> logging.Logger:
        """
        Configure the pipeline logger.

        Returns:
            Configured logger
        """
        logger_config = self.config.get('logger') or {}
        level = getattr(logging, str(logger_config.get('level', 'INFO')).upper(), logging.INFO)

        logger = logging.getLogger('grapho_mst.pipeline')
        logger.setLevel(level)

        if logger_config.get('console', True) and not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        return logger

    def _setup_steps(self):
        """Create the pipeline steps."""
        definitions = [
            ('generate_vertices', self._generate_vertices, []),
            ('find_distances', self._find_distances, ['points']),
            ('find_mst', self._find_mst, ['distance_matrix']),
            ('find_sp', self._find_sp, ['tree', 'distance_matrix']),
            ('plot_mst', self._plot_mst, ['tree', 'points', 'bounds']),
            ('plot_sp', self._plot_sp, ['grid', 'points', 'bounds']),
        ]
        self.steps = [
            PipelineStep(name, function,
                         enabled=self.config.is_step_enabled(name),
                         params=self.config.get_step_config(name),
                         requires=requires)
            for name, function, requires in definitions
        ]

    def run(self) -> PlotResult:
        """
        Run every step of the pipeline.

        Returns:
            Plot data for the presentation layer
        """
        self.logger.info("Starting pipeline")
        start_time = time.time()

        for step in self.steps:
            if not step.enabled:
                self.logger.info(f"Step {step.name} disabled")
                continue

            missing = step.missing_requirements(self.context)
            if missing:
                step.status = "skipped"
                self.logger.warning(f"Skipping step {step.name}: missing {', '.join(missing)}")
                continue

            self.logger.info(f"Running step: {step.name}")
            try:
                step.execute(self.context)
                self.logger.info(f"Step {step.name} finished in {step.execution_time:.2f}s")
            except Exception as e:
                self.context['errors'].append(str(e))
                if self.config.get('stop_on_error', False):
                    break

        plot = self.context['plot']
        plot.grid = self.context['grid']
        plot.status = ", ".join(self.context['errors']) or DEFAULT_STATUS

        total_time = time.time() - start_time
        self.logger.info(f"Pipeline finished in {total_time:.2f}s")

        return plot

    def run_step(self, step_name: str) -> Any:
        """
        Run a single step.

        Args:
            step_name: Name of the step

        Returns:
            Result of the step
        """
        for step in self.steps:
            if step.name == step_name and step.enabled:
                self.logger.info(f"Running step: {step.name}")
                result = step.execute(self.context)
                self.logger.info(f"Step {step.name} finished in {step.execution_time:.2f}s")
                return result

        self.logger.warning(f"Step {step_name} not found or disabled")
        return None

    def _generate_vertices(self, context: Dict, **params):
        """
        Generate vertices, or reload the previous vertex set when a
        source and target are given so the path is found on the same tree.
        """
        vertex_file = params.get('vertex_file', self.config.get('vertex_file'))

        if self.config.has_endpoints() and vertex_file and os.path.exists(vertex_file):
            bounds, points = load_vertex_set(vertex_file)
            bounds = bounds.normalized()
            self.logger.info(f"Loaded {len(points)} vertices from {vertex_file}")
        else:
            bounds = self.config.get_bounds()
            count = self.config.get_vertex_count()
            points = generate_vertices(count, bounds, seed=params.get('seed', self.config.get('seed')))
            if vertex_file:
                save_vertex_set(vertex_file, bounds, points)
                self.logger.info(f"Saved {len(points)} vertices to {vertex_file}")

        context['bounds'] = bounds
        context['points'] = points
        return points

    def _find_distances(self, context: Dict):
        context['distance_matrix'] = build_distance_matrix(context['points'])
        return context['distance_matrix']

    def _find_mst(self, context: Dict):
        context['tree'] = compute_mst(context['distance_matrix'])
        return context['tree']

    def _find_sp(self, context: Dict):
        if not self.config.has_endpoints():
            self.logger.info("No source/target vertices given, skipping shortest path")
            return None
        source = int(self.config.get('source'))
        target = int(self.config.get('target'))
        context['path'] = compute_shortest_path(context['tree'], context['distance_matrix'],
                                                source, target)
        return context['path']

    def _plot_mst(self, context: Dict):
        """Draw the tree, the start vertex and the axis labels."""
        bounds = context['bounds']
        points = context['points']
        tree = context['tree']
        plot = context['plot']

        grid = Grid(self.config.get('rows'), self.config.get('columns'))
        rasterize(grid, points, tree.edges(), bounds, CellLabel.EDGE)
        if len(tree):
            highlight_vertex(grid, points[tree.root], bounds, CellLabel.MST_ROOT)
            plot.start_location = format_location(points[tree.root])

        plot.xlabel = axis_labels(bounds.xmin, bounds.xmax, self.config.get('xlabels'))
        plot.ylabel = axis_labels(bounds.ymin, bounds.ymax, self.config.get('ylabels'))
        plot.distance = f"{tree.total_weight(context['distance_matrix']):.2f}"
        plot.vertices = str(len(points))
        plot.xmin = f"{bounds.xmin:.2f}"
        plot.xmax = f"{bounds.xmax:.2f}"
        plot.ymin = f"{bounds.ymin:.2f}"
        plot.ymax = f"{bounds.ymax:.2f}"

        context['grid'] = grid
        return grid

    def _plot_sp(self, context: Dict):
        """Draw the shortest path over the tree and mark its end vertices."""
        path = context['path']
        if path is None:
            return None

        bounds = context['bounds']
        points = context['points']
        grid = context['grid']
        plot = context['plot']

        rasterize(grid, points, path.edges, bounds, CellLabel.SP_EDGE)
        highlight_vertex(grid, points[path.target], bounds, CellLabel.SP_TARGET)
        highlight_vertex(grid, points[path.source], bounds, CellLabel.SP_SOURCE)

        plot.source = str(path.source)
        plot.target = str(path.target)
        plot.source_location = format_location(points[path.source])
        plot.target_location = format_location(points[path.target])
        plot.distance_sp = f"{path.length:.2f}"
        return grid
