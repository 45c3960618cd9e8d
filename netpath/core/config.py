"""
Scenario configuration with Pydantic validation
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .edge import Edge
from .exceptions import ConfigError
from .graph import DEFAULT_EDGE_CAPACITY, DEFAULT_NODE_CAPACITY, Graph
from .node import Node


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class GraphSettings(BaseModel):
    """Storage limits for the graph"""
    capacity: int = Field(DEFAULT_NODE_CAPACITY, gt=0, description="Maximum number of nodes")
    edge_capacity: int = Field(DEFAULT_EDGE_CAPACITY, gt=0, description="Maximum number of edges")


class NodeSpec(BaseModel):
    """Position of one node; its index is its position in the nodes list"""
    x: float
    y: float


class EdgeSpec(BaseModel):
    """Undirected connection between two node indices"""
    source: int = Field(..., ge=0)
    destination: int = Field(..., ge=0)


class SearchSettings(BaseModel):
    """Endpoints and heuristic for the path search"""
    start: int = Field(..., ge=0, description="Start node index")
    goal: int = Field(..., ge=0, description="Goal node index")
    heuristic: str = Field('euclidean', min_length=1, description="Registered heuristic name")


class OutputConfig(BaseModel):
    """Export configuration"""
    directory: str = Field('netpath_results', description="Output directory path")
    formats: List[Literal['json', 'csv', 'parquet']] = Field(
        default_factory=lambda: ['json'],
        description="Export formats"
    )
    file_prefix: str = Field('path', min_length=1, description="File prefix for outputs")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = 'INFO'
    file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class ScenarioConfigModel(BaseModel):
    """Pydantic model for a scenario file"""
    model_config = ConfigDict(extra='ignore')

    version: Optional[Union[int, float, str]] = None
    name: str = Field('config', min_length=1)
    description: Optional[str] = None

    graph: GraphSettings = Field(default_factory=GraphSettings)
    nodes: List[NodeSpec] = Field(..., min_length=1)
    edges: List[EdgeSpec] = Field(default_factory=list)
    search: SearchSettings
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('nodes', mode='before')
    @classmethod
    def normalize_nodes(cls, v):
        """Accept [x, y] pairs as well as {x:, y:} mappings"""
        if not isinstance(v, list):
            return v
        normalized = []
        for entry in v:
            if isinstance(entry, (list, tuple)):
                if len(entry) != 2:
                    raise ValueError(f"Node entry must be [x, y], got {entry}")
                normalized.append({'x': entry[0], 'y': entry[1]})
            else:
                normalized.append(entry)
        return normalized

    @field_validator('edges', mode='before')
    @classmethod
    def normalize_edges(cls, v):
        """Accept [source, destination] pairs as well as mappings"""
        if not v:
            return []
        normalized = []
        for entry in v:
            if isinstance(entry, (list, tuple)):
                if len(entry) != 2:
                    raise ValueError(f"Edge entry must be [source, destination], got {entry}")
                normalized.append({'source': entry[0], 'destination': entry[1]})
            else:
                normalized.append(entry)
        return normalized

    @model_validator(mode='after')
    def validate_references(self):
        """Ensure edges and search endpoints point at declared nodes"""
        node_count = len(self.nodes)
        if node_count > self.graph.capacity:
            raise ValueError(
                f"{node_count} nodes declared but graph capacity is {self.graph.capacity}"
            )
        for edge in self.edges:
            if edge.source == edge.destination:
                raise ValueError(f"Edge [{edge.source}, {edge.destination}] joins a node to itself")
            for endpoint in (edge.source, edge.destination):
                if endpoint >= node_count:
                    raise ValueError(
                        f"Edge [{edge.source}, {edge.destination}] references node {endpoint}, "
                        f"only {node_count} nodes declared"
                    )
        for label, index in (('start', self.search.start), ('goal', self.search.goal)):
            if index >= node_count:
                raise ValueError(f"search.{label} {index} is not a declared node")
        return self


# ============================================================================
# Environment Variable Substitution
# ============================================================================

_BRACED_VAR = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}')
_BARE_VAR = re.compile(r'\$([A-Za-z_][A-Za-z0-9_]*)')


def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values

    Supports ${VAR}, $VAR and ${VAR:-default}. Non-string leaves are
    returned unchanged.
    """
    if isinstance(value, str):
        def braced(match):
            name, default = match.group(1), match.group(2)
            env_value = os.environ.get(name)
            if env_value is not None:
                return env_value
            if default is not None:
                return default
            raise ConfigError(f"Environment variable '{name}' is not set and no default value provided")

        def bare(match):
            name = match.group(1)
            env_value = os.environ.get(name)
            if env_value is None:
                raise ConfigError(f"Environment variable '{name}' is not set")
            return env_value

        value = _BRACED_VAR.sub(braced, value)
        return _BARE_VAR.sub(bare, value)

    if isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    if isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    return value


# ============================================================================
# ScenarioConfig Class (wrapper around Pydantic model)
# ============================================================================

class ScenarioConfig:
    """Validated scenario description: graph contents, search and output settings"""

    def __init__(self, config_dict: Dict):
        """Initialize from a dictionary (parsed from YAML) with Pydantic validation"""
        if not isinstance(config_dict, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        config_dict = _substitute_env_vars(config_dict)

        try:
            self._model = ScenarioConfigModel(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed: {e}") from e

        self.version = self._model.version
        self.name = self._model.name
        self.description = self._model.description

        self.capacity = self._model.graph.capacity
        self.edge_capacity = self._model.graph.edge_capacity
        self.node_positions = [(node.x, node.y) for node in self._model.nodes]
        self.edge_pairs = [(edge.source, edge.destination) for edge in self._model.edges]

        self.start = self._model.search.start
        self.goal = self._model.search.goal
        self.heuristic = self._model.search.heuristic

        self.output_dir = Path(self._model.output.directory)
        self.export_formats = list(self._model.output.formats)
        self.file_prefix = self._model.output.file_prefix

        self.log_level = self._model.logging.level
        self.log_file = Path(self._model.logging.file) if self._model.logging.file else None

    def build_graph(self) -> Graph:
        """Create a Graph holding the configured nodes and edges"""
        graph = Graph(self.capacity, self.edge_capacity)
        for index, (x, y) in enumerate(self.node_positions):
            graph.add_node(Node(index, x, y))
        for source, destination in self.edge_pairs:
            graph.add_edge(Edge(source, destination))
        return graph

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'ScenarioConfig':
        """Load configuration from a YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {e}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Configuration file is not valid UTF-8: {yaml_path} ({e})") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {yaml_path}: {e}") from e

        return cls(config_dict)

    def to_dict(self) -> Dict:
        """Convert config back to a dictionary"""
        return {
            'version': self.version,
            'name': self.name,
            'description': self.description,
            'graph': {
                'capacity': self.capacity,
                'edge_capacity': self.edge_capacity
            },
            'nodes': [list(position) for position in self.node_positions],
            'edges': [list(pair) for pair in self.edge_pairs],
            'search': {
                'start': self.start,
                'goal': self.goal,
                'heuristic': self.heuristic
            },
            'output': {
                'directory': str(self.output_dir),
                'formats': self.export_formats,
                'file_prefix': self.file_prefix
            },
            'logging': {
                'level': self.log_level,
                'file': str(self.log_file) if self.log_file else None
            }
        }
