"""
Tests for scenario configuration loading and validation
"""

from pathlib import Path

import pytest

from netpath.core import ConfigError, ScenarioConfig
from netpath.core.config import _substitute_env_vars
from tests.conftest import edge_pairs, node_positions


class TestScenarioConfig:
    """Test suite for ScenarioConfig"""

    def test_defaults(self, scenario_dict):
        config = ScenarioConfig(scenario_dict)

        assert config.name == 'shortcut'
        assert config.heuristic == 'euclidean'
        assert config.output_dir == Path('netpath_results')
        assert config.export_formats == ['json']
        assert config.file_prefix == 'path'
        assert config.log_level == 'INFO'
        assert config.log_file is None

    def test_node_forms(self, scenario_dict):
        """Test that [x, y] pairs and {x, y} mappings are both accepted"""
        config = ScenarioConfig(scenario_dict)
        assert config.node_positions[0] == (0.0, 0.0)
        assert config.node_positions[4] == (4.0, 4.0)

    def test_build_graph(self, scenario_dict):
        graph = ScenarioConfig(scenario_dict).build_graph()

        assert graph.capacity == 100
        assert graph.edge_capacity == 100
        assert node_positions(graph)[2] == (2.0, 2.0)
        assert edge_pairs(graph) == [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)]

    def test_duplicate_edges_are_collapsed(self, scenario_dict):
        scenario_dict['edges'].append([4, 0])
        graph = ScenarioConfig(scenario_dict).build_graph()
        assert graph.edge_count == 5

    def test_log_level_is_normalized(self, scenario_dict):
        scenario_dict['logging'] = {'level': 'debug'}
        assert ScenarioConfig(scenario_dict).log_level == 'DEBUG'

    def test_to_dict_round_trips(self, scenario_dict):
        config = ScenarioConfig(scenario_dict)
        again = ScenarioConfig(config.to_dict())

        assert again.node_positions == config.node_positions
        assert again.edge_pairs == config.edge_pairs
        assert again.start == config.start

    def test_to_dict_keeps_optional_fields(self, scenario_dict):
        """Test that metadata and the log file survive a save and reload"""
        scenario_dict['version'] = 2
        scenario_dict['description'] = 'Diagonal chain'
        scenario_dict['logging'] = {'level': 'WARNING', 'file': 'runs/netpath.log'}

        again = ScenarioConfig(ScenarioConfig(scenario_dict).to_dict())

        assert again.version == 2
        assert again.description == 'Diagonal chain'
        assert again.log_level == 'WARNING'
        assert again.log_file == Path('runs/netpath.log')

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            ScenarioConfig(['nodes'])

    def test_missing_search(self, scenario_dict):
        del scenario_dict['search']
        with pytest.raises(ConfigError, match="validation failed"):
            ScenarioConfig(scenario_dict)

    def test_no_nodes(self, scenario_dict):
        scenario_dict['nodes'] = []
        with pytest.raises(ConfigError):
            ScenarioConfig(scenario_dict)

    def test_edge_to_undeclared_node(self, scenario_dict):
        scenario_dict['edges'].append([0, 9])
        with pytest.raises(ConfigError, match="references node 9"):
            ScenarioConfig(scenario_dict)

    def test_goal_not_declared(self, scenario_dict):
        scenario_dict['search']['goal'] = 5
        with pytest.raises(ConfigError, match="search.goal 5"):
            ScenarioConfig(scenario_dict)

    def test_more_nodes_than_capacity(self, scenario_dict):
        scenario_dict['graph']['capacity'] = 3
        with pytest.raises(ConfigError, match="capacity is 3"):
            ScenarioConfig(scenario_dict)

    def test_self_loop_edge(self, scenario_dict):
        scenario_dict['edges'].append([2, 2])
        with pytest.raises(ConfigError, match="joins a node to itself"):
            ScenarioConfig(scenario_dict)

    def test_malformed_node_entry(self, scenario_dict):
        scenario_dict['nodes'][0] = [0, 0, 0]
        with pytest.raises(ConfigError):
            ScenarioConfig(scenario_dict)

    def test_unknown_export_format(self, scenario_dict):
        scenario_dict['output'] = {'formats': ['xlsx']}
        with pytest.raises(ConfigError):
            ScenarioConfig(scenario_dict)

    def test_config_error_is_value_error(self, scenario_dict):
        del scenario_dict['nodes']
        with pytest.raises(ValueError):
            ScenarioConfig(scenario_dict)


class TestYamlLoading:
    """Test suite for ScenarioConfig.from_yaml"""

    def test_from_yaml(self, scenario_file):
        config = ScenarioConfig.from_yaml(scenario_file)
        assert config.name == 'shortcut'
        assert len(config.node_positions) == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScenarioConfig.from_yaml(tmp_path / 'absent.yaml')

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read configuration file"):
            ScenarioConfig.from_yaml(tmp_path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / 'binary.yaml'
        path.write_bytes(b'\xff\xfe\x00bad')

        with pytest.raises(ConfigError):
            ScenarioConfig.from_yaml(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("nodes: [[0, 0]\n", encoding='utf-8')

        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            ScenarioConfig.from_yaml(path)

    def test_environment_variables(self, tmp_path, monkeypatch):
        monkeypatch.setenv('NETPATH_OUT', '/tmp/netpath-out')
        path = tmp_path / 'env.yaml'
        path.write_text(
            "nodes: [[0, 0], [1, 0]]\n"
            "edges: [[0, 1]]\n"
            "search: {start: 0, goal: 1}\n"
            "output:\n"
            "  directory: ${NETPATH_OUT}\n"
            "  file_prefix: ${NETPATH_PREFIX:-run}\n",
            encoding='utf-8'
        )

        config = ScenarioConfig.from_yaml(path)

        assert config.output_dir == Path('/tmp/netpath-out')
        assert config.file_prefix == 'run'


class TestEnvSubstitution:
    """Test suite for environment variable expansion"""

    def test_braced_and_bare(self, monkeypatch):
        monkeypatch.setenv('HOST', 'example')
        assert _substitute_env_vars("${HOST}/$HOST") == "example/example"

    def test_default_value(self, monkeypatch):
        monkeypatch.delenv('NETPATH_UNSET', raising=False)
        assert _substitute_env_vars("${NETPATH_UNSET:-fallback}") == "fallback"

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv('LEVEL', 'DEBUG')
        value = {'logging': {'level': '$LEVEL'}, 'list': ['$LEVEL', 3]}
        assert _substitute_env_vars(value) == {'logging': {'level': 'DEBUG'}, 'list': ['DEBUG', 3]}

    def test_missing_variable(self, monkeypatch):
        monkeypatch.delenv('NETPATH_UNSET', raising=False)
        with pytest.raises(ConfigError, match="NETPATH_UNSET"):
            _substitute_env_vars("${NETPATH_UNSET}")
