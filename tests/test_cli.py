import json

from fog_network_simulator import NetworkParams
from fog_network_simulator.cli import build_parser, main, resolve_params
from fog_network_simulator.validation import NetworkValidator


def test_resolve_params_clamps_cli_values():
    args = build_parser().parse_args([
        "--num-nodes", "80", "--proximity-threshold", "5",
        "--max-connections", "oops", "--seed", "3", "--mode", "undirected",
    ])

    params = resolve_params(args)

    assert params.num_nodes == 50
    assert params.proximity_threshold == 10
    assert params.max_connections == 5
    assert params.seed == 3
    assert params.connection_mode == "undirected"


def test_resolve_params_reads_config(tmp_path):
    path = tmp_path / "params.json"
    NetworkParams(num_nodes=8, max_connections=2, seed=10).to_json(str(path))

    params = resolve_params(build_parser().parse_args(["--config", str(path)]))

    assert params.num_nodes == 8
    assert params.max_connections == 2
    assert params.seed == 10


def test_main_runs_and_reports(capsys):
    code = main(["--num-nodes", "10", "--seed", "1", "--regenerate", "2", "--report"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Run 2:" in out
    assert "# Fog Network Report" in out


def test_main_saves_figure(tmp_path):
    out = tmp_path / "network.png"

    assert main(["--seed", "2", "--output", str(out)]) == 0
    assert out.exists()


def test_main_bad_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.json")]) == 1


def _write_config(tmp_path, data):
    path = tmp_path / "params.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_config_float_counts_are_coerced(tmp_path):
    path = _write_config(tmp_path, {"num_nodes": 10.0, "max_connections": 3.0, "seed": 1})

    params = resolve_params(build_parser().parse_args(["--config", path]))

    assert params.num_nodes == 10 and isinstance(params.num_nodes, int)
    assert params.max_connections == 3 and isinstance(params.max_connections, int)
    assert main(["--config", path]) == 0


def test_config_string_values_are_coerced(tmp_path):
    path = _write_config(tmp_path, {"num_nodes": "12", "proximity_threshold": "bad"})

    params = resolve_params(build_parser().parse_args(["--config", path]))

    assert params.num_nodes == 12
    assert params.proximity_threshold == NetworkParams().proximity_threshold


def test_negative_seed_is_rejected(capsys):
    assert main(["--seed", "-1"]) == 1
    assert "✗" in capsys.readouterr().out


def test_negative_seed_in_config_is_rejected(tmp_path):
    assert main(["--config", _write_config(tmp_path, {"seed": -5})]) == 1


def test_negative_width_is_clamped(tmp_path):
    path = _write_config(tmp_path, {"width": -50, "seed": 4})

    params = resolve_params(build_parser().parse_args(["--config", path]))

    assert params.width == 0
    assert main(["--config", path]) == 0


def test_failed_validation_reports_and_returns_1(monkeypatch, capsys):
    def failing(self, nodes, edges):
        raise AssertionError("Network property violated: node_count")

    monkeypatch.setattr(NetworkValidator, "assert_valid", failing)

    assert main(["--seed", "1"]) == 1
    assert "✗ Validation failed" in capsys.readouterr().out
