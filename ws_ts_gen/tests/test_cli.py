import json

from click.testing import CliRunner

from ws_ts_gen import __version__
from ws_ts_gen.cli_utils import reconstruct_command_line
from ws_ts_gen.ws_ts_gen import ws_ts_gen


def test_generates_all_files(ping_pong_yaml_path, tmp_path):
    out_dir = tmp_path / "dist"

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(out_dir)])

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "client-example.ts",
        "client.ts",
        "handlers.ts",
        "index.ts",
        "server.ts",
        "types.ts",
    ]
    assert "Generated types.ts at:" in result.output
    assert (out_dir / "types.ts").read_text().startswith("// Generated by ws_ts_gen v")
    assert "ping_pong.yaml" in (out_dir / "types.ts").read_text().splitlines()[0]


def test_second_run_needs_force(ping_pong_yaml_path, tmp_path):
    runner = CliRunner()
    args = [str(ping_pong_yaml_path), str(tmp_path)]
    assert runner.invoke(ws_ts_gen, args).exit_code == 0

    result = runner.invoke(ws_ts_gen, args)
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = runner.invoke(ws_ts_gen, [*args, "--force"])
    assert result.exit_code == 0, result.output


def test_mode_client(ping_pong_yaml_path, tmp_path):
    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(tmp_path), "--mode", "client", "--no-examples"])

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in tmp_path.iterdir()) == ["client.ts", "types.ts"]


def test_config_file(ping_pong_yaml_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"mode": "server", "add_generation_comment": False}))
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(out_dir), "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "client.ts" not in {p.name for p in out_dir.iterdir()}
    assert (out_dir / "types.ts").read_text().startswith("// Type definitions")


def test_invalid_config_file(ping_pong_yaml_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"mode": "peer"}))

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(tmp_path), "-c", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid config file" in result.output


def test_dangling_reference_reports_error(ping_pong_document, tmp_path):
    ping_pong_document["components"]["messages"]["pong"]["payload"] = {"$ref": "#/components/schemas/PongV2"}
    schema_path = tmp_path / "broken.json"
    schema_path.write_text(json.dumps(ping_pong_document))
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(ws_ts_gen, [str(schema_path), str(out_dir)])

    assert result.exit_code == 1
    assert "Unresolved reference #/components/schemas/PongV2" in result.output
    assert not out_dir.exists()


def test_unsupported_extension(tmp_path):
    schema_path = tmp_path / "schema.txt"
    schema_path.write_text("asyncapi: 3.0.0")

    result = CliRunner().invoke(ws_ts_gen, [str(schema_path), str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "unsupported file format" in result.output


def test_command_line_without_context():
    assert reconstruct_command_line(ws_ts_gen) == "ws_ts_gen"


def test_header_line_is_stable_across_runs(ping_pong_yaml_path, tmp_path):
    runner = CliRunner()
    out_dir = tmp_path / "dist"
    expected = f"// Generated by ws_ts_gen v{__version__} : ws_ts_gen ping_pong.yaml dist"

    assert runner.invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(out_dir)]).exit_code == 0
    first = (out_dir / "types.ts").read_text().splitlines()[0]
    assert runner.invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(out_dir), "-f"]).exit_code == 0
    second = (out_dir / "types.ts").read_text().splitlines()[0]

    assert first == expected
    assert second == f"{expected} --force"
    assert str(tmp_path) not in first


def test_config_must_be_an_object(ping_pong_yaml_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(["server"]))

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(tmp_path / "out"), "-c", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid config file" in result.output


def test_read_only_config_keys_are_ignored(ping_pong_yaml_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"includes_server": False, "mode": "client"}))
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(out_dir), "-c", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "client.ts" in {p.name for p in out_dir.iterdir()}


def test_output_write_failure_is_reported(ping_pong_yaml_path, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = CliRunner().invoke(ws_ts_gen, [str(ping_pong_yaml_path), str(blocker / "out")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
