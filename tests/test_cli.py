from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_demo_writes_and_reads_back(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "demo", "--no-banner"])

    assert result.exit_code == 0, result.output
    assert "Read data: Decrypted data: This is some data to write" in result.stdout
    assert data_file.read_text(encoding="utf-8") == "This is some data to write"


def test_demo_uses_configured_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "from-env.txt"
    monkeypatch.setenv("LAYERED_DS_DATA_PATH", str(target))
    monkeypatch.setenv("LAYERED_DS_SAMPLE_TEXT", "configured text")

    result = runner.invoke(app, ["demo", "--no-banner"])

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == "configured text"


def test_write_then_read(data_file: Path) -> None:
    write = runner.invoke(app, ["--path", str(data_file), "write", "hello"])
    assert write.exit_code == 0, write.output

    read = runner.invoke(app, ["--path", str(data_file), "read"])
    assert read.exit_code == 0, read.output
    assert read.stdout.strip() == "Decrypted data: hello"


def test_read_without_layers(data_file: Path) -> None:
    data_file.write_text("raw [bold]text[/bold]", encoding="utf-8")

    result = runner.invoke(app, ["--path", str(data_file), "--no-layers", "read"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "raw [bold]text[/bold]"


def test_layer_option_overrides_settings(data_file: Path) -> None:
    data_file.write_text("x", encoding="utf-8")

    result = runner.invoke(
        app, ["--path", str(data_file), "-l", "encryption", "-l", "encryption", "read"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Decrypted data: Decrypted data: x"


def test_unknown_layer_is_a_usage_error(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "--layer", "zip", "read"])
    assert result.exit_code == 2


def test_read_missing_file_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--path", str(tmp_path / "missing.txt"), "read"])

    assert result.exit_code == 1
    assert "I/O error" in result.output


def test_write_to_directory_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--path", str(tmp_path), "write", "x"])

    assert result.exit_code == 1
    assert "I/O error" in result.output


def test_inspect_json(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "inspect", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [p["name"] for p in payload["participants"]] == [
        "EncryptionDecorator",
        "CompressionDecorator",
        "FileDataSource",
    ]
    assert payload["location"] == str(data_file)


def test_inspect_output_file(tmp_path: Path, data_file: Path) -> None:
    out = tmp_path / "chain.json"
    result = runner.invoke(app, ["--path", str(data_file), "--no-layers", "inspect", "-o", str(out)])

    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [p["name"] for p in payload["participants"]] == ["FileDataSource"]


def test_inspect_table(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "inspect"])

    assert result.exit_code == 0, result.output
    assert "EncryptionDecorator" in result.stdout
    assert "FileDataSource" in result.stdout


def test_doctor_set_path_persists_user_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["doctor", "set-path", "stored.txt"])

    assert result.exit_code == 0, result.output
    env_file = tmp_path / "user-config" / ".env"
    assert f"LAYERED_DS_DATA_PATH={tmp_path / 'stored.txt'}" in env_file.read_text(encoding="utf-8")


def test_doctor_run(monkeypatch: pytest.MonkeyPatch, data_file: Path) -> None:
    monkeypatch.setenv("LAYERED_DS_DATA_PATH", str(data_file))

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Layers" in result.stdout


def test_doctor_run_fails_on_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LAYERED_DS_DATA_PATH", str(tmp_path))

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1


def test_read_pretty_renders_panel(data_file: Path) -> None:
    data_file.write_text("boxed", encoding="utf-8")

    result = runner.invoke(app, ["--path", str(data_file), "--no-layers", "read", "--pretty"])

    assert result.exit_code == 0, result.output
    assert "Read data" in result.stdout
    assert "boxed" in result.stdout


def test_demo_shows_encryption_annotation(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "demo", "--no-banner"])

    assert result.exit_code == 0, result.output
    assert "Encrypting data: This is some data to write" in result.output
    assert "Read data: Decrypted data: This is some data to write" in result.output


def test_demo_without_encryption_has_no_annotation(data_file: Path) -> None:
    result = runner.invoke(app, ["--path", str(data_file), "-l", "compression", "demo", "--no-banner"])

    assert result.exit_code == 0, result.output
    assert "Encrypting data" not in result.output
    assert "Read data: This is some data to write" in result.output


def test_stored_user_path_is_used_by_later_commands(tmp_path: Path) -> None:
    stored = runner.invoke(app, ["doctor", "set-path", "stored.txt"])
    assert stored.exit_code == 0, stored.output

    result = runner.invoke(app, ["demo", "--no-banner"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "stored.txt").read_text(encoding="utf-8") == "This is some data to write"
