"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from examplecat.cli import _build_parser, main


def _seed(manifest_builder) -> Path:
    manifest_builder.declare("ex1").declare("ex2")
    manifest_builder.describe("ex1", name="First", category="basic")
    manifest_builder.describe("ex2", name="Second", category="basic", wasm=True, hidden=True)
    manifest_builder.category("basic", "Basic examples.")
    manifest_builder.write()
    return manifest_builder.root


def test_cli_flags_default_to_false() -> None:
    args = _build_parser().parse_args([])
    assert args.check_missing is False
    assert args.update is False
    assert args.dry_run is False
    assert args.verbose is False


def test_cli_accepts_both_flags() -> None:
    args = _build_parser().parse_args(["--check-missing", "--update", "-v"])
    assert args.check_missing is True
    assert args.update is True
    assert args.verbose is True


def test_cli_update_writes_catalog(manifest_builder, capsys) -> None:
    root = _seed(manifest_builder)

    main(["--root", str(root), "--update"])

    output = capsys.readouterr().out
    assert "1 examples in 1 categories" in output
    assert "## basic" in (root / "examples" / "README.md").read_text(encoding="utf-8")


def test_cli_check_only_reports_summary(manifest_builder, capsys) -> None:
    root = _seed(manifest_builder)

    main(["--root", str(root), "--check-missing"])

    assert "Checked 1 examples in 1 categories" in capsys.readouterr().out
    assert not (root / "examples" / "README.md").exists()


def test_cli_dry_run_prints_catalog(manifest_builder, capsys) -> None:
    root = _seed(manifest_builder)

    main(["--root", str(root), "--dry-run"])

    assert "[First](examples/ex1.rs)" in capsys.readouterr().out
    assert not (root / "examples" / "README.md").exists()


def test_cli_overrides_output_path(manifest_builder) -> None:
    root = _seed(manifest_builder)

    main(["--root", str(root), "--update", "--output", "docs/EXAMPLES.md"])

    assert (root.resolve() / "docs" / "EXAMPLES.md").exists()


def test_cli_exits_non_zero_on_missing_metadata(manifest_builder, capsys) -> None:
    manifest_builder.declare("ex1").declare("ex3").describe("ex1", name="First").write()
    root = manifest_builder.root

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(root), "--check-missing", "--update"])

    assert excinfo.value.code == 1
    assert "Missing metadata for example ex3" in capsys.readouterr().err
    assert not (root / "examples" / "README.md").exists()


def test_cli_exits_non_zero_on_missing_manifest(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "Failed to read manifest" in capsys.readouterr().err


def test_cli_exits_non_zero_on_bad_config(tmp_path: Path, capsys) -> None:
    (tmp_path / ".examplecat.yml").write_text("- not a mapping\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "mapping" in capsys.readouterr().err


def test_cli_root_is_used_with_separate_config(manifest_builder, tmp_path: Path) -> None:
    root = _seed(manifest_builder)
    config_file = tmp_path / "ci" / "catalog.yml"
    config_file.parent.mkdir()
    config_file.write_text("output: docs/EXAMPLES.md\n", encoding="utf-8")

    main(["--root", str(root), "--config", str(config_file), "--update"])

    assert "## basic" in (root / "docs" / "EXAMPLES.md").read_text(encoding="utf-8")
    assert not (config_file.parent / "docs").exists()


def test_cli_rejects_missing_root(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(tmp_path / "nowhere"), "--update"])

    assert excinfo.value.code == 1
    assert "is not a directory" in capsys.readouterr().err


def test_cli_invalid_utf8_manifest_exits_non_zero(tmp_path: Path, capsys) -> None:
    (tmp_path / "Cargo.toml").write_bytes(b'name = "\xff\xfe"\n')

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "examplecat: Failed to read manifest" in capsys.readouterr().err


def test_cli_log_file_receives_records(manifest_builder, tmp_path: Path) -> None:
    root = _seed(manifest_builder)
    log_file = tmp_path / "examplecat.log"

    main(["--root", str(root), "--log-file", str(log_file), "--update"])

    contents = log_file.read_text(encoding="utf-8")
    assert "examplecat.pipeline: Reading examples from" in contents
    assert "examplecat.renderer: Wrote" in contents
