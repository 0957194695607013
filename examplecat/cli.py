"""CLI entrypoint for examplecat."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CatalogConfig, ConfigError, load_config
from .errors import CatalogError
from .logging import configure_logging, get_logger
from .pipeline import CatalogPipeline


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examplecat",
        description="Check example metadata in the project manifest and regenerate the examples catalog.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root containing the manifest (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        help="Path to a configuration file (defaults to <root>/.examplecat.yml).",
    )
    parser.add_argument("--manifest", help="Manifest path, relative to the project root.")
    parser.add_argument("--templates-dir", help="Template directory, relative to the project root.")
    parser.add_argument("--output", help="Catalog output path, relative to the project root.")
    parser.add_argument(
        "--check-missing",
        action="store_true",
        help="Fail when a declared example has no metadata or no doc-scrape-examples marker.",
    )
    parser.add_argument(
        "--update",
        action="store_true",
        help="Regenerate the examples catalog from the template.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered catalog instead of writing it.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> CatalogConfig:
    root = Path(args.root).expanduser()
    config = load_config(Path(args.config) if args.config else root, root=root)
    if args.manifest:
        config.manifest_path = config.root / args.manifest
    if args.templates_dir:
        config.templates_dir = config.root / args.templates_dir
    if args.output:
        config.output_path = config.root / args.output
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for examplecat."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )
    logger = get_logger("cli")

    try:
        config = _resolve_config(args)
        outcome = CatalogPipeline(config).run(
            check_missing=bool(args.check_missing),
            update=bool(args.update),
            dry_run=bool(args.dry_run),
        )
    except ConfigError as exc:
        parser.exit(1, f"examplecat: {exc}\n")
    except CatalogError as exc:
        logger.debug("Run failed with %s", exc.kind)
        parser.exit(1, f"examplecat: {exc}\n")

    if outcome.rendered is not None:
        sys.stdout.write(outcome.rendered)
    elif outcome.output is not None:
        print(
            f"Catalog with {outcome.examples} examples in {outcome.categories} categories "
            f"written to {_relativize(outcome.output)}"
        )
    else:
        print(f"Checked {outcome.examples} examples in {outcome.categories} categories")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
