#!/usr/bin/env python3
"""CLI entrypoint for building the aggregate summaries document."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from wisdom_vault.summary_builder import aggregate, output, renderer
from wisdom_vault.summary_builder.aggregate import BuildResult
from wisdom_vault.summary_builder.config import BuildConfig, resolve_verbose

logger = logging.getLogger("wisdom_vault.summary_builder.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def resolve_root(path: str | None) -> Path:
    if path:
        return Path(path).expanduser().resolve()
    return Path.cwd()


def resolve_config(args: argparse.Namespace) -> BuildConfig:
    root = resolve_root(args.root)
    if args.config:
        config = BuildConfig.from_yaml(Path(args.config), root)
    else:
        config = BuildConfig.defaults(root)
    if args.input:
        config.input_dir = Path(args.input).expanduser().resolve()
    if args.output:
        config.output_file = Path(args.output).expanduser().resolve()
    if args.verbose:
        config.verbose = True
    return config


def resolve_input(config: BuildConfig) -> Path:
    if not config.input_dir.is_dir():
        raise SystemExit(f"Summaries directory not found: {config.input_dir}")
    return config.input_dir


def run_build(config: BuildConfig) -> BuildResult:
    input_dir = resolve_input(config)
    config.output_file.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Scanning %s", input_dir)
    result = aggregate.build_from_directory(input_dir, verbose=resolve_verbose(config.verbose))
    output.write_output(config.output_file, result.document)
    result.output_path = config.output_file
    return result


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(description="Build the aggregate summaries document")
    parser_obj.add_argument("--root", help="Project root (defaults to the working directory)")
    parser_obj.add_argument("--input", help="Directory of .txt summaries (default: <root>/summaries)")
    parser_obj.add_argument("--output", help="Output JSON file (default: <root>/public/data.json)")
    parser_obj.add_argument("--config", help="Optional YAML file with input_dir/output_file/verbose")
    parser_obj.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Log every skipped file (overrides VERBOSE)",
    )
    return parser_obj


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = resolve_config(args)
    verbose = resolve_verbose(config.verbose)
    configure_logging(verbose)
    result = run_build(config)
    print(renderer.render_report(result))


if __name__ == "__main__":
    main()
