#!/usr/bin/env python3
"""Command-line entry point for slug-guard.

Usage:
    slug-guard repair records.json
    slug-guard repair records.json --dry-run --verbose
    slug-guard types --config config/slug-guard.yaml
"""

import sys
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from slug_guard.classifier import managed_types
from slug_guard.exceptions import ConfigurationError, SlugGuardError
from slug_guard.models.config import GuardConfig
from slug_guard.models.context import HookContext
from slug_guard.models.records import RepairResult
from slug_guard.repair import run_repair
from slug_guard.storage import PostStore
from slug_guard.utils.cache import PostCache
from slug_guard.utils.config_loader import load_guard_config
from slug_guard.utils.logging import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Keep record slugs populated before calendar plugins read them.")

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to slug-guard configuration file"),
]


def print_header(title: str) -> None:
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60 + "\n")


def print_stats(label: str, value: Any) -> None:
    """Print a formatted stat line."""
    print(f"  • {label}: {value}")


def print_summary(result: RepairResult) -> None:
    """Print the repair summary."""
    print_header("Slug Repair Summary")
    print_stats("Status", "✅ Success" if result.success else "❌ Failed")
    print_stats("Records scanned", result.records_scanned)
    print_stats("Records fixed", result.records_fixed)
    if result.fixed_ids:
        print_stats("Fixed IDs", ", ".join(str(post_id) for post_id in result.fixed_ids))
    if result.dry_run:
        print_stats("Dry run", "Yes (record file not written)")
    for error in result.errors:
        print_stats("Error", error)


def resolve_config(config_file: Path) -> GuardConfig:
    """Load the configuration file, or defaults with environment overrides."""
    if config_file.exists():
        try:
            return load_guard_config(config_file)
        except (yaml.YAMLError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration {config_file}: {e}") from e

    logger.warning(f"Config file {config_file} not found, using defaults")
    return GuardConfig().with_env_overrides()


@app.command()
def repair(
    records_file: Annotated[Path, typer.Argument(help="JSON file holding the records")],
    config_file: ConfigOption = Path("config/slug-guard.yaml"),
    cache_dir: Annotated[
        Path | None,
        typer.Option("--cache-dir", help="Object cache directory to invalidate"),
    ] = None,
    post_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only repair records of this type"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Report fixes without writing the record file"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging and repair log lines"),
    ] = False,
) -> None:
    """
    Repair empty and self-referential slugs in a record file.

    Every record is loaded through the post-load handler, which regenerates
    the slug, writes it back and clears the record's cache entry.
    """
    try:
        config = resolve_config(config_file)
        if verbose:
            config.logging.level = "DEBUG"
        setup_logging(config.logging)

        context = HookContext.from_env()
        context.debug = context.debug or config.debug or verbose

        store = PostStore.load(records_file)
        cache = PostCache(cache_dir) if cache_dir is not None and not dry_run else None

        result = run_repair(
            store,
            config,
            cache=cache,
            context=context,
            post_type=post_type,
            dry_run=dry_run,
        )
        print_summary(result)
        sys.exit(0 if result.success else 1)

    except SlugGuardError as e:
        logger.error("Slug repair could not start", error=str(e))
        print(f"\n❌ {e}")
        sys.exit(1)

    except Exception as e:
        logger.exception("Failed to run slug repair")
        print(f"\n❌ Failed to run slug repair: {e}")
        sys.exit(1)


@app.command()
def types(config_file: ConfigOption = Path("config/slug-guard.yaml")) -> None:
    """Print the resolved managed-type set."""
    try:
        config = resolve_config(config_file)
    except ConfigurationError as e:
        print(f"\n❌ {e}")
        sys.exit(1)

    for type_tag in sorted(managed_types(config.managed_types)):
        print(type_tag)


if __name__ == "__main__":
    app()
