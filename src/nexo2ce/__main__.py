"""
Main entry point for nexo2ce.
Usage: python -m nexo2ce [options]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .conversion import ConversionService
from .pack import PackInfo, clear_logs, copy_assets, generate_pack_yml, init_folders
from .settings import AppSettings, ConfigError, is_valid_namespace
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexo2ce",
        description="Convert a Nexo item pack into a CraftEngine pack.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-i", "--input", type=Path, help="Nexo input folder (contains items/ and pack/)")
    parser.add_argument("-o", "--output", type=Path, help="CraftEngine output folder")
    parser.add_argument("-n", "--namespace", help="Namespace for generated keys")
    parser.add_argument(
        "--blacklist",
        nargs="*",
        metavar="FOLDER",
        help="Folder names to skip while scanning items",
    )
    parser.add_argument("--author", help="pack.yml author")
    parser.add_argument("--pack-version", help="pack.yml version")
    parser.add_argument("--description", help="pack.yml description")
    parser.add_argument(
        "--skip-assets", action="store_true", help="Do not copy pack/assets for this run"
    )
    parser.add_argument("--profile", default="default", help="Settings profile name")
    parser.add_argument("--settings", type=Path, help="Use this INI file for settings")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console logging level",
    )
    return parser


def apply_arguments(settings: AppSettings, args: argparse.Namespace) -> None:
    """Store command-line values in settings so later runs reuse them.

    Raises:
        ConfigError: If the namespace is not a valid resource namespace
    """
    if args.namespace is not None:
        if not is_valid_namespace(args.namespace):
            raise ConfigError(f"Invalid namespace: {args.namespace!r}")
        settings.namespace = args.namespace
    if args.input is not None:
        settings.input_path = args.input
    if args.output is not None:
        settings.output_path = args.output
    if args.blacklist is not None:
        settings.folder_blacklist = args.blacklist
    if args.author is not None:
        settings.pack.author = args.author
    if args.pack_version is not None:
        settings.pack.version = args.pack_version
    if args.description is not None:
        settings.pack.description = args.description
    if args.log_level is not None:
        settings.console_log_level = args.log_level


def run(settings: AppSettings, skip_assets: bool = False) -> int:
    """Run asset copying, pack.yml generation and item conversion."""
    logger = logging.getLogger(f"{__name__}.run")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"  {warning}")
    if not validation.is_valid:
        logger.error("Configuration validation failed:")
        for error in validation.errors:
            logger.error(f"  {error}")
        return 1

    input_path = settings.input_path
    output_path = settings.output_path
    init_folders([output_path])

    if settings.copy_assets and not skip_assets:
        copy_assets(input_path, output_path)

    generate_pack_yml(
        output_path,
        PackInfo(
            author=settings.pack.author,
            version=settings.pack.version,
            description=settings.pack.description,
            namespace=settings.namespace,
        ),
    )

    ConversionService.from_settings(settings).run(input_path, output_path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(profile=args.profile, settings_file=args.settings)
        apply_arguments(settings, args)

        log_file = Path(settings.log_file_path)
        if settings.clear_logs_on_startup:
            clear_logs(log_file)

        setup_logging(settings)
        logger.info(f"Starting nexo2ce {__version__}")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        return run(settings, skip_assets=args.skip_assets)

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"nexo2ce: {e}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
