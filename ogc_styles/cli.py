# ============================================================================
# OGC STYLES GENERATOR CLI
# ============================================================================
# STATUS: Entry point - command line
# PURPOSE: Load, validate and generate a style catalog, then write the documents
# EXPORTS: build_parser, build_config, run, main
# DEPENDENCIES: argparse, config, infrastructure, ogc_styles.*, exceptions, util_logger
# ============================================================================
"""
OGC API Styles Generator command line.

Flags override the corresponding environment variables.
"""

import argparse
import sys
import uuid
from typing import List, Optional

from config import AppConfig
from exceptions import StylesGeneratorError
from infrastructure import WriterFactory
from util_logger import LoggerFactory, ComponentType, log_exceptions

from .repository import CatalogRepository
from .service import DocumentProducer
from .validator import validate_catalog

logger = LoggerFactory.create_logger(ComponentType.TRIGGER, "StylesGeneratorCLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ogc-styles-generator",
        description="Generates OGC API Styles documents to disk or Azure Blob Storage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write to a local directory
  ogc-styles-generator assets/ config.yaml --file-destination ./out

  # Write to a blob container
  AZURE_STORAGE_CONNECTION_STRING=... ogc-styles-generator assets/ config.yaml \\
      --azure-storage-container styles --azure-storage-blobs-prefix catalog/1.0
        """,
    )
    parser.add_argument(
        "asset_dir", metavar="ASSET_DIR",
        help="Directory holding the assets (stylesheets, thumbnails)",
    )
    parser.add_argument(
        "config", metavar="CONFIG",
        help="Path to the style catalog YAML",
    )
    parser.add_argument(
        "--file-destination", default=None,
        help="Directory the documents are written under (env FILE_DESTINATION)",
    )
    parser.add_argument(
        "--azure-storage-connection-string", default=None,
        help="Azure Storage connection string (env AZURE_STORAGE_CONNECTION_STRING)",
    )
    parser.add_argument(
        "--azure-storage-account-name", default=None,
        help="Storage account for DefaultAzureCredential (env AZURE_STORAGE_ACCOUNT_NAME)",
    )
    parser.add_argument(
        "--azure-storage-container", default=None,
        help="Blob container (env AZURE_STORAGE_CONTAINER)",
    )
    parser.add_argument(
        "--azure-storage-blobs-prefix", default=None,
        help="Blob name prefix (env AZURE_STORAGE_BLOBS_PREFIX)",
    )
    parser.add_argument(
        "--formats", default=None,
        help="Comma separated output formats, choose from: json (env API_FORMATS, default json)",
    )
    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Environment configuration with command line overrides applied."""
    config = AppConfig.from_environment()

    storage_overrides = {
        "file_destination": args.file_destination,
        "azure_connection_string": args.azure_storage_connection_string,
        "azure_account_name": args.azure_storage_account_name,
        "azure_container": args.azure_storage_container,
        "azure_prefix": args.azure_storage_blobs_prefix,
    }
    storage_data = config.storage.model_dump()
    storage_data.update({k: v for k, v in storage_overrides.items() if v is not None})

    data = config.model_dump()
    data["storage"] = storage_data
    if args.formats is not None:
        data["formats"] = args.formats
    return AppConfig.model_validate(data)


@log_exceptions(ComponentType.TRIGGER, "StylesGeneratorCLI")
def run(asset_dir: str, config_path: str, config: AppConfig) -> int:
    """
    Load, validate, generate and write.

    Returns:
        Number of documents written

    Raises:
        StylesGeneratorError: any failure, the first one aborts the run
    """
    run_id = uuid.uuid4().hex[:8]
    run_logger = LoggerFactory.create_with_context(
        ComponentType.TRIGGER, "StylesGeneratorRun", run_id=run_id, config_path=str(config_path)
    )
    run_logger.info(f"Starting run {run_id} for {config_path}")
    run_logger.debug(f"Configuration: {config.debug_dict()}")

    catalog = CatalogRepository().load(config_path)
    validate_catalog(catalog)

    written = 0
    with WriterFactory.create_writer(config.storage) as writer:
        destination = config.storage.destination.value
        run_logger = LoggerFactory.create_with_context(
            ComponentType.TRIGGER, "StylesGeneratorRun",
            run_id=run_id, config_path=str(config_path), destination=destination
        )
        run_logger.info(f"Writing documents to {destination}")
        with DocumentProducer(catalog, asset_dir, config.formats, validate=False) as producer:
            for document in producer:
                if document.is_error:
                    raise document.error
                writer.write(document.path, document.content, document.media_type)
                written += 1

    run_logger.info(f"Run {run_id} wrote {written} document(s)")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = build_config(args)
        run(args.asset_dir, args.config, config)
    except StylesGeneratorError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
