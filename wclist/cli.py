"""
Command-line interface for wclist.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wclist.cause_list import CauseList
from wclist.config import Config, WebRetrievalConfig, load_config
from wclist.log import configure_logging
from wclist.matters import load_matters
from wclist.model import DocumentError, WclistError, objection_number
from wclist.web import download_cause_list
from wclist.writers import write_outputs

logger = logging.getLogger(__name__)


def find_input_files(patterns: List[str]) -> List[str]:
    """
    Expand input paths and globs into existing files.

    Args:
        patterns: File paths or glob patterns

    Returns:
        Sorted list of file paths
    """
    input_files = set()
    for pattern in patterns:
        path = Path(pattern)
        if path.is_file():
            input_files.add(str(path))
            continue
        for match in Path().glob(pattern):
            if match.is_file():
                input_files.add(str(match))
    return sorted(input_files)


def read_cause_lists(files: List[str], config: Config) -> List[CauseList]:
    """
    Read each file into its own cause list, skipping unreadable documents.

    Args:
        files: PDF paths
        config: Configuration

    Returns:
        Cause lists that were read successfully
    """
    cause_lists = []
    for file in files:
        logger.info(f"Processing {file}")
        cause_list = CauseList(config.cause_list.jurisdiction, config.cause_list.warden, cfg=config)
        try:
            cause_list.read_cause_list(file)
        except DocumentError as e:
            logger.error(f"Skipping {file}: {e}")
            continue
        cause_lists.append(cause_list)
    return cause_lists


def print_matches(matches) -> None:
    if not matches:
        print("\nNo matches found for assigned matters.")
        return

    print(f"\nFound {len(matches)} matches:")
    for i, match in enumerate(matches, 1):
        record = match.record
        print(f"\n--- Match {i} ---")
        print(f"Client: {match.matter['client_name']}")
        print(f"Tenement: {match.matter['tenement_number']}")
        print(f"Matter Number: {record['matter_number']}")
        number = objection_number(record)
        if number is not None:
            print(f"Objection Number: {number}")
        print(f"Listed Tenement: {record['tenement_number']}")
        print(f"Match Reason: {match.reason}")


def process_command(args: argparse.Namespace) -> int:
    """
    Process command-line arguments.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    # Load configuration
    config = load_config(args.config)

    # Set up logging
    configure_logging(config, args.log_level)

    if args.jurisdiction:
        config.cause_list.jurisdiction = args.jurisdiction
    if args.warden:
        config.cause_list.warden = args.warden

    if args.command == "fetch":
        url = args.url or (config.web_retrieval.url if config.web_retrieval else None)
        if not url:
            logger.error("A URL is required, pass --url or configure web_retrieval.url")
            return 1
        if config.web_retrieval:
            retrieval = config.web_retrieval.model_copy(update={"url": url})
        else:
            retrieval = WebRetrievalConfig(url=url)
        download_cause_list(retrieval, args.out)
        return 0

    input_files = find_input_files(args.input or config.input.paths)
    if not input_files:
        logger.error("No input files found")
        return 1

    if args.json:
        config.output.json_path = args.json
    if args.csv:
        config.output.csv_path = args.csv

    cause_lists = read_cause_lists(input_files, config)
    if not cause_lists:
        logger.error("No cause lists could be read")
        return 1
    records = [record for cause_list in cause_lists for record in cause_list.items]

    if args.command == "search":
        matters = load_matters(args.matters)
        matches = [match for cause_list in cause_lists
                   for match in cause_list.search_assigned_matters(matters)]

        if args.matches_json:
            config.output.matches_json_path = args.matches_json
        if args.matches_csv:
            config.output.matches_csv_path = args.matches_csv
        write_outputs(records, config, matches)

        if args.print_json:
            print(json.dumps([match.to_dict() for match in matches], indent=2))
        else:
            print_matches(matches)
    else:
        write_outputs(records, config)

    logger.info(f"Processed {len(cause_lists)} files, extracted {len(records)} records")
    return 0 if len(cause_lists) == len(input_files) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mining warden's court cause list extractor")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    parser.add_argument("--jurisdiction", help="Jurisdiction named on the cause list")
    parser.add_argument("--warden", help="Presiding warden")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Default command (process files)
    parser.add_argument("--in", dest="input", nargs="+", help="Input files")
    parser.add_argument("--json", help="JSON output file")
    parser.add_argument("--csv", help="CSV output file")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search cause lists for assigned matters")
    search_parser.add_argument("matters", help="YAML or JSON file of client matters")
    search_parser.add_argument("--matches-json", help="JSON file for match results")
    search_parser.add_argument("--matches-csv", help="CSV file for match results")
    search_parser.add_argument("--print-json", action="store_true", help="Print matches as JSON")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Download a published cause list")
    fetch_parser.add_argument("--url", help="URL to fetch")
    fetch_parser.add_argument("--out", required=True, help="Where to save the PDF")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)

    try:
        return process_command(args)
    except WclistError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
