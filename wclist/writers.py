"""
Output writers for wclist.
"""

import csv
import json
import os
import re
from typing import Any, Dict, List, Optional, Sequence

from wclist.config import Config
from wclist.log import get_logger
from wclist.matcher import MatchResult
from wclist.model import (
    OutputError,
    Record,
    SectionType,
    applying_party,
    objection_number,
    responding_party,
)

logger = get_logger(__name__)

RECORD_FIELDS = ['kind', 'matter_number', 'objection_number', 'tenement_number',
                 'applying_party', 'responding_party', 'comments', 'source_page']

MATCH_FIELDS = ['client_name', 'client_tenement_number', 'kind', 'matter_number',
                'objection_number', 'tenement_number', 'applying_party',
                'responding_party', 'reason']

TENEMENT_FORMAT = re.compile(r"^[A-Z]+\s+\d+/\d+$")


def record_to_row(record: Record) -> Dict[str, Any]:
    """
    Flatten a record into a row with category-independent columns.

    Args:
        record: Record to flatten

    Returns:
        Row keyed by RECORD_FIELDS
    """
    number = objection_number(record)
    return {
        'kind': record["kind"],
        'matter_number': record["matter_number"],
        'objection_number': "" if number is None else number,
        'tenement_number': record["tenement_number"],
        'applying_party': applying_party(record),
        'responding_party': responding_party(record),
        'comments': record.get("comments", ""),
        'source_page': record.get("source_page", ""),
    }


def _ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def write_json(data: Any, path: str, pretty: bool = True) -> None:
    """
    Write data to a JSON file.

    Args:
        data: JSON-serializable data
        path: Output file path
        pretty: Whether to pretty-print the JSON
    """
    logger.info(f"Writing JSON to {path}")

    try:
        _ensure_parent_dir(path)
        with open(path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing JSON to {path}: {e}")
        raise OutputError(f"Error writing JSON to {path}: {e}") from e


def write_rows_csv(rows: Sequence[Dict[str, Any]], fieldnames: List[str], path: str) -> None:
    """
    Write rows to a CSV file.

    Args:
        rows: Rows keyed by fieldnames
        fieldnames: CSV columns
        path: Output file path
    """
    logger.info(f"Writing CSV to {path}")

    try:
        _ensure_parent_dir(path)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)

        logger.info(f"Wrote {len(rows)} rows to {path}")
    except OSError as e:
        logger.error(f"Error writing CSV to {path}: {e}")
        raise OutputError(f"Error writing CSV to {path}: {e}") from e


def write_records_json(records: List[Record], path: str, pretty: bool = True) -> None:
    write_json(records, path, pretty)
    logger.info(f"Wrote {len(records)} records to {path}")


def write_records_csv(records: List[Record], path: str) -> None:
    write_rows_csv([record_to_row(record) for record in records], RECORD_FIELDS, path)


def write_matches_json(matches: List[MatchResult], path: str, pretty: bool = True) -> None:
    write_json([match.to_dict() for match in matches], path, pretty)
    logger.info(f"Wrote {len(matches)} matches to {path}")


def write_matches_csv(matches: List[MatchResult], path: str) -> None:
    write_rows_csv([match.to_dict() for match in matches], MATCH_FIELDS, path)


def validate_records(records: List[Record]) -> List[str]:
    """
    Validate records before writing outputs.

    Args:
        records: List of records to validate

    Returns:
        List of validation errors
    """
    errors = []
    kinds = {section.value for section in SectionType} - {SectionType.UNKNOWN.value}

    for i, record in enumerate(records):
        if record.get("kind") not in kinds:
            errors.append(f"Record {i}: Unknown kind: {record.get('kind')}")

        matter_number = record.get("matter_number")
        if not isinstance(matter_number, int) or matter_number < 0:
            errors.append(f"Record {i}: Invalid matter number: {matter_number}")

        tenement = record.get("tenement_number", "")
        if not TENEMENT_FORMAT.match(tenement):
            errors.append(f"Record {i}: Invalid tenement number format: {tenement}")

        if not applying_party(record):
            errors.append(f"Record {i}: Missing applying party")

        if "comments" not in record:
            errors.append(f"Record {i}: Missing comments")

    return errors


def write_outputs(records: List[Record], cfg: Config, matches: Optional[List[MatchResult]] = None) -> None:
    """
    Write records and matches to all configured output formats.

    Args:
        records: List of records to write
        cfg: Application configuration
        matches: Match results to write, if a search was run
    """
    logger.info(f"Writing {len(records)} records to outputs")

    # Validate records
    for error in validate_records(records):
        logger.warning(f"Validation error: {error}")

    if cfg.output.json_path:
        write_records_json(records, cfg.output.json_path, cfg.output.pretty_json)

    if cfg.output.csv_path:
        write_records_csv(records, cfg.output.csv_path)

    if matches is None:
        return

    if cfg.output.matches_json_path:
        write_matches_json(matches, cfg.output.matches_json_path, cfg.output.pretty_json)

    if cfg.output.matches_csv_path:
        write_matches_csv(matches, cfg.output.matches_csv_path)
