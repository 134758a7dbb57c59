"""
Parser module for wclist.

PDF text extraction flattens the cause list tables into a scattered run of
lines: each cell lands on its own line (or several), in reading order. Rows
are recovered by treating a bare number as the start of a record and
collecting the lines that follow it, then splitting the collected text on
the tenement code, which is the one token with a distinctive shape.
"""

import re
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from wclist.config import DEFAULT_HEADER_PHRASES, Config
from wclist.log import get_logger
from wclist.model import (
    ExemptionRecord,
    ForfeitureRecord,
    ObjectionRecord,
    Record,
    SectionType,
)
from wclist.pdfio import normalize_page_text

logger = get_logger(__name__)

# Regex patterns
MATTER_NUMBER_REGEX = re.compile(r"^\d+$")
LEADING_NUMBER_REGEX = re.compile(r"^(?P<number>\d+)\s+")
OBJECTION_NUMBER_REGEX = re.compile(r"^(?P<objection>\d{6,})\s+")
TENEMENT_REGEX = re.compile(r"\b(?P<tenement>[A-Z]+\s+\d+/\d+)\b")
# Rows whose columns survived extraction as runs of 2+ spaces or tabs
DELIMITED_ROW_REGEX = re.compile(r"^\d+(?:\s{2,}|\t)\S")
FIELD_SEPARATOR_REGEX = re.compile(r"\s{2,}|\t")

# Keyword groups, checked in order; the first group with a hit wins
SECTION_KEYWORDS = [
    (SectionType.OBJECTION, ("objection", "objector")),
    (SectionType.FORFEITURE, ("forfeiture", "forfeit")),
    (SectionType.EXEMPTION, ("exemption", "exempt")),
]


def detect_section_type(text: str) -> SectionType:
    """
    Determine which kind of matter a page lists.

    Args:
        text: Raw page text

    Returns:
        Section type, UNKNOWN when no keyword is present
    """
    text = (text or "").lower()
    for section_type, keywords in SECTION_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return section_type
    return SectionType.UNKNOWN


def is_header_line(line: str, header_phrases: Sequence[str] = DEFAULT_HEADER_PHRASES) -> bool:
    """
    Check if a line is a column header or section title.

    Args:
        line: Line to check
        header_phrases: Phrases that mark a header, in any case

    Returns:
        True if the line is a header, False otherwise
    """
    line = line.lower()
    return any(phrase.lower() in line for phrase in header_phrases)


def is_matter_number_line(line: str) -> bool:
    return bool(MATTER_NUMBER_REGEX.match(line))


def collect_content_window(
    lines: Sequence[str],
    start: int,
    matter_number: int,
    lookahead: int = 15,
    boundary_max_digits: int = 3,
    header_phrases: Sequence[str] = DEFAULT_HEADER_PHRASES,
) -> Tuple[List[str], int]:
    """
    Collect the lines belonging to the record that starts at ``start``.

    Collection stops at a header line, at a short bare number other than the
    current matter number (taken as the next record's start), or once
    ``lookahead`` lines past the start line have been taken.

    Args:
        lines: Normalized page lines
        start: Index of the matter number line
        matter_number: Parsed matter number of the record
        lookahead: Maximum number of lines collected after the start line
        boundary_max_digits: Longest bare number treated as a record start
        header_phrases: Phrases marking header lines

    Returns:
        Tuple of (content lines, index of the first line not consumed)
    """
    content = []
    i = start
    end = min(len(lines), start + lookahead + 1)

    while i < end:
        line = lines[i].strip()
        if not line:
            i += 1
            continue

        if i > start and is_matter_number_line(line) and len(line) <= boundary_max_digits:
            if int(line) != matter_number:
                break

        if is_header_line(line, header_phrases):
            break

        content.append(line)
        i += 1

    return content, i


def parse_objection_from_content(content: str, matter_number: int) -> Optional[ObjectionRecord]:
    """
    Parse an objection from the joined text of one record.

    Expected order: MATTER OBJECTION_NUMBER OBJECTOR TENEMENT APPLICANT

    Args:
        content: Record lines joined by single spaces
        matter_number: Matter number of the record

    Returns:
        Objection record, or None if an anchor is missing
    """
    content = content.strip()
    leading = LEADING_NUMBER_REGEX.match(content)
    if leading and int(leading.group("number")) == matter_number:
        content = content[leading.end():]

    objection_match = OBJECTION_NUMBER_REGEX.match(content)
    if not objection_match:
        logger.debug(f"No objection number for matter {matter_number}: '{content}'")
        return None
    objection_number = int(objection_match.group("objection"))
    content = content[objection_match.end():]

    tenement_match = TENEMENT_REGEX.search(content)
    if not tenement_match:
        logger.debug(f"No tenement for matter {matter_number}: '{content}'")
        return None

    record: ObjectionRecord = {
        "kind": SectionType.OBJECTION.value,
        "matter_number": matter_number,
        "tenement_number": tenement_match.group("tenement"),
        "comments": "",
        "objection_number": objection_number,
        "objector_name": content[:tenement_match.start()].strip(),
        "applicant_name": content[tenement_match.end():].strip(),
    }
    logger.debug(
        f"Matter {matter_number}, objection {objection_number}, "
        f"objector '{record['objector_name']}', tenement '{record['tenement_number']}', "
        f"applicant '{record['applicant_name']}'"
    )
    return record


def parse_forfeiture_from_content(content: str, matter_number: int) -> Optional[ForfeitureRecord]:
    # Column order of scattered forfeiture rows is not known
    logger.debug(f"Scattered forfeiture rows are not supported (matter {matter_number})")
    return None


def parse_exemption_from_content(content: str, matter_number: int) -> Optional[ExemptionRecord]:
    # Column order of scattered exemption rows is not known
    logger.debug(f"Scattered exemption rows are not supported (matter {matter_number})")
    return None


CONTENT_PARSERS: Dict[SectionType, Callable[[str, int], Optional[Record]]] = {
    SectionType.OBJECTION: parse_objection_from_content,
    SectionType.FORFEITURE: parse_forfeiture_from_content,
    SectionType.EXEMPTION: parse_exemption_from_content,
    SectionType.UNKNOWN: parse_objection_from_content,
}


def extract_row_from_position(
    lines: Sequence[str],
    start: int,
    matter_number: int,
    section_type: SectionType,
    cfg: Optional[Config] = None,
) -> Tuple[Optional[Record], int]:
    """
    Extract one record starting at a matter number line.

    Args:
        lines: Normalized page lines
        start: Index of the matter number line
        matter_number: Parsed matter number
        section_type: Section the page belongs to
        cfg: Application configuration

    Returns:
        Tuple of (record or None, index to resume scanning at)
    """
    cfg = cfg or Config()
    content_lines, next_index = collect_content_window(
        lines,
        start,
        matter_number,
        lookahead=cfg.parsing.lookahead_lines,
        boundary_max_digits=cfg.parsing.boundary_max_digits,
        header_phrases=cfg.parsing.header_phrases,
    )
    content = " ".join(content_lines)
    logger.debug(f"Content for matter {matter_number}: '{content}'")

    record = CONTENT_PARSERS[section_type](content, matter_number)
    return record, max(next_index, start + 1)


def get_field_or_empty(fields: Sequence[str], index: int) -> str:
    if index < len(fields):
        return fields[index]
    return ""


def parse_table_row(line: str, section_type: SectionType) -> Optional[Record]:
    """
    Parse a row whose columns are still separated by wide gaps.

    Args:
        line: A single line of text
        section_type: Section the page belongs to

    Returns:
        Record, or None if the line is not a complete row
    """
    fields = [field.strip() for field in FIELD_SEPARATOR_REGEX.split(line.strip())]
    if len(fields) < 3 or not is_matter_number_line(fields[0]):
        return None
    matter_number = int(fields[0])

    if section_type == SectionType.FORFEITURE:
        # matter, tenement, applicant, respondent, comments
        if len(fields) < 5:
            return None
        forfeiture: ForfeitureRecord = {
            "kind": SectionType.FORFEITURE.value,
            "matter_number": matter_number,
            "tenement_number": fields[1],
            "comments": get_field_or_empty(fields, 4),
            "applicant_name": fields[2],
            "respondent_name": fields[3],
        }
        return forfeiture

    if section_type == SectionType.EXEMPTION:
        # matter, tenement, applicant, [respondent], [comments]
        if len(fields) < 4:
            return None
        exemption: ExemptionRecord = {
            "kind": SectionType.EXEMPTION.value,
            "matter_number": matter_number,
            "tenement_number": fields[1],
            "comments": get_field_or_empty(fields, 4),
            "applicant_name": fields[2],
            "respondent_name": get_field_or_empty(fields, 3),
        }
        return exemption

    # matter, objection number, objector, tenement, applicant, comments
    if len(fields) < 6 or not is_matter_number_line(fields[1]):
        return None
    objection: ObjectionRecord = {
        "kind": SectionType.OBJECTION.value,
        "matter_number": matter_number,
        "tenement_number": fields[3],
        "comments": fields[5],
        "objection_number": int(fields[1]),
        "objector_name": fields[2],
        "applicant_name": fields[4],
    }
    return objection


class RowFailure(NamedTuple):
    """A row that started like a record but could not be parsed."""

    matter_number: int
    reason: str


def reconstruct_table_rows(
    lines: Sequence[str],
    section_type: SectionType,
    cfg: Optional[Config] = None,
    failures: Optional[List[RowFailure]] = None,
) -> List[Record]:
    """
    Rebuild the records of one page from its scattered lines.

    Args:
        lines: Normalized page lines
        section_type: Section the page belongs to
        cfg: Application configuration
        failures: If given, rows that could not be parsed are appended to it

    Returns:
        Records in the order they appear on the page
    """
    cfg = cfg or Config()
    records: List[Record] = []

    i = 0
    while i < len(lines):
        line = lines[i]

        # Delimited rows first, their comments may contain header words
        if DELIMITED_ROW_REGEX.match(line):
            record = parse_table_row(line, section_type)
            if record is not None:
                records.append(record)
                logger.debug(f"Extracted row with matter number: {record['matter_number']}")
            elif failures is not None:
                matter_number = int(LEADING_NUMBER_REGEX.match(line).group("number"))
                failures.append(RowFailure(matter_number, f"incomplete {section_type.value} row '{line}'"))
            i += 1
            continue

        # Skip header lines
        if is_header_line(line, cfg.parsing.header_phrases):
            i += 1
            continue

        if not is_matter_number_line(line):
            i += 1
            continue

        try:
            matter_number = int(line)
        except ValueError:
            i += 1
            continue

        start = i
        record, i = extract_row_from_position(lines, i, matter_number, section_type, cfg)
        if record is not None:
            records.append(record)
            logger.debug(f"Extracted item with matter number: {matter_number}")
        elif failures is not None:
            content = " ".join(part.strip() for part in lines[start:i] if part.strip())
            failures.append(RowFailure(matter_number, f"could not parse {section_type.value} row '{content}'"))

    return records


def parse_page_text(text: Optional[str], cfg: Optional[Config] = None,
                    failures: Optional[List[RowFailure]] = None) -> List[Record]:
    """
    Parse the raw text of one page into records.

    Args:
        text: Raw page text
        cfg: Application configuration
        failures: If given, rows that could not be parsed are appended to it

    Returns:
        Records found on the page
    """
    cfg = cfg or Config()
    lines = normalize_page_text(text, cfg.parsing.footer_prefixes)
    section_type = detect_section_type(text or "")
    logger.debug(f"Detected section type: {section_type.value}")
    return reconstruct_table_rows(lines, section_type, cfg, failures)
