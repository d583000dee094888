"""
CSV Utilities

Parsing of the hand-maintained products.csv and plain CSV export.

The catalog format is deliberately simple: a double quote toggles quoted
mode (it never escapes a literal quote) and commas only separate fields
outside quotes. Rows whose field count differs from the header are dropped.
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CsvParseResult:
    """Parsed records plus the 1-based line numbers that were dropped."""
    records: List[Dict[str, str]] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into raw (untrimmed) field values.

    Args:
        line: A single line of CSV text

    Returns:
        List of field values; quote characters are not included

    Example:
        >>> split_csv_line('A,"B,C",D')
        ['A', 'B,C', 'D']
    """
    result = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            result.append(''.join(current))
            current = []
        else:
            current.append(char)
    result.append(''.join(current))

    return result


def parse_csv_report(text: str) -> CsvParseResult:
    """
    Parse CSV text and report which lines were dropped.

    Args:
        text: Raw CSV text, first line is the header row

    Returns:
        CsvParseResult with records in file order
    """
    lines = text.strip().split('\n')
    headers = [h.strip() for h in lines[0].split(',')]
    result = CsvParseResult(headers=headers)

    for line_number, line in enumerate(lines[1:], start=2):
        values = split_csv_line(line)
        if len(values) != len(headers):
            result.skipped_lines.append(line_number)
            continue
        result.records.append({
            header: value.strip() for header, value in zip(headers, values)
        })

    if result.skipped_lines:
        logger.debug("Dropped %d malformed CSV rows (lines %s)",
                     len(result.skipped_lines), result.skipped_lines)

    return result


def parse_csv(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into a list of records (header name -> trimmed value).

    Malformed rows (field count != header count) are silently skipped.
    """
    return parse_csv_report(text).records


def read_csv_text(file_path: str | Path, encoding: str = 'utf-8-sig') -> str:
    """
    Read a CSV file as text.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8, BOM stripped)

    Returns:
        File contents
    """
    with open(file_path, 'r', encoding=encoding) as f:
        return f.read()


def write_csv(
    file_path: str | Path,
    rows: List[Dict[str, str]],
    fieldnames: Optional[List[str]] = None,
    encoding: str = 'utf-8'
) -> int:
    """
    Write rows to CSV file.

    Args:
        file_path: Path to output CSV file
        rows: List of dictionaries to write
        fieldnames: Column names (if None, uses keys from first row)
        encoding: File encoding (default: utf-8)

    Returns:
        Number of rows written
    """
    if not rows:
        return 0

    if fieldnames is None:
        fieldnames = list(rows[0].keys())

    with open(file_path, 'w', encoding=encoding, newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction='ignore')
        writer.writeheader()
        writer.writerows(rows)

    return len(rows)
