"""Parser for bulk location uploads (address, child name)."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import List, Optional


@dataclass(slots=True)
class AddressRow:
    address: str
    child_name: Optional[str] = None


def _has_header(first_line: str) -> bool:
    return "address" in first_line.lower()


def parse_locations_csv(text: str) -> List[AddressRow]:
    """Turn uploaded CSV text into address rows.

    One row per location: first column is the address, optional second column the
    child's name. A first line mentioning "address" is treated as a header.
    Quoted fields may contain commas.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        return []
    if _has_header(lines[0]):
        lines = lines[1:]

    rows: List[AddressRow] = []
    for line in lines:
        if not line:
            continue
        # one reader per line so an unbalanced quote cannot swallow later rows
        try:
            fields = next(csv.reader([line], skipinitialspace=True))
        except csv.Error:
            fields = line.split(",")
        cleaned = [field.strip().strip('"').strip() for field in fields]
        if not cleaned or not cleaned[0]:
            continue
        child_name = cleaned[1] if len(cleaned) > 1 and cleaned[1] else None
        rows.append(AddressRow(address=cleaned[0], child_name=child_name))
    return rows
