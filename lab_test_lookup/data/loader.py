"""CSV loader producing fixed-shape lab test records."""

import csv
import io
from typing import Dict, List, Optional

import structlog

from ..core.catalog import LabTestCatalog
from ..core.normalizer import TextNormalizer
from ..exceptions import DatasetFormatError, DatasetNotFoundError, EmptyDatasetError
from ..models.record import LabTest

logger = structlog.get_logger(__name__)

BOM = "\ufeff"

# Normalized CSV header -> record field
HEADER_FIELDS: Dict[str, str] = {
    "id": "id",
    "test name": "name",
    "synonyms": "synonyms",
    "clinical purpose": "clinical_purpose",
    "biomarker or parameter": "biomarker_or_parameter",
    "all possible range / values": "range_or_values",
    "meaning result interpretation": "meaning_result_interpretation",
    "general notes": "general_notes",
}

_normalizer = TextNormalizer()


def _clean_header(header: Optional[str]) -> str:
    return _normalizer.normalize((header or "").replace(BOM, ""))


def _map_headers(headers: List[str]) -> Dict[int, str]:
    """Map column positions to record fields, ignoring unknown columns."""
    mapping = {}
    for position, header in enumerate(headers):
        field = HEADER_FIELDS.get(_clean_header(header))
        if field and field not in mapping.values():
            mapping[position] = field
    return mapping


def parse_records(text: str) -> List[LabTest]:
    """
    Parse CSV text into lab test records.
    
    The first non-blank line is the header row. Headers are matched
    case-insensitively, cells are trimmed, rows without a test name are
    dropped and missing identifiers are derived from the name. Duplicate
    identifiers get a numeric suffix in load order.
    
    Args:
        text: Raw CSV text
        
    Returns:
        List of records in dataset order
        
    Raises:
        DatasetFormatError: If there is no header row plus at least one data row,
            or the CSV is malformed
        EmptyDatasetError: If no row has a test name
    """
    if text.startswith(BOM):
        text = text[len(BOM):]
    
    # csv handles quoted fields, doubled quotes and CR/CRLF line endings
    try:
        rows = [
            row for row in csv.reader(io.StringIO(text, newline=""))
            if any(cell.strip() for cell in row)
        ]
    except csv.Error as e:
        raise DatasetFormatError(f"Malformed CSV: {e}") from e
    if len(rows) < 2:
        raise DatasetFormatError("No rows parsed from the dataset (check formatting).")
    
    columns = _map_headers(rows[0])
    logger.debug("Dataset headers mapped", headers=rows[0], fields=sorted(columns.values()))
    
    tests: List[LabTest] = []
    seen_ids: Dict[str, int] = {}
    
    for line_number, row in enumerate(rows[1:], start=2):
        values = {field: "" for field in HEADER_FIELDS.values()}
        for position, field in columns.items():
            if position < len(row):
                values[field] = row[position].strip()
        
        if not values["name"]:
            logger.debug("Skipping row without a test name", row=line_number)
            continue
        
        test_id = values["id"] or _normalizer.slugify(values["name"])
        if test_id in seen_ids:
            seen_ids[test_id] += 1
            unique_id = f"{test_id}-{seen_ids[test_id]}"
            while unique_id in seen_ids:
                seen_ids[test_id] += 1
                unique_id = f"{test_id}-{seen_ids[test_id]}"
            logger.warning(
                "Duplicate test id renamed",
                original_id=test_id,
                new_id=unique_id,
                row=line_number
            )
            test_id = unique_id
        seen_ids[test_id] = 1
        
        values["id"] = test_id
        tests.append(LabTest(**values))
    
    if not tests:
        raise EmptyDatasetError(
            "No test records were found. Ensure the CSV has a header row "
            "and at least one row with a Test Name."
        )
    
    return tests


def load_catalog(path: str) -> LabTestCatalog:
    """
    Load the dataset file into an immutable catalog.
    
    Args:
        path: Path to the CSV file
        
    Returns:
        LabTestCatalog with every named test
        
    Raises:
        DatasetNotFoundError: If the file cannot be read
        DatasetFormatError: If the file is not UTF-8, is malformed or has no usable rows
        EmptyDatasetError: If no row has a test name
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except OSError as e:
        raise DatasetNotFoundError(f"Failed to load {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetFormatError(f"{path} is not valid UTF-8: {e}") from e
    
    tests = parse_records(text)
    catalog = LabTestCatalog(tests)
    logger.info("Dataset loaded", path=path, **catalog.get_stats())
    return catalog
