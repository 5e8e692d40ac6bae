"""
Catalog normalization.

Maps a loosely-structured JSON catalog document onto canonical Tool records.
The document may be a bare array, an object holding the array under a
conventional key, or an object whose first array-valued property holds it.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from core.exceptions import CatalogUnavailableError, NoValidToolsInCatalogError
from .models import (
    Tool,
    CatalogSnapshot,
    DEFAULT_CATEGORY,
    DEFAULT_INTEGRATION_DIFFICULTY,
    DEFAULT_PRICING_MODEL,
)

logger = logging.getLogger(__name__)

# Checked in order, first usable value wins
NAME_FIELDS = ("Name Of Tool", "name", "Name", "title")
DESCRIPTION_FIELDS = ("Description", "description", "desc")
WEBSITE_FIELDS = ("Url", "url", "website")
USE_CASE_FIELDS = ("GTM Use Cases", "use_cases", "useCases")
INTEGRATION_FIELDS = ("Clay Integration Overview", "integration")

CONVENTIONAL_ARRAY_KEYS = ("tools", "data")


def extract_tool_records(document: Any) -> List[Any]:
    """Locate the raw tool array inside a catalog document"""
    records: Optional[List[Any]] = None

    if isinstance(document, list):
        records = document
    elif isinstance(document, dict):
        for key in CONVENTIONAL_ARRAY_KEYS:
            if isinstance(document.get(key), list):
                records = document[key]
                break
        else:
            # dicts keep JSON declaration order
            records = next((value for value in document.values() if isinstance(value, list)), None)
        logger.debug(f"Catalog document keys: {list(document.keys())}")

    if records is None:
        raise CatalogUnavailableError(details="No tools array found in JSON")
    if not records:
        raise CatalogUnavailableError(details="Tools array in JSON is empty")

    logger.info(f"Raw tools found: {len(records)}")
    return records


def _first_value(record: Dict[str, Any], fields: Iterable[str]) -> Any:
    for field in fields:
        value = record.get(field)
        if value:
            return value
    return None


def _first_name(record: Dict[str, Any]) -> Optional[str]:
    for field in NAME_FIELDS:
        value = record.get(field)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def split_use_cases(value: Any) -> List[str]:
    """Split a comma-delimited use-case field into trimmed fragments"""
    if isinstance(value, str):
        fragments = value.split(",")
    elif isinstance(value, list):
        fragments = [item for item in value if isinstance(item, str)]
    else:
        return []
    return [fragment.strip() for fragment in fragments if fragment.strip()]


class CatalogNormalizer:
    """
    Normalizes raw catalog records into Tool objects.

    Records without a usable name are skipped with a warning. Fields the
    catalog cannot supply (category, difficulty, pricing) get fixed values.
    """

    def __init__(
        self,
        category: str = DEFAULT_CATEGORY,
        integration_difficulty: str = DEFAULT_INTEGRATION_DIFFICULTY,
        pricing_model: str = DEFAULT_PRICING_MODEL,
    ):
        self.category = category
        self.integration_difficulty = integration_difficulty
        self.pricing_model = pricing_model

    def normalize_record(self, record: Any, index: int = 0) -> Optional[Tool]:
        """Map one raw record onto a Tool, or None when it has no usable name"""
        if not isinstance(record, dict):
            logger.warning(f"Tool at index {index} is not an object: {record!r}")
            return None

        name = _first_name(record)
        if name is None:
            logger.warning(f"Tool at index {index} has invalid name: {record!r}")
            return None

        return Tool(
            name=name,
            description=_as_text(_first_value(record, DESCRIPTION_FIELDS)),
            website=_as_text(_first_value(record, WEBSITE_FIELDS)),
            category=self.category,
            use_cases=split_use_cases(_first_value(record, USE_CASE_FIELDS)),
            integration_difficulty=self.integration_difficulty,
            pricing_model=self.pricing_model,
            integration_overview=_as_text(_first_value(record, INTEGRATION_FIELDS)),
        )

    def normalize_records(self, records: List[Any]) -> List[Tool]:
        tools = []
        seen = set()
        for index, record in enumerate(records):
            tool = self.normalize_record(record, index)
            if tool is None:
                continue
            if tool.lookup_key in seen:
                logger.warning(f"Duplicate tool name '{tool.name}' at index {index}; later entry replaces earlier one in lookup")
            seen.add(tool.lookup_key)
            tools.append(tool)
        return tools

    def normalize(self, document: Any, source: Optional[str] = None) -> CatalogSnapshot:
        """Extract, normalize and index a catalog document"""
        records = extract_tool_records(document)
        tools = self.normalize_records(records)

        logger.info(f"Normalized tools: {len(tools)} of {len(records)}")
        if not tools:
            raise NoValidToolsInCatalogError(details=f"{len(records)} records, none with a usable name")

        snapshot = CatalogSnapshot.from_tools(tools, source=source)
        logger.info(f"Valid tools mapped: {len(snapshot.lookup)}")
        logger.debug(f"Sample tool names: {snapshot.names[:5]}")
        return snapshot
