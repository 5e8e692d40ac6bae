from pydantic import BaseModel, Field
from typing import List, Dict, Optional


# The external catalog carries no usable values for these fields
DEFAULT_CATEGORY = "Clay Integration"
DEFAULT_INTEGRATION_DIFFICULTY = "Medium"
DEFAULT_PRICING_MODEL = "Varies"


class Tool(BaseModel):
    """Canonical catalog record"""
    name: str = Field(..., min_length=1)
    description: str = ""
    website: str = ""
    category: str = DEFAULT_CATEGORY
    use_cases: List[str] = []
    integration_difficulty: str = DEFAULT_INTEGRATION_DIFFICULTY
    pricing_model: str = DEFAULT_PRICING_MODEL
    integration_overview: str = ""

    @property
    def lookup_key(self) -> str:
        return normalize_tool_name(self.name)


class CatalogSnapshot(BaseModel):
    """Normalized catalog used for a single recommendation request"""
    tools: List[Tool] = []
    lookup: Dict[str, Tool] = {}
    source: Optional[str] = None

    @classmethod
    def from_tools(cls, tools: List[Tool], source: Optional[str] = None) -> "CatalogSnapshot":
        # Later duplicates overwrite earlier ones
        lookup = {tool.lookup_key: tool for tool in tools}
        return cls(tools=list(tools), lookup=lookup, source=source)

    @property
    def names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def get(self, name: Optional[str]) -> Optional[Tool]:
        if not isinstance(name, str):
            return None
        return self.lookup.get(normalize_tool_name(name))

    def __len__(self) -> int:
        return len(self.tools)


def normalize_tool_name(name: str) -> str:
    return name.strip().lower()
