"""
Prompt Builder for tool recommendations

Builds the single instruction prompt that restricts the model to the
catalog's exact tool names.
"""

import logging
from typing import List

from core.catalog.models import CatalogSnapshot, Tool

logger = logging.getLogger(__name__)


RECOMMENDATION_PROMPT = """
You are a {platform} workflow consultant helping users find the right tools.

User request: "{query}"

You MUST ONLY recommend tools from this exact list. Use the EXACT tool names as they appear:

{numbered_names}

Tool details for context:
{tool_details}

RULES:
1. ONLY use tool names from the numbered list above
2. Recommend {min_results}-{max_results} most relevant tools
3. Calculate relevance score 0-1 based on how well each tool matches the user's needs
4. Provide clear reasoning for each recommendation
5. Use the EXACT tool name as it appears in the list

Analyze the user's request and recommend the most relevant tools.
"""


class PromptBuilder:
    """Builds recommendation prompts from a query and a catalog snapshot"""

    def __init__(self, platform_name: str = "Clay", min_results: int = 3, max_results: int = 5):
        self.platform_name = platform_name
        self.min_results = min_results
        self.max_results = max_results

    @staticmethod
    def format_numbered_names(tools: List[Tool]) -> str:
        """1-indexed candidate list, in catalog order"""
        return "\n".join(f"{i}. {tool.name}" for i, tool in enumerate(tools, start=1))

    @staticmethod
    def format_tool_details(tools: List[Tool]) -> str:
        return "\n".join(f"- {tool.name}: {tool.description}" for tool in tools)

    def build_prompt(self, query: str, snapshot: CatalogSnapshot) -> str:
        prompt = RECOMMENDATION_PROMPT.format(
            platform=self.platform_name,
            query=query.strip(),
            numbered_names=self.format_numbered_names(snapshot.tools),
            tool_details=self.format_tool_details(snapshot.tools),
            min_results=self.min_results,
            max_results=self.max_results,
        )
        logger.info(f"Built recommendation prompt with {len(snapshot.tools)} candidates ({len(prompt)} chars)")
        return prompt
