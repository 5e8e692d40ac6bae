"""
Tests for recommendation prompt construction.
"""
from services.recommender.prompt_builder import PromptBuilder


class TestPromptBuilder:

    def test_numbered_candidate_list(self, catalog_snapshot):
        numbered = PromptBuilder.format_numbered_names(catalog_snapshot.tools)
        assert numbered.splitlines() == [
            "1. EmailCheck Pro",
            "2. LeadFinder",
            "3. Acme Tool",
        ]

    def test_tool_details(self, catalog_snapshot):
        details = PromptBuilder.format_tool_details(catalog_snapshot.tools)
        assert "- EmailCheck Pro: bulk email verification" in details.splitlines()
        assert "- Acme Tool: Company data enrichment" in details.splitlines()

    def test_prompt_contents(self, catalog_snapshot):
        prompt = PromptBuilder(platform_name="Clay").build_prompt("  verify email addresses  ", catalog_snapshot)

        assert "You are a Clay workflow consultant" in prompt
        assert 'User request: "verify email addresses"' in prompt
        assert "1. EmailCheck Pro" in prompt
        assert "3. Acme Tool" in prompt
        assert "ONLY use tool names from the numbered list above" in prompt
        assert "Recommend 3-5 most relevant tools" in prompt
        assert "relevance score 0-1" in prompt
        assert "Use the EXACT tool name as it appears in the list" in prompt

    def test_query_with_braces_is_kept_verbatim(self, catalog_snapshot):
        prompt = PromptBuilder().build_prompt("map {first_name} into a template", catalog_snapshot)
        assert 'User request: "map {first_name} into a template"' in prompt

    def test_custom_result_range(self, catalog_snapshot):
        prompt = PromptBuilder(min_results=1, max_results=2).build_prompt("anything", catalog_snapshot)
        assert "Recommend 1-2 most relevant tools" in prompt
