"""
Tests for catalog extraction and normalization.
"""
import pytest

from core.catalog.models import CatalogSnapshot, Tool
from core.catalog.normalizer import CatalogNormalizer, extract_tool_records, split_use_cases
from core.exceptions import CatalogUnavailableError, NoValidToolsInCatalogError


RECORDS = [{"name": "Alpha"}, {"name": "Beta"}, {"name": "Gamma"}]


class TestExtractToolRecords:
    """Locating the tool array inside the catalog document."""

    def test_bare_array(self):
        assert extract_tool_records(RECORDS) == RECORDS

    def test_tools_key(self):
        assert extract_tool_records({"meta": {}, "tools": RECORDS}) == RECORDS

    def test_data_key(self):
        assert extract_tool_records({"data": RECORDS}) == RECORDS

    def test_tools_key_wins_over_data_key(self):
        other = [{"name": "Other"}]
        assert extract_tool_records({"data": other, "tools": RECORDS}) == RECORDS

    def test_first_array_property_in_declaration_order(self):
        other = [{"name": "Other"}]
        document = {"version": 2, "items": RECORDS, "extra": other}
        assert extract_tool_records(document) == RECORDS

    def test_non_array_tools_key_falls_through(self):
        document = {"tools": "not a list", "records": RECORDS}
        assert extract_tool_records(document) == RECORDS

    def test_no_array_found(self):
        with pytest.raises(CatalogUnavailableError):
            extract_tool_records({"version": 2, "name": "catalog"})

    def test_empty_array(self):
        with pytest.raises(CatalogUnavailableError):
            extract_tool_records({"tools": []})

    def test_scalar_document(self):
        with pytest.raises(CatalogUnavailableError):
            extract_tool_records("tools")


class TestNormalizeRecord:
    """Mapping raw records onto Tool."""

    def test_aliased_fields(self):
        tool = CatalogNormalizer().normalize_record({
            "Name Of Tool": " EmailCheck Pro ",
            "Description": "bulk email verification",
            "Url": "https://emailcheck.example.com",
            "GTM Use Cases": "Verification, List cleaning",
            "Clay Integration Overview": "Runs as an enrichment",
        })

        assert tool.name == "EmailCheck Pro"
        assert tool.description == "bulk email verification"
        assert tool.website == "https://emailcheck.example.com"
        assert tool.use_cases == ["Verification", "List cleaning"]
        assert tool.integration_overview == "Runs as an enrichment"

    def test_generic_aliases(self):
        tool = CatalogNormalizer().normalize_record({
            "title": "Widget",
            "desc": "short description",
            "website": "https://widget.example.com",
            "useCases": "a,b",
            "integration": "native",
        })

        assert tool.name == "Widget"
        assert tool.description == "short description"
        assert tool.website == "https://widget.example.com"
        assert tool.use_cases == ["a", "b"]
        assert tool.integration_overview == "native"

    def test_name_alias_order(self):
        tool = CatalogNormalizer().normalize_record({"name": "second", "Name Of Tool": "first"})
        assert tool.name == "first"

    def test_blank_name_alias_falls_through(self):
        tool = CatalogNormalizer().normalize_record({"Name Of Tool": "   ", "name": "Fallback"})
        assert tool.name == "Fallback"

    def test_defaults(self):
        tool = CatalogNormalizer().normalize_record({"name": "Bare"})

        assert tool.description == ""
        assert tool.website == ""
        assert tool.use_cases == []
        assert tool.integration_overview == ""
        assert tool.category == "Clay Integration"
        assert tool.integration_difficulty == "Medium"
        assert tool.pricing_model == "Varies"

    def test_fixed_fields_ignore_record_values(self):
        normalizer = CatalogNormalizer(category="Zapier Integration")
        tool = normalizer.normalize_record({"name": "X", "category": "CRM", "pricing_model": "Free"})

        assert tool.category == "Zapier Integration"
        assert tool.pricing_model == "Varies"

    @pytest.mark.parametrize("record", [
        {},
        {"name": ""},
        {"name": "   "},
        {"name": 42},
        {"Description": "no name"},
        "just a string",
        None,
    ])
    def test_unusable_records_are_dropped(self, record):
        assert CatalogNormalizer().normalize_record(record) is None

    def test_split_use_cases(self):
        assert split_use_cases(" a , b,, c ") == ["a", "b", "c"]
        assert split_use_cases(["x ", " y"]) == ["x", "y"]
        assert split_use_cases(None) == []
        assert split_use_cases(7) == []


class TestNormalize:
    """Building the snapshot."""

    def test_unnamed_records_excluded(self, sample_catalog_document):
        snapshot = CatalogNormalizer().normalize(sample_catalog_document)

        raw_count = len(sample_catalog_document["tools"])
        assert len(snapshot.tools) == raw_count - 1
        assert snapshot.names == ["EmailCheck Pro", "LeadFinder", "Acme Tool"]
        assert len(snapshot.lookup) == 3

    def test_lookup_is_case_and_whitespace_insensitive(self, catalog_snapshot):
        tool = catalog_snapshot.lookup["acme tool"]
        assert tool.name == "Acme Tool"
        assert catalog_snapshot.get("  ACME tool ") is tool
        assert catalog_snapshot.get("emailcheck pro").name == "EmailCheck Pro"
        assert catalog_snapshot.get("unknown") is None
        assert catalog_snapshot.get(None) is None

    def test_duplicate_names_last_wins(self):
        document = [
            {"name": "Dup", "description": "first"},
            {"name": "dup ", "description": "second"},
        ]
        snapshot = CatalogNormalizer().normalize(document)

        assert len(snapshot.tools) == 2
        assert len(snapshot.lookup) == 1
        assert snapshot.get("DUP").description == "second"

    def test_all_records_unnamed(self):
        with pytest.raises(NoValidToolsInCatalogError):
            CatalogNormalizer().normalize({"tools": [{"description": "a"}, {"title": ""}]})

    def test_empty_catalog(self):
        with pytest.raises(CatalogUnavailableError):
            CatalogNormalizer().normalize([])

    def test_snapshot_from_tools(self):
        tools = [Tool(name="One"), Tool(name="Two")]
        snapshot = CatalogSnapshot.from_tools(tools, source="memory")

        assert len(snapshot) == 2
        assert snapshot.source == "memory"
        assert set(snapshot.lookup) == {"one", "two"}
