"""
Unit Tests for Platform Engine
==============================
"""

from datetime import date

from catalog.platforms import CAPABILITY_LABELS, ENTERPRISE_PLATFORMS
from platform_engine import (
    CSV_HEADER,
    MAX_COMPARED_PLATFORMS,
    capability_radar,
    comparison_table,
    export_filename,
    filter_platforms,
    get_platform,
    get_providers,
    platforms_for_department,
    platforms_to_csv,
    toggle_comparison,
)


class TestFilterPlatforms:
    """Tests for search, filters and sorting."""

    def test_no_filters_returns_all_sorted_by_name(self):
        """Test the default listing."""
        result = filter_platforms()
        assert len(result) == len(ENTERPRISE_PLATFORMS)
        names = [p['name'].lower() for p in result]
        assert names == sorted(names)

    def test_query_is_case_insensitive(self):
        """Test free text search over name and provider."""
        result = filter_platforms(query='COPILOT')
        assert {p['id'] for p in result} >= {'msft-copilot', 'github-copilot'}
        assert all('copilot' in (p['name'] + p['provider'] + p['model'] + p.get('focus', '')).lower()
                   for p in result)

    def test_priority_uses_recommendation(self):
        """Test the priority filter reads the recommendation priority."""
        result = filter_platforms(priority='OPTIONAL')
        assert {p['id'] for p in result} == {'perplexity-enterprise', 'xai-grok', 'hubspot-breeze'}

    def test_provider_filter(self):
        """Test provider filtering."""
        provider = get_platform('anthropic-claude')['provider']
        result = filter_platforms(providers=[provider])
        assert [p['id'] for p in result] == ['anthropic-claude']

    def test_sort_by_compliance(self):
        """Test descending compliance score."""
        scores = [p['compliance_score'] for p in filter_platforms(sort_by='compliance')]
        assert scores == sorted(scores, reverse=True)

    def test_does_not_mutate_input(self):
        """Test sorting works on a copy."""
        platforms = list(reversed(ENTERPRISE_PLATFORMS))
        filter_platforms(platforms)
        assert platforms == list(reversed(ENTERPRISE_PLATFORMS))

    def test_providers_unique_and_sorted(self):
        """Test provider list for the filter widget."""
        providers = get_providers()
        assert providers == sorted(set(providers))


class TestComparison:
    """Tests for the comparison selection."""

    def test_toggle_adds_and_removes(self):
        """Test toggling twice restores the selection."""
        selected = toggle_comparison([], 'xai-grok')
        assert selected == ['xai-grok']
        assert toggle_comparison(selected, 'xai-grok') == []

    def test_limit_is_enforced(self):
        """Test additions beyond the limit are ignored."""
        selected = [p['id'] for p in ENTERPRISE_PLATFORMS[:MAX_COMPARED_PLATFORMS]]
        assert toggle_comparison(selected, ENTERPRISE_PLATFORMS[-1]['id']) == selected

    def test_capability_radar(self):
        """Test one row per capability per platform."""
        frame = capability_radar(['msft-copilot', 'openai-chatgpt', 'unknown'])
        assert len(frame) == 2 * len(CAPABILITY_LABELS)
        assert list(frame.columns) == ['platform', 'capability', 'score']

    def test_comparison_table(self):
        """Test one column per known platform."""
        table = comparison_table(['msft-copilot', 'anthropic-claude'])
        assert list(table.columns) == ['Microsoft Copilot', 'Anthropic Claude Enterprise']
        assert 'Compliance Score' in table.index


class TestExport:
    """Tests for CSV export."""

    def test_csv_header_and_rows(self):
        """Test the header line and one line per platform."""
        csv = platforms_to_csv(ENTERPRISE_PLATFORMS[:2])
        lines = csv.strip().split('\n')
        assert lines[0] == CSV_HEADER
        assert len(lines) == 3

    def test_empty_export_has_header_only(self):
        """Test exporting nothing."""
        assert platforms_to_csv([]) == CSV_HEADER + '\n'

    def test_export_filename(self):
        """Test the dated filename."""
        assert export_filename(date(2025, 11, 25)) == 'INT_AI_Platforms_2025-11-25.csv'


class TestDepartments:
    """Tests for department recommendations."""

    def test_primary_and_secondary_first(self):
        """Test department platforms lead with the named picks."""
        result = platforms_for_department('sales')
        assert [p['name'] for p in result[:2]] == ['Microsoft Copilot', 'ChatGPT Enterprise']
        assert len({p['id'] for p in result}) == len(result)

    def test_unknown_department(self):
        """Test unknown departments return nothing."""
        assert platforms_for_department('astrology') == []
