"""
Unit Tests for Knowledge Base Search & Import
=============================================
"""

import io

import pytest
from docx import Document

from document_search import (
    context_snippet,
    extract_text,
    filter_documents,
    generate_slug,
    get_categories,
    get_file_extension,
    get_tags,
    is_supported,
    is_valid_slug,
    search_documents,
    title_from_filename,
)


class TestSlugs:
    """Tests for slug generation."""

    @pytest.mark.parametrize("title,slug", [
        ('Copilot Rollout Playbook', 'copilot-rollout-playbook'),
        ('  AI & Data: 2025 Edition!  ', 'ai-data-2025-edition'),
        ('---', ''),
    ])
    def test_generate_slug(self, title, slug):
        """Test lowercase dash-separated slugs."""
        assert generate_slug(title) == slug

    def test_is_valid_slug(self):
        """Test slug validation."""
        assert is_valid_slug('prompt-patterns')
        assert not is_valid_slug('Prompt Patterns')
        assert not is_valid_slug('')


class TestSearch:
    """Tests for relevance scored search."""

    def test_short_query_returns_nothing(self, sample_documents):
        """Test queries under two characters are ignored."""
        assert search_documents(sample_documents, 'c') == []
        assert search_documents(sample_documents, '   ') == []

    def test_title_description_and_content_scores(self, sample_documents):
        """Test the full query in title, description and content."""
        results = search_documents(sample_documents, 'Copilot')
        assert len(results) == 1
        assert results[0]['document']['id'] == 'd1'
        assert results[0]['score'] == 175
        assert [m['field'] for m in results[0]['matches']] == ['title', 'description', 'content']

    def test_word_matches_and_tags(self, sample_documents):
        """Test per-word content hits and tag bonuses."""
        results = search_documents(sample_documents, 'data governance')
        assert [r['document']['id'] for r in results] == ['d2']
        assert results[0]['score'] == 150
        fields = [m['field'] for m in results[0]['matches']]
        assert 'tags' in fields and 'content' in fields

    def test_category_match(self, sample_documents):
        """Test category hits score for every document in it."""
        results = search_documents(sample_documents, 'playbooks')
        assert {r['document']['id'] for r in results} == {'d1', 'd3'}
        assert all(r['score'] == 30 for r in results)

    def test_results_sorted_by_score(self, sample_documents):
        """Test highest score first."""
        results = search_documents(sample_documents, 'pilot')
        scores = [r['score'] for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_context_snippet(self):
        """Test ellipses mark cut text."""
        content = 'x' * 100 + 'needle' + 'y' * 200
        snippet = context_snippet(content, 'needle')
        assert snippet.startswith('...')
        assert snippet.endswith('...')
        assert 'needle' in snippet

    def test_context_snippet_without_match(self):
        """Test no match returns the opening text."""
        assert context_snippet('short text', 'zzz') == 'short text'


class TestFilter:
    """Tests for the list view filter."""

    def test_category_and_tags(self, sample_documents):
        """Test all selected tags must be present."""
        assert [d['id'] for d in filter_documents(sample_documents, category='playbooks')] == ['d1', 'd3']
        assert [d['id'] for d in filter_documents(sample_documents, tags=['microsoft', 'rollout'])] == ['d1']
        assert filter_documents(sample_documents, tags=['microsoft', 'prompts']) == []

    def test_search_term_covers_description(self, sample_documents):
        """Test the substring filter reads title, content and description."""
        assert [d['id'] for d in filter_documents(sample_documents, 'reusable')] == ['d3']

    def test_categories_and_tags(self, sample_documents):
        """Test sorted distinct values."""
        assert get_categories(sample_documents) == ['governance', 'playbooks']
        assert get_tags(sample_documents) == ['data', 'microsoft', 'policy', 'prompts', 'rollout']


class TestImport:
    """Tests for file text extraction."""

    def test_extensions(self):
        """Test extension detection."""
        assert get_file_extension('Report.PDF') == '.pdf'
        assert get_file_extension('README') == ''
        assert is_supported('notes.md')
        assert not is_supported('image.png')

    def test_text_file(self):
        """Test text files are decoded as UTF-8."""
        assert extract_text('notes.md', '# Heading\nBody'.encode('utf-8')) == '# Heading\nBody'

    def test_docx_file(self):
        """Test paragraphs are joined by newlines."""
        document = Document()
        document.add_paragraph('First paragraph')
        document.add_paragraph('Second paragraph')
        buffer = io.BytesIO()
        document.save(buffer)
        assert extract_text('brief.docx', buffer.getvalue()) == 'First paragraph\nSecond paragraph'

    def test_legacy_doc_rejected(self):
        """Test .doc files ask for .docx."""
        with pytest.raises(ValueError, match='docx'):
            extract_text('old.doc', b'')

    def test_unsupported_rejected(self):
        """Test unknown extensions raise."""
        with pytest.raises(ValueError):
            extract_text('tool.exe', b'')

    def test_title_from_filename(self):
        """Test titles are derived from file names."""
        assert title_from_filename('q3-board_update.md') == 'Q3 Board Update'
