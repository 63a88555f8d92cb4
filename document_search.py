"""
Knowledge Base Search & Import
==============================
Relevance-scored search over knowledge base documents, the list-view filter,
slug generation, and text extraction for imported files.

Scoring per document:
    - title contains the full query: +100, otherwise +30 per query word found
      inside a title word
    - description contains the query: +50
    - content contains the query: +20 plus 5 per occurrence (capped at +50),
      otherwise +10 per query word found in the content
    - +40 per matching tag
    - category contains the query: +30

This module is unit-testable and can be used independently of Streamlit.
"""

import io
import re
from typing import Any, Dict, List, Optional

import pdfplumber
from docx import Document
from PyPDF2 import PdfReader

MIN_QUERY_LENGTH = 2
MAX_PDF_PAGES = 50
PDF_TRUNCATION_NOTE = '\n[Document truncated: only first 50 pages processed]'

TEXT_EXTENSIONS = ['.txt', '.md', '.json', '.yaml', '.yml', '.csv', '.xml', '.html']
BINARY_EXTENSIONS = ['.pdf', '.docx', '.doc']
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS + BINARY_EXTENSIONS


def generate_slug(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to '-', trim edge dashes."""
    slug = re.sub(r'[^a-z0-9]+', '-', title.lower())
    return slug.strip('-')


def is_valid_slug(slug: str) -> bool:
    return bool(slug) and generate_slug(slug) == slug


def get_categories(documents: List[Dict[str, Any]]) -> List[str]:
    return sorted({doc['category'] for doc in documents if doc.get('category')})


def get_tags(documents: List[Dict[str, Any]]) -> List[str]:
    return sorted({tag for doc in documents for tag in (doc.get('tags') or [])})


def context_snippet(content: str, query: str, max_length: int = 150) -> str:
    """Text around the first match of ``query``, with ellipses where cut."""
    index = content.lower().find(query.lower())
    if index == -1:
        return content[:max_length] + ('...' if len(content) > max_length else '')

    start = max(0, index - 50)
    end = min(len(content), index + len(query) + 100)
    snippet = content[start:end]
    if start > 0:
        snippet = '...' + snippet
    if end < len(content):
        snippet = snippet + '...'
    return snippet


def _score_document(doc: Dict[str, Any], query: str, words: List[str]) -> Dict[str, Any]:
    score = 0
    matches: List[Dict[str, str]] = []

    title = doc.get('title', '')
    if query in title.lower():
        score += 100
        matches.append({'field': 'title', 'text': title})
    else:
        title_words = title.lower().split()
        for word in words:
            if any(word in tw for tw in title_words):
                score += 30

    description = doc.get('description') or ''
    if query in description.lower():
        score += 50
        matches.append({'field': 'description', 'text': description})

    content = doc.get('content') or ''
    lower_content = content.lower()
    if query in lower_content:
        occurrences = lower_content.count(query)
        score += 20 + min(occurrences * 5, 50)
        matches.append({'field': 'content', 'text': context_snippet(content, query)})
    else:
        for word in words:
            if word in lower_content:
                score += 10
                if not any(m['field'] == 'content' for m in matches):
                    matches.append({'field': 'content', 'text': context_snippet(content, word)})

    matching_tags = [
        tag for tag in (doc.get('tags') or [])
        if query in tag.lower() or any(word in tag.lower() for word in words)
    ]
    if matching_tags:
        score += 40 * len(matching_tags)
        matches.append({'field': 'tags', 'text': ', '.join(matching_tags)})

    category = doc.get('category') or ''
    if query in category.lower():
        score += 30
        matches.append({'field': 'category', 'text': category})

    return {'document': doc, 'score': score, 'matches': matches}


def search_documents(documents: List[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    """
    Rank documents against a free-text query.

    Args:
        documents: knowledge_base_documents rows
        query: Search text; blank or shorter than 2 characters returns []

    Returns:
        List of {document, score, matches} with score > 0, highest first
    """
    if not query.strip() or len(query) < MIN_QUERY_LENGTH:
        return []

    lower_query = query.lower()
    words = [w for w in lower_query.split() if len(w) > 1]

    results = [_score_document(doc, lower_query, words) for doc in documents]
    results = [r for r in results if r['score'] > 0]
    return sorted(results, key=lambda r: r['score'], reverse=True)


def filter_documents(
    documents: List[Dict[str, Any]],
    search_term: str = '',
    category: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """Plain substring filter used by the list view; all selected tags must be present."""
    term = search_term.lower()
    result = []
    for doc in documents:
        if term and not (
            term in doc.get('title', '').lower()
            or term in (doc.get('content') or '').lower()
            or term in (doc.get('description') or '').lower()
        ):
            continue
        if category and doc.get('category') != category:
            continue
        if tags and not set(tags).issubset(doc.get('tags') or []):
            continue
        result.append(doc)
    return result


# =============================================================================
# FILE IMPORT
# =============================================================================

def get_file_extension(filename: str) -> str:
    return '.' + filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''


def is_supported(filename: str) -> bool:
    return get_file_extension(filename) in SUPPORTED_EXTENSIONS


def _pdf_pages_pdfplumber(data: bytes) -> tuple:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        total = len(pdf.pages)
        texts = [(page.extract_text() or '') for page in pdf.pages[:MAX_PDF_PAGES]]
    return texts, total


def _pdf_pages_pypdf2(data: bytes) -> tuple:
    reader = PdfReader(io.BytesIO(data))
    total = len(reader.pages)
    texts = [(reader.pages[i].extract_text() or '') for i in range(min(total, MAX_PDF_PAGES))]
    return texts, total


def extract_pdf_text(data: bytes) -> str:
    """
    Extract text from at most the first 50 pages of a PDF.

    Tries pdfplumber first and falls back to PyPDF2 when pdfplumber cannot
    read the file.
    """
    try:
        texts, total = _pdf_pages_pdfplumber(data)
    except Exception:
        texts, total = _pdf_pages_pypdf2(data)

    if total > MAX_PDF_PAGES:
        texts.append(PDF_TRUNCATION_NOTE)
    return '\n\n'.join(texts)


def extract_docx_text(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    return '\n'.join(paragraph.text for paragraph in document.paragraphs)


def extract_text(filename: str, data: bytes) -> str:
    """
    Extract plain text from an uploaded file.

    Args:
        filename: Original file name, used for the extension
        data: Raw file bytes

    Returns:
        Extracted text

    Raises:
        ValueError: For legacy .doc files or unsupported extensions
    """
    ext = get_file_extension(filename)
    if ext == '.pdf':
        return extract_pdf_text(data)
    if ext == '.docx':
        return extract_docx_text(data)
    if ext == '.doc':
        raise ValueError('Legacy .doc format is not supported. Please save as .docx and try again.')
    if ext not in TEXT_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {ext or filename}")
    return data.decode('utf-8', errors='replace')


def title_from_filename(filename: str) -> str:
    """'q3-board_update.md' -> 'Q3 Board Update'."""
    stem = filename.rsplit('.', 1)[0] if '.' in filename else filename
    return re.sub(r'[-_]+', ' ', stem).strip().title()
