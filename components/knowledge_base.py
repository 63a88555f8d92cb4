"""
Knowledge Base Tab
==================
Searchable document library backed by ``knowledge_base_documents``:
relevance search with snippets, category/tag filters, markdown reader,
create/edit/delete and bulk import from uploaded files.
"""

import pandas as pd
import streamlit as st

from components.ui_components import download_button, page_header, show_result
from document_search import (
    SUPPORTED_EXTENSIONS,
    filter_documents,
    generate_slug,
    get_categories,
    get_tags,
    search_documents,
)
from linear_theme import badge, empty_state
from services import KnowledgeService
from services.knowledge_service import DEFAULT_CATEGORY

FIELD_LABELS = {
    'title': 'Title',
    'description': 'Description',
    'content': 'Content',
    'tags': 'Tags',
    'category': 'Category',
}


def _parse_tags(raw: str):
    return [t.strip() for t in raw.split(',') if t.strip()]


def _render_document(doc):
    tags = ' '.join(badge(tag) for tag in doc.get('tags') or [])
    st.markdown(f"### {doc['title']}")
    st.markdown(f"{badge(doc.get('category') or DEFAULT_CATEGORY, 'info')} {tags}", unsafe_allow_html=True)
    if doc.get('description'):
        st.caption(doc['description'])
    st.markdown(doc.get('content') or '')
    download_button("Download (Markdown)", doc.get('content') or '', f"{doc['slug']}.md",
                    mime='text/markdown', key=f"kb_dl_{doc['id']}")


def _render_search(documents):
    query = st.text_input("Search the knowledge base", placeholder="At least two characters",
                          key='kb_search')
    if not query:
        return False

    results = search_documents(documents, query)
    st.caption(f"{len(results)} result(s) for \"{query}\"")
    for result in results:
        doc = result['document']
        with st.expander(f"{doc['title']} · score {result['score']}"):
            for match in result['matches']:
                st.markdown(f"**{FIELD_LABELS[match['field']]}:** {match['text']}")
            if st.button("Open", key=f"kb_open_{doc['id']}"):
                st.session_state['kb_selected_slug'] = doc['slug']
                st.rerun()
    return True


def _render_library(service: KnowledgeService, documents):
    c1, c2 = st.columns(2)
    with c1:
        category = st.selectbox("Category", [''] + get_categories(documents),
                                format_func=lambda c: c or 'All categories', key='kb_category')
    with c2:
        tags = st.multiselect("Tags", get_tags(documents), key='kb_tags')
    term = st.text_input("Filter by text", key='kb_filter')

    visible = filter_documents(documents, term, category=category or None, tags=tags)
    if not visible:
        empty_state("No documents", "Adjust the filters or add a document.")
        return

    frame = pd.DataFrame(visible).reindex(columns=['title', 'category', 'slug', 'updated_at'])
    st.dataframe(frame, use_container_width=True, hide_index=True)
    download_button("Export list (CSV)", frame.to_csv(index=False), "knowledge-base.csv", key='kb_csv')

    slug = st.selectbox("Read document", [d['slug'] for d in visible],
                        index=next((i for i, d in enumerate(visible)
                                    if d['slug'] == st.session_state.get('kb_selected_slug')), 0),
                        format_func=lambda s: next(d['title'] for d in visible if d['slug'] == s))
    doc = service.get_document(slug)
    if doc:
        _render_document(doc)


def _render_editor(service: KnowledgeService, user_id: str, documents):
    mode = st.radio("Action", ["Create", "Edit", "Delete"], horizontal=True, key='kb_mode')

    if mode == "Create":
        with st.form("kb_create"):
            title = st.text_input("Title")
            slug = st.text_input("Slug", help="Leave blank to derive from the title")
            description = st.text_input("Description")
            category = st.text_input("Category", value=DEFAULT_CATEGORY)
            tags = st.text_input("Tags (comma separated)")
            is_public = st.checkbox("Public")
            content = st.text_area("Content (Markdown)", height=300)
            submitted = st.form_submit_button("Create document", type="primary")
        if submitted:
            created = service.create_document(
                user_id, title, content, slug=slug or None, description=description,
                category=category, tags=_parse_tags(tags), is_public=is_public,
            )
            show_result(created, f"Created '{title}'",
                        f"Could not create the document. Check the title and slug ({generate_slug(title) or 'empty'}).")
        return

    if not documents:
        st.info("No documents yet.")
        return
    doc_id = st.selectbox("Document", [d['id'] for d in documents],
                          format_func=lambda i: next(d['title'] for d in documents if d['id'] == i))
    doc = next(d for d in documents if d['id'] == doc_id)

    if mode == "Edit":
        with st.form("kb_edit"):
            title = st.text_input("Title", value=doc['title'])
            slug = st.text_input("Slug", value=doc['slug'])
            description = st.text_input("Description", value=doc.get('description') or '')
            category = st.text_input("Category", value=doc.get('category') or DEFAULT_CATEGORY)
            tags = st.text_input("Tags (comma separated)", value=', '.join(doc.get('tags') or []))
            is_public = st.checkbox("Public", value=bool(doc.get('is_public')))
            content = st.text_area("Content (Markdown)", value=doc.get('content') or '', height=300)
            submitted = st.form_submit_button("Save changes", type="primary")
        if submitted:
            updated = service.update_document(
                doc_id, title=title, slug=slug, description=description or None,
                category=category, tags=_parse_tags(tags), is_public=is_public, content=content,
            )
            show_result(updated, "Document updated", "Invalid title or slug")
    else:
        st.warning(f"Delete '{doc['title']}'? This cannot be undone.")
        if st.button("Delete document", type="primary"):
            show_result(service.delete_document(doc_id), "Document deleted", "Delete failed")


def _render_import(service: KnowledgeService, user_id: str):
    st.caption("Supported: " + ', '.join(SUPPORTED_EXTENSIONS) + " (PDFs are read up to 50 pages)")
    files = st.file_uploader("Upload documents", accept_multiple_files=True,
                             type=[ext.lstrip('.') for ext in SUPPORTED_EXTENSIONS])
    category = st.text_input("Category for imported documents", value=DEFAULT_CATEGORY, key='kb_import_category')
    if files and st.button("Import", type="primary"):
        with st.spinner(f"Importing {len(files)} file(s)..."):
            result = service.import_files(user_id, files, category=category)
        if result['imported']:
            st.success(f"Imported {len(result['imported'])} document(s)")
        for error in result['errors']:
            st.error(f"{error['file']}: {error['message']}")


def render_knowledge_base(db, user_id: str):
    """Render the Knowledge base tab."""
    page_header("Knowledge Base", "Playbooks, research and delivery notes", icon="📚")
    service = KnowledgeService(db)
    documents = service.list_documents()

    browse_tab, manage_tab, import_tab = st.tabs(["Browse", "Manage", "Bulk import"])
    with browse_tab:
        if not _render_search(documents):
            _render_library(service, documents)
    with manage_tab:
        _render_editor(service, user_id, documents)
    with import_tab:
        _render_import(service, user_id)
