"""
Knowledge Service
=================
Business logic for knowledge base documents: CRUD with slug validation and
bulk import from uploaded files.
"""

from typing import List, Dict, Optional, Any

from document_search import extract_text, generate_slug, is_valid_slug, title_from_filename

DEFAULT_CATEGORY = 'general'


class KnowledgeService:
    """
    Service for knowledge base business logic.
    """

    def __init__(self, db_handler):
        """
        Initialize knowledge service.

        Args:
            db_handler: Database handler instance (SupabaseHandler)
        """
        self.db = db_handler

    def list_documents(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        return self.db.get_documents(category)

    def get_document(self, slug: str) -> Optional[Dict[str, Any]]:
        if not is_valid_slug(slug):
            return None
        return self.db.get_document_by_slug(slug)

    def _prepare(self, title: str, content: str, slug: Optional[str] = None,
                 description: Optional[str] = None, category: Optional[str] = None,
                 tags: Optional[List[str]] = None, is_public: bool = False) -> Optional[Dict[str, Any]]:
        if not title or not title.strip():
            return None
        slug = slug or generate_slug(title)
        if not is_valid_slug(slug):
            return None
        return {
            'title': title.strip(),
            'slug': slug,
            'content': content or '',
            'description': description or None,
            'category': (category or DEFAULT_CATEGORY).strip(),
            'tags': [t.strip() for t in (tags or []) if t and t.strip()],
            'is_public': bool(is_public),
        }

    def create_document(self, user_id: str, title: str, content: str, **fields) -> Optional[Dict[str, Any]]:
        """
        Create a document.

        Args:
            user_id: Owner
            title: Document title (required)
            content: Markdown body
            **fields: slug, description, category, tags, is_public

        Returns:
            Created row or None when the title or slug is invalid
        """
        document = self._prepare(title, content, **fields)
        if document is None:
            return None
        return self.db.create_document(user_id, document)

    def update_document(self, document_id: str, **updates) -> Optional[Dict[str, Any]]:
        if 'slug' in updates and not is_valid_slug(updates['slug']):
            return None
        if 'title' in updates and not (updates['title'] or '').strip():
            return None
        allowed = {'title', 'slug', 'content', 'description', 'category', 'tags', 'is_public'}
        payload = {k: v for k, v in updates.items() if k in allowed}
        if not payload:
            return None
        return self.db.update_document(document_id, payload)

    def delete_document(self, document_id: str) -> bool:
        return self.db.delete_document(document_id)

    def import_files(self, user_id: str, files: List[Any], category: Optional[str] = None) -> Dict[str, Any]:
        """
        Bulk import uploaded files.

        Args:
            user_id: Owner
            files: Objects with ``name`` and ``getvalue()`` (Streamlit uploads)
            category: Category applied to every imported document

        Returns:
            Dict with ``imported`` (created rows) and ``errors`` (file, message)
        """
        documents = []
        errors = []
        for upload in files:
            try:
                text = extract_text(upload.name, upload.getvalue())
            except ValueError as e:
                errors.append({'file': upload.name, 'message': str(e)})
                continue
            except Exception as e:
                # Corrupt PDF/DOCX: only this file fails
                errors.append({'file': upload.name, 'message': f"Extraction failed: {e}"})
                continue
            document = self._prepare(title_from_filename(upload.name), text, category=category)
            if document is None:
                errors.append({'file': upload.name, 'message': 'Could not derive a title from the file name'})
                continue
            documents.append(document)

        imported = self.db.create_documents(user_id, documents) if documents else []
        return {'imported': imported, 'errors': errors}
