"""
Database Connector - Supabase Handler
Centralized database operations for the consulting dashboard:
- AI readiness assessments
- Saved ROI calculations
- Knowledge base documents
- Employee personas, hats and ecosystem exports
- Symphony agents, phases and tasks
"""
import streamlit as st
from supabase import create_client, Client
from typing import List, Dict, Optional, Any
from datetime import datetime


class SupabaseHandler:
    """
    Handler class for Supabase database operations.
    Initializes client from Streamlit secrets and provides typed methods.
    """

    def __init__(self):
        """Initialize Supabase client from Streamlit secrets"""
        try:
            url = st.secrets["supabase"]["url"]
            # Support multiple key names
            if "service_role_key" in st.secrets["supabase"]:
                key = st.secrets["supabase"]["service_role_key"]
            elif "anon_key" in st.secrets["supabase"]:
                key = st.secrets["supabase"]["anon_key"]
            else:
                key = st.secrets["supabase"]["key"]

            self.client: Client = create_client(url, key)
        except KeyError as e:
            st.error(f"Missing Supabase configuration in secrets: {e}")
            st.stop()
        except Exception as e:
            st.error(f"Error connecting to Supabase: {e}")
            st.stop()

    # =========================================================================
    # 1. AI ASSESSMENTS
    # =========================================================================
    def get_assessments(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("ai_assessments")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading assessments: {e}")
            return []

    def create_assessment(self, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("ai_assessments").insert(record).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error saving assessment: {e}")
            return None

    def delete_assessment(self, assessment_id: str, user_id: str) -> bool:
        try:
            self.client.table("ai_assessments").delete().eq("id", assessment_id).eq("user_id", user_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting assessment: {e}")
            return False

    # =========================================================================
    # 2. ROI CALCULATIONS
    # =========================================================================
    def get_roi_calculations(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("roi_calculations")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading ROI calculations: {e}")
            return []

    def create_roi_calculation(self, user_id: str, name: str, inputs: Dict[str, Any],
                               outputs: Dict[str, Any], platform_ids: Optional[List[str]] = None) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("roi_calculations").insert({
                "user_id": user_id,
                "name": name,
                "inputs": inputs,
                "outputs": outputs,
                "platform_ids": platform_ids or [],
            }).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error saving ROI calculation: {e}")
            return None

    def delete_roi_calculation(self, calculation_id: str, user_id: str) -> bool:
        try:
            self.client.table("roi_calculations").delete().eq("id", calculation_id).eq("user_id", user_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting ROI calculation: {e}")
            return False

    # =========================================================================
    # 3. KNOWLEDGE BASE
    # =========================================================================
    def get_documents(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """Documents visible to the current user, most recently updated first."""
        try:
            query = self.client.table("knowledge_base_documents").select("*")
            if category:
                query = query.eq("category", category)
            response = query.order("updated_at", desc=True).execute()
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading documents: {e}")
            return []

    def get_document_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("knowledge_base_documents").select("*").eq("slug", slug).limit(1).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error loading document: {e}")
            return None

    def create_document(self, user_id: str, document: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            payload = {**document, "user_id": user_id}
            response = self.client.table("knowledge_base_documents").insert(payload).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error creating document: {e}")
            return None

    def create_documents(self, user_id: str, documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        try:
            payload = [{**doc, "user_id": user_id} for doc in documents]
            response = self.client.table("knowledge_base_documents").insert(payload).execute()
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error importing documents: {e}")
            return []

    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            payload = {**updates, "updated_at": datetime.now().isoformat()}
            response = self.client.table("knowledge_base_documents").update(payload).eq("id", document_id).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error updating document: {e}")
            return None

    def delete_document(self, document_id: str) -> bool:
        try:
            self.client.table("knowledge_base_documents").delete().eq("id", document_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting document: {e}")
            return False

    # =========================================================================
    # 4. EMPLOYEE PERSONAS & HATS
    # =========================================================================
    def get_personas(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("employee_personas")
                .select("*")
                .eq("user_id", user_id)
                .order("updated_at", desc=True)
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading personas: {e}")
            return []

    def get_persona(self, persona_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("employee_personas").select("*").eq("id", persona_id).limit(1).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error loading persona: {e}")
            return None

    def create_persona(self, user_id: str, persona: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("employee_personas").insert({**persona, "user_id": user_id}).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error creating persona: {e}")
            return None

    def update_persona(self, persona_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("employee_personas").update(updates).eq("id", persona_id).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error updating persona: {e}")
            return None

    def delete_persona(self, persona_id: str) -> bool:
        try:
            self.client.table("employee_personas").delete().eq("id", persona_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting persona: {e}")
            return False

    def get_hats(self, persona_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("employee_hats")
                .select("*")
                .eq("persona_id", persona_id)
                .order("priority")
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading hats: {e}")
            return []

    def create_hat(self, user_id: str, hat: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("employee_hats").insert({**hat, "user_id": user_id}).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error creating hat: {e}")
            return None

    def update_hat(self, hat_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("employee_hats").update(updates).eq("id", hat_id).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error updating hat: {e}")
            return None

    def delete_hat(self, hat_id: str) -> bool:
        try:
            self.client.table("employee_hats").delete().eq("id", hat_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting hat: {e}")
            return False

    # =========================================================================
    # 5. ECOSYSTEM EXPORTS
    # =========================================================================
    def get_exports(self, persona_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("ecosystem_exports")
                .select("*")
                .eq("persona_id", persona_id)
                .order("updated_at", desc=True)
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading exports: {e}")
            return []

    def find_export(self, persona_id: str, ecosystem: str, export_type: str) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self.client.table("ecosystem_exports")
                .select("id, version")
                .eq("persona_id", persona_id)
                .eq("ecosystem", ecosystem)
                .eq("export_type", export_type)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error looking up export: {e}")
            return None

    def insert_export(self, user_id: str, export: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("ecosystem_exports").insert({**export, "user_id": user_id}).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error saving export: {e}")
            return None

    def update_export(self, export_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            payload = {**updates, "updated_at": datetime.now().isoformat()}
            response = self.client.table("ecosystem_exports").update(payload).eq("id", export_id).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error updating export: {e}")
            return None

    # =========================================================================
    # 6. SYMPHONY (agents, phases, tasks)
    # =========================================================================
    def get_symphony_agents(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = self.client.table("symphony_agents").select("*").eq("user_id", user_id).order("phase").execute()
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading agents: {e}")
            return []

    def get_symphony_phases(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = self.client.table("symphony_phases").select("*").eq("user_id", user_id).order("phase_number").execute()
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading phases: {e}")
            return []

    def get_symphony_tasks(self, user_id: str) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table("symphony_tasks")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data if response.data else []
        except Exception as e:
            st.error(f"Error loading tasks: {e}")
            return []

    def insert_symphony_rows(self, table: str, rows: List[Dict[str, Any]]) -> bool:
        """Bulk insert into symphony_agents or symphony_phases."""
        if table not in ("symphony_agents", "symphony_phases"):
            st.error(f"Unsupported table for bulk insert: {table}")
            return False
        try:
            self.client.table(table).insert(rows).execute()
            return True
        except Exception as e:
            st.error(f"Error initializing {table}: {e}")
            return False

    def update_symphony_row(self, table: str, row_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table(table).update(updates).eq("id", row_id).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error updating {table}: {e}")
            return None

    def create_symphony_task(self, task: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.table("symphony_tasks").insert(task).execute()
            return response.data[0] if response.data else None
        except Exception as e:
            st.error(f"Error creating task: {e}")
            return None

    def delete_symphony_task(self, task_id: str) -> bool:
        try:
            self.client.table("symphony_tasks").delete().eq("id", task_id).execute()
            return True
        except Exception as e:
            st.error(f"Error deleting task: {e}")
            return False
