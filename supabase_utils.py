"""
Supabase Database Utilities
Client construction and current-user resolution for the dashboard.
"""
import streamlit as st
from supabase import create_client, Client
from typing import Optional

NIL_UUID = "00000000-0000-0000-0000-000000000000"


def get_supabase_client() -> Optional[Client]:
    """Get Supabase client from Streamlit secrets"""
    try:
        supa = st.secrets["supabase"]
        url = supa["url"]
        # Prefer anon key, otherwise service_role_key or fallback 'key'
        if "anon_key" in supa:
            key = supa["anon_key"]
        elif "service_role_key" in supa:
            key = supa["service_role_key"]
        elif "key" in supa:
            key = supa["key"]
        else:
            raise KeyError("No Supabase key found (anon_key/service_role_key/key)")
        return create_client(url, key)
    except KeyError as e:
        st.error(f"Missing Supabase configuration in secrets: {e}")
        return None
    except Exception as e:
        st.error(f"Error connecting to Supabase: {e}")
        return None


def _dev_user_id() -> Optional[str]:
    try:
        return st.secrets.get("dev", {}).get("user_id")
    except FileNotFoundError:
        # No secrets.toml at all
        return None


def get_user_id() -> str:
    """
    Returns the current user ID.

    Resolution order: session state, ``st.secrets["dev"]["user_id"]``, the
    first row of ``profiles``, then the Nil UUID so UUID columns never get None.
    """
    if "user_id" in st.session_state and st.session_state.user_id:
        return st.session_state.user_id

    dev_user_id = _dev_user_id()
    if dev_user_id:
        st.session_state.user_id = dev_user_id
        return dev_user_id

    client = get_supabase_client()
    if client:
        try:
            resp = client.table("profiles").select("id").limit(1).execute()
            if resp.data and resp.data[0].get("id"):
                st.session_state.user_id = resp.data[0]["id"]
                return st.session_state.user_id
        except Exception as e:
            st.warning(f"Could not resolve a profile, using dev user: {e}")

    st.session_state.user_id = NIL_UUID
    return NIL_UUID


def set_user_id(user_id: str):
    """Set user ID in session state"""
    st.session_state.user_id = user_id
