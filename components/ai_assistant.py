"""
AI Assistant
============
Streamlit-side client for the AI gateway used by the deal onboarding and
persona builder tabs.

Credentials come from ``st.secrets["ai_gateway"]`` (``api_key`` plus optional
``url`` and ``model``). Without them every call degrades to the rule-based
fallback or reports that generation is unavailable.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import openai
import streamlit as st

from onboarding_engine import SUGGESTION_TOOL, TOOL_CHOICE, TOOL_NAME, build_messages, fallback_suggestions
from persona_engine import (
    build_generation_messages,
    build_prompt_messages,
    extract_persona_json,
    parse_hat_suggestions,
)

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-3-flash-preview"

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
CREDITS_MESSAGE = "AI credits depleted. Please add credits to continue."


class AIAssistant:
    """
    Thin wrapper over the OpenAI-compatible gateway.
    """

    def __init__(self):
        self.client: Optional[openai.OpenAI] = None
        self.model = DEFAULT_MODEL
        self._initialize_client()

    def _initialize_client(self):
        try:
            config = st.secrets.get("ai_gateway", {})
        except FileNotFoundError:
            return
        api_key = config.get("api_key")
        if api_key:
            self.model = config.get("model", DEFAULT_MODEL)
            self.client = openai.OpenAI(
                base_url=config.get("url", DEFAULT_GATEWAY_URL),
                api_key=api_key,
                max_retries=0,
            )

    def is_available(self) -> bool:
        return self.client is not None

    def _complete(self, messages: List[Dict[str, str]], **kwargs):
        return self.client.chat.completions.create(
            model=self.model, messages=messages, temperature=0.7, **kwargs
        )

    def _report(self, error: openai.OpenAIError) -> None:
        if isinstance(error, openai.RateLimitError):
            st.error(RATE_LIMIT_MESSAGE)
        elif isinstance(error, openai.APIStatusError) and error.status_code == 402:
            st.error(CREDITS_MESSAGE)
        else:
            st.error(f"AI gateway error: {error}")

    # =========================================================================
    # DEAL ONBOARDING
    # =========================================================================

    def onboarding_suggestions(
        self,
        role: str,
        experience_level: str,
        existing_preferences: Optional[Dict[str, Any]] = None
    ) -> Tuple[Optional[Dict[str, Any]], str]:
        """
        Personalized deal sourcing suggestions.

        Returns:
            (suggestions, source) where source is "ai" or "fallback"; when
            credits are exhausted suggestions is None and source is "error"
        """
        fallback = fallback_suggestions(role, experience_level)
        if not self.is_available():
            return fallback, 'fallback'

        try:
            response = self._complete(
                build_messages(role, experience_level, existing_preferences),
                tools=[SUGGESTION_TOOL],
                tool_choice=TOOL_CHOICE,
            )
        except openai.RateLimitError:
            return fallback, 'fallback'
        except openai.OpenAIError as e:
            self._report(e)
            if isinstance(e, openai.APIStatusError) and e.status_code == 402:
                return None, 'error'
            return fallback, 'fallback'

        calls = response.choices[0].message.tool_calls or []
        arguments = next((c.function.arguments for c in calls if c.function.name == TOOL_NAME), None)
        if not arguments:
            return fallback, 'ai'
        try:
            return json.loads(arguments), 'ai'
        except ValueError:
            st.warning("The AI reply could not be read; showing standard suggestions.")
            return fallback, 'fallback'

    # =========================================================================
    # PERSONAS
    # =========================================================================

    def generate_persona(self, job_title: str, department: str,
                         additional_context: Optional[str] = None) -> Optional[Dict[str, Any]]:
        if not self.is_available():
            st.info("AI generation is not configured.")
            return None
        try:
            response = self._complete(build_generation_messages(job_title, department, additional_context))
        except openai.OpenAIError as e:
            self._report(e)
            return None
        content = response.choices[0].message.content
        if not content:
            st.error("No content in AI response")
            return None
        try:
            return extract_persona_json(content)
        except ValueError as e:
            st.error(str(e))
            return None

    def generate_prompt(self, prompt_type: str, persona: Dict[str, Any],
                        hats: Optional[List[Dict[str, Any]]] = None,
                        hat: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Ecosystem prompt text, or parsed suggestions for ``hat_suggestions``.
        """
        if not self.is_available():
            st.info("AI generation is not configured.")
            return None
        try:
            response = self._complete(build_prompt_messages(prompt_type, persona, hats=hats, hat=hat), max_tokens=2000)
        except openai.OpenAIError as e:
            self._report(e)
            return None
        content = response.choices[0].message.content
        if not content:
            st.error("No content generated")
            return None
        if prompt_type == 'hat_suggestions':
            return parse_hat_suggestions(content)
        return content
