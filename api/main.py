from __future__ import annotations

import json
import logging

import openai
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.auth import AuthContext, require_user
from api.config import get_settings
from api.gateway import (
    chat_completion,
    is_out_of_credits,
    is_rate_limited,
    message_content,
    status_of,
    tool_call_arguments,
)
from api.jobs import fetch_job, job_to_status
from api.models import (
    AssessmentScoreRequest,
    JobStatusResponse,
    OnboardingRequest,
    PersonaGenerateRequest,
    PersonaPromptRequest,
)
from api.queue import get_queue
from api.tasks import run_assessment_scoring_task
from onboarding_engine import SUGGESTION_TOOL, TOOL_CHOICE, TOOL_NAME, build_messages, fallback_suggestions
from persona_engine import (
    build_generation_messages,
    build_prompt_messages,
    extract_persona_json,
    parse_hat_suggestions,
    validate_generation_request,
)

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

PROMPT_MAX_TOKENS = 2000

app = FastAPI(title="INT AI Consulting API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/health")
def health() -> dict:
    return {"ok": True}


# =============================================================================
# ONBOARDING SUGGESTIONS
# =============================================================================

@app.post("/v1/onboarding/suggestions")
def onboarding_suggestions(req: OnboardingRequest):
    existing = req.existingPreferences.model_dump() if req.existingPreferences else None
    fallback = fallback_suggestions(req.role, req.experienceLevel)
    try:
        response = chat_completion(
            build_messages(req.role, req.experienceLevel, existing),
            tools=[SUGGESTION_TOOL],
            tool_choice=TOOL_CHOICE,
        )
    except openai.APIStatusError as e:
        if is_rate_limited(e):
            logger.info("Rate limited, returning fallback suggestions")
            return {"suggestions": fallback, "source": "fallback"}
        if is_out_of_credits(e):
            return _error(402, "AI credits depleted. Please add credits to continue.")
        logger.error("AI gateway error: %s %s", e.status_code, e.message)
        return _error(500, "Failed to generate suggestions")
    except (RuntimeError, openai.OpenAIError) as e:
        logger.error("Suggestion generation error: %s", e)
        return _error(500, str(e))

    arguments = tool_call_arguments(response, TOOL_NAME)
    if not arguments:
        return {"suggestions": fallback, "source": "ai"}
    try:
        suggestions = json.loads(arguments)
    except ValueError as e:
        logger.error("Suggestion generation error: %s", e)
        return _error(500, "Failed to parse suggestions")
    return {"suggestions": suggestions, "source": "ai"}


# =============================================================================
# EMPLOYEE PERSONAS
# =============================================================================

@app.post("/v1/personas/generate")
def generate_persona(req: PersonaGenerateRequest, user: AuthContext = Depends(require_user)):
    problem = validate_generation_request(req.job_title, req.department, req.additional_context)
    if problem:
        return _error(400, problem)

    try:
        response = chat_completion(build_generation_messages(req.job_title, req.department, req.additional_context))
    except openai.APIStatusError as e:
        if is_rate_limited(e):
            return _error(429, "Rate limit exceeded. Please try again in a moment.")
        if is_out_of_credits(e):
            return _error(402, "AI credits exhausted. Please add credits to continue.")
        logger.error("AI Gateway error: %s %s", e.status_code, e.message)
        return _error(500, f"AI Gateway error: {e.status_code}")
    except (RuntimeError, openai.OpenAIError) as e:
        logger.error("Error generating persona for user %s: %s", user.user_id, e)
        return _error(500, str(e))

    content = message_content(response)
    if not content:
        return _error(500, "No content in AI response")
    try:
        persona = extract_persona_json(content)
    except ValueError as e:
        logger.error("Failed to parse AI response: %s", content)
        return _error(500, str(e))
    return {"success": True, "persona": persona}


@app.post("/v1/personas/prompts")
def generate_persona_prompt(req: PersonaPromptRequest, user: AuthContext = Depends(require_user)):
    hats = [h.model_dump() for h in req.hats] if req.hats else None
    hat = req.hat.model_dump() if req.hat else None
    messages = build_prompt_messages(req.type, req.persona, hats=hats, hat=hat)

    try:
        response = chat_completion(messages, max_tokens=PROMPT_MAX_TOKENS)
    except openai.APIStatusError as e:
        if is_rate_limited(e):
            return _error(429, "Rate limit exceeded. Please try again later.")
        if is_out_of_credits(e):
            return _error(402, "AI credits depleted. Please add credits to continue.")
        logger.error("AI gateway error: %s %s", status_of(e), e.message)
        return _error(500, f"AI gateway error: {status_of(e)}")
    except (RuntimeError, openai.OpenAIError) as e:
        logger.error("Error generating %s prompt for user %s: %s", req.type, user.user_id, e)
        return _error(500, str(e))

    content = message_content(response)
    if not content:
        return _error(500, "No content generated")
    if req.type == "hat_suggestions":
        return {"suggestions": parse_hat_suggestions(content)}
    return {"content": content}


# =============================================================================
# BACKGROUND SCORING
# =============================================================================

@app.post("/v1/assessments/score")
def enqueue_assessment_scoring(req: AssessmentScoreRequest) -> dict:
    if not req.answers:
        raise HTTPException(status_code=400, detail="answers must not be empty")
    q = get_queue()
    job = q.enqueue(
        run_assessment_scoring_task,
        req.answers,
        req.assessment_type,
        req.organization_name,
        req.contact_email,
        req.user_id,
        req.persist,
        job_timeout=60 * 5,
        result_ttl=60 * 60,   # keep 1 hour
    )
    return {"job_id": job.id}


@app.get("/v1/jobs/{job_id}", response_model=JobStatusResponse)
def get_job_status(job_id: str):
    job = fetch_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job_to_status(job)
