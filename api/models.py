from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ExistingPreferences(BaseModel):
    targetIndustries: Optional[List[str]] = Field(None, description="Industries the investor already targets")
    riskTolerance: Optional[str] = Field(None, description="Current risk tolerance")


class OnboardingRequest(BaseModel):
    role: str = Field(..., description="Investor role, e.g. family_office")
    experienceLevel: str = Field(..., description="novice / intermediate / experienced / expert")
    existingPreferences: Optional[ExistingPreferences] = None


class InvestmentRange(BaseModel):
    min: float
    max: float


class OnboardingSuggestions(BaseModel):
    industries: List[str]
    dealStructures: List[str]
    stages: List[str]
    regions: List[str]
    riskTolerance: str
    investmentRange: InvestmentRange
    reasoning: str
    tips: List[str]


class OnboardingResponse(BaseModel):
    suggestions: OnboardingSuggestions
    source: Literal["ai", "fallback"]


class PersonaGenerateRequest(BaseModel):
    # Length and presence are checked in the route so the error text matches the UI copy.
    job_title: str = Field("", description="Job title to build a persona for")
    department: str = Field("", description="Department of the role")
    additional_context: Optional[str] = Field(None, description="Free-text hints for the model")


class HatPayload(BaseModel):
    name: str
    description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    key_tasks: List[str] = Field(default_factory=list)
    stakeholders: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    time_percentage: int = 0


class PersonaPromptRequest(BaseModel):
    type: Literal["claude", "copilot", "gemini", "hat_suggestions"]
    persona: Dict[str, Any] = Field(..., description="Employee persona row")
    hats: Optional[List[HatPayload]] = None
    hat: Optional[HatPayload] = None


class AssessmentScoreRequest(BaseModel):
    answers: Dict[str, Union[str, int, float, List[str]]] = Field(..., description="Question id -> answer")
    assessment_type: Literal["internal", "external"] = "external"
    organization_name: str = ""
    contact_email: str = ""
    user_id: Optional[str] = Field(None, description="User UUID (optional for dev)")
    persist: bool = Field(True, description="Save the scored result to ai_assessments")


class JobStatusResponse(BaseModel):
    job_id: str
    status: str
    kind: Optional[str] = None
    enqueued_at: Optional[str] = None
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    result: Optional[Any] = None
    error: Optional[str] = None
