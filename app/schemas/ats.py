from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SectionFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    contact: bool = False
    summary: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False


class ATSCheckResult(BaseModel):
    """Outcome of one ATS compliance pass over plain CV text."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    sections: SectionFlags = Field(default_factory=SectionFlags)


class ContactMatches(BaseModel):
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    linkedin: list[str] = Field(default_factory=list)


class AnalyzeTextRequest(BaseModel):
    text: str = Field(default="", max_length=200000)


class AnalyzeResponse(BaseModel):
    analysis: ATSCheckResult
    extracted_text: str


class CVScoreResponse(BaseModel):
    ats_score: int = Field(ge=0, le=100)
    analysis: ATSCheckResult
    cv_text: str
