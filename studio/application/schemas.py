"""
Name: Structured Output Schemas

Responsibilities:
  - Describe the JSON the model must return for structured calls
  - Validate model output before it reaches the HTTP layer

Collaborators:
  - domain.services.LLMService.generate_structured (response_schema)
  - routes.py (reused as response models)
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ThreadTweet(BaseModel):
    text: str = Field(..., min_length=1)


class Thread(BaseModel):
    # R: no max_length here; over-long tweets are truncated after parsing
    tweets: list[ThreadTweet] = Field(..., min_length=1)


class Analysis(BaseModel):
    score: float = Field(..., ge=0, le=100, description="Overall comprehension score (0-100)")
    feedback: str = Field(..., description="Qualitative feedback on the summary")
    strengths: list[str] = Field(default_factory=list, description="What the user did well")
    improvements: list[str] = Field(default_factory=list, description="Areas for improvement")


class Reanalysis(Analysis):
    progress_note: str = Field(..., description="Note on progress since last attempt")


class IdealSummary(BaseModel):
    ideal_summary: str = Field(..., description="Example of a well-written summary")
