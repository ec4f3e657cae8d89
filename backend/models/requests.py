from pydantic import BaseModel, Field

from models.resume import ResumeDocument


class ATSScoreRequest(BaseModel):
    resume: ResumeDocument
    job_description: str | None = Field(None, description="Optional job description text")


class DeepAnalysisRequest(BaseModel):
    resume: ResumeDocument
    job_description: str | None = Field(None, description="Optional target job description")
