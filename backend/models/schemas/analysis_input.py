"""Structured resume attributes produced by the analysis collaborator."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisInput(BaseModel):
    """What the upstream analysis detected in a resume.

    Field aliases are the camelCase names used on the wire; both the alias
    and the attribute name are accepted when validating.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    has_contact_info: bool = Field(..., alias="hasContactInfo")
    has_work_experience: bool = Field(..., alias="hasWorkExperience")
    has_education: bool = Field(..., alias="hasEducation")
    has_skills: bool = Field(..., alias="hasSkills")

    format_issues: list[str] = Field(default_factory=list, alias="formatIssues")
    skills: list[str] = Field(default_factory=list)
    industry_terms: list[str] = Field(default_factory=list, alias="industryTerms")
    action_verbs: list[str] = Field(default_factory=list, alias="actionVerbs")
    strengths: list[str] = Field(default_factory=list)

    @field_validator(
        "format_issues", "skills", "industry_terms", "action_verbs", "strengths",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
