from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


WorkType = Literal["remote", "hybrid", "onsite"]
DemandLevel = Literal["high", "medium", "low"]


# -------------------- USER PROFILE --------------------
class Education(BaseModel):
    level: Optional[str] = None
    field: Optional[str] = None
    institution: Optional[str] = None


class Preferences(BaseModel):
    role: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    industry: Optional[List[str]] = None
    work_type: Optional[WorkType] = None


class UserProfile(BaseModel):
    skills: List[str] = []
    experience: str = ""
    education: Optional[Education] = None
    preferences: Preferences = Field(default_factory=Preferences)
    languages: Optional[List[str]] = None


class JobMatchRequest(BaseModel):
    job_description: str
    user_profile: UserProfile


# -------------------- MATCH ANALYSIS --------------------
DEFAULT_GROWTH_POTENTIAL = "Moderate growth expected"
DEFAULT_LOCAL_COMPETITION = "Competitive market"
DEFAULT_SALARY_RANGE = "Varies by experience and location"


class LocalMarketInsights(BaseModel):
    model_config = ConfigDict(frozen=True)

    demand_level: DemandLevel = "medium"
    growth_potential: str = DEFAULT_GROWTH_POTENTIAL
    local_competition: str = DEFAULT_LOCAL_COMPETITION
    salary_range: str = DEFAULT_SALARY_RANGE


class UpskillingSuggestions(BaseModel):
    model_config = ConfigDict(frozen=True)

    courses: List[str] = []
    certifications: List[str] = []
    resources: List[str] = []


class JobMatchResponse(BaseModel):
    """Structured match analysis. Every field is always populated."""
    model_config = ConfigDict(frozen=True)

    match_score: int = Field(default=0, ge=0, le=100)
    recommendations: List[str] = []
    skill_gaps: List[str] = []
    local_market_insights: LocalMarketInsights = Field(default_factory=LocalMarketInsights)
    upskilling_suggestions: UpskillingSuggestions = Field(default_factory=UpskillingSuggestions)


# Outbound chat-completion payload
class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    messages: List[ChatMessage]
    model: str
    temperature: float


# -------------------- JOB LISTINGS (Adzuna) --------------------
class JobLocation(BaseModel):
    display_name: str = ""
    area: List[str] = []


class Company(BaseModel):
    display_name: str = ""


class JobCategory(BaseModel):
    label: str = ""
    tag: str = ""


class Job(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    title: str
    description: str = ""
    created: Optional[str] = None
    location: JobLocation = Field(default_factory=JobLocation)
    redirect_url: str = ""
    company: Company = Field(default_factory=Company)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    category: JobCategory = Field(default_factory=JobCategory)


class Category(BaseModel):
    tag: str
    label: str


class JobSearchParams(BaseModel):
    what: str = ""
    where: str = ""
    country: str = "za"
    category: str = ""
    max_days_old: int = 30
    sort_by: str = "date"
    page: int = 1
    results_per_page: int = 10


class JobSearchResult(BaseModel):
    jobs: List[Job] = []
    total_jobs: int = 0


# Job decorated with its analysis; match is None when enrichment failed
class JobWithMatch(BaseModel):
    job: Job
    match: Optional[JobMatchResponse] = None
