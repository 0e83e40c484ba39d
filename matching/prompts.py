from schemas import ChatCompletionRequest, ChatMessage, JobMatchRequest, UserProfile

SYSTEM_PROMPT = """You are an AI career advisor specialized in the African job market, particularly for youth employment.
Consider local market conditions, cultural context, and development opportunities in Kenya and broader Africa.
Provide practical, actionable advice that takes into account:
- Local industry trends and growth sectors
- Skills that are in high demand locally
- Opportunities for remote work with international companies
- Local startup ecosystem and entrepreneurship opportunities
- Relevant training and upskilling programs available in the region"""


USER_TEMPLATE = """Analyze this job opportunity for a candidate in the African job market:

Job Description:
{job_description}

Candidate Profile:
- Skills: {skills}
- Experience: {experience}
- Education: {education_level} in {education_field}
{institution}
- Languages: {languages}

Preferences:
- Role: {role}
- Location: {location}
- Salary: {salary}
- Industry Interests: {industry}
- Work Type: {work_type}

Please provide:
1. A match score (0-100)
2. Specific recommendations for the candidate
3. Skill gaps that should be addressed
4. Local market insights (demand, growth potential, competition)
5. Upskilling suggestions (courses, certifications, resources)"""

NOT_SPECIFIED = "Not specified"
ANY = "Any"


def build_user_prompt(job_description: str, profile: UserProfile) -> str:
    """Interpolate the job and profile; missing optional fields get placeholders."""
    education = profile.education
    prefs = profile.preferences
    return USER_TEMPLATE.format(
        job_description=job_description,
        skills=", ".join(profile.skills),
        experience=profile.experience,
        education_level=(education and education.level) or NOT_SPECIFIED,
        education_field=(education and education.field) or NOT_SPECIFIED,
        institution=f"from {education.institution}" if education and education.institution else "",
        languages=", ".join(profile.languages or []) or NOT_SPECIFIED,
        role=prefs.role or ANY,
        location=prefs.location or ANY,
        salary=prefs.salary or NOT_SPECIFIED,
        industry=", ".join(prefs.industry or []) or ANY,
        work_type=prefs.work_type or ANY,
    )


def build_match_request(
    request: JobMatchRequest,
    model: str = "grok-2-latest",
    temperature: float = 0.7,
) -> ChatCompletionRequest:
    return ChatCompletionRequest(
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_user_prompt(request.job_description, request.user_profile)),
        ],
        model=model,
        temperature=temperature,
    )
