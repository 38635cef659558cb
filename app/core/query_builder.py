from app.core.schemas import ScholarshipSearchRequest


SYSTEM_PROMPT = (
    "You are an expert Indian education scholarship advisor. "
    "Provide accurate, current scholarship information specifically for Indian students. "
    "Focus on government schemes, private foundations, and institutional scholarships available in India. "
    "Always provide specific amounts, eligibility criteria, deadlines, and application links when available. "
    "Format your response clearly with scholarship names, amounts, eligibility, and deadlines."
)

QUERY_INSTRUCTIONS = """.

Please provide:
1. Government scholarships (central and state government schemes)
2. Private foundation and corporate scholarships
3. Institution-specific scholarships and grants
4. International scholarships for Indian students

For each scholarship, include:
- Exact scholarship name
- Amount/value in Indian Rupees
- Specific eligibility criteria
- Application deadline for 2025-2026 academic year
- Official website or application portal link

Focus on scholarships with upcoming deadlines and active application processes."""


def _clean(value):
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_search_query(profile: ScholarshipSearchRequest) -> str:
    """
    Natural-language search request for the completion API.

    Optional profile fields (location, category, budget, gpa) are appended only
    when present.
    """
    course = _clean(profile.course)
    college = _clean(profile.college_name)
    location = _clean(profile.location)
    category = _clean(profile.category)
    budget = _clean(profile.budget)
    gpa = _clean(profile.gpa)

    query = f"Find current active scholarships and financial aid opportunities for {course} students in India"
    if college:
        query += f" studying at {college}"
    if location:
        query += f" in {location} state/region"
    if category:
        query += f". Focus specifically on {category} scholarships"
    if budget:
        query += f" with funding amount in range {budget}"
    if gpa:
        query += f". Student has academic performance of {gpa}"

    return query + QUERY_INSTRUCTIONS
