"""Well-known central government scholarships returned when nothing could be parsed."""

from typing import Tuple

from app.core.schemas import DEFAULT_SCHOLARSHIP_LINK, ScholarshipRecord


FALLBACK_SCHOLARSHIPS: Tuple[ScholarshipRecord, ...] = (
    ScholarshipRecord(
        name="National Scholarship Portal (NSP)",
        amount="₹12,000 - ₹2,00,000 per year",
        eligibility="Various categories including merit-based, need-based, SC/ST, OBC, and minority students",
        deadline="Multiple deadlines (Usually October to December 2025)",
        description=(
            "Government of India's centralized platform offering various scholarship schemes "
            "for students across different categories and educational levels."
        ),
        link=DEFAULT_SCHOLARSHIP_LINK,
    ),
    ScholarshipRecord(
        name="Post Matric Scholarship Scheme for SC Students",
        amount="₹230 - ₹1,200 per month + academic fees",
        eligibility="SC students pursuing post-matriculation studies with family income below ₹2.5 lakh",
        deadline="November 30, 2025",
        description="Central government scheme providing financial assistance to SC students for higher education.",
        link=DEFAULT_SCHOLARSHIP_LINK,
    ),
    ScholarshipRecord(
        name="Merit cum Means Scholarship for Professional Courses",
        amount="₹20,000 per year",
        eligibility="Students with family income below ₹2.5 lakh and good academic record (80% or above)",
        deadline="December 31, 2025",
        description="UGC scheme for economically weaker students pursuing professional courses.",
        link=DEFAULT_SCHOLARSHIP_LINK,
    ),
    ScholarshipRecord(
        name="Inspire Scholarship for Higher Education",
        amount="₹80,000 per year",
        eligibility="Top 1% students in Class XII board examination pursuing B.Sc./B.S./B.Tech./Integrated M.Sc.",
        deadline="July 31, 2025",
        description="DST scheme to attract talented students to pursue careers in science and technology.",
        link="https://online-inspire.gov.in",
    ),
)
