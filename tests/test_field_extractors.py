"""
Tests for per-field extraction from a single scholarship segment.

Each extractor walks an ordered pattern list; these tests pin which pattern
wins and what the literal default is when nothing matches.
"""

from app.core.field_extractors import (
    DEFAULT_AMOUNT,
    DEFAULT_DEADLINE,
    DEFAULT_DESCRIPTION,
    DEFAULT_ELIGIBILITY,
    DEFAULT_NAME,
    extract_amount,
    extract_deadline,
    extract_description,
    extract_eligibility,
    extract_link,
    extract_name,
    is_valid_url,
)


class TestExtractName:

    def test_numbered_title(self):
        text = "1. National Merit Scholarship\nAmount: ₹50,000 per year"
        assert extract_name(text) == "National Merit Scholarship"

    def test_bold_title_drops_markers_and_article(self):
        text = "**The Tata Trusts Grant** for engineering students"
        assert extract_name(text) == "Tata Trusts Grant"

    def test_standalone_capitalized_phrase(self):
        text = "Kotak Kanya Scholarship supports girls in professional courses."
        assert extract_name(text) == "Kotak Kanya Scholarship"

    def test_line_start_title_with_punctuation(self):
        text = "Intro text\nSitaram Jindal Foundation's 2025 Scholarship\nMore details follow"
        assert extract_name(text) == "Sitaram Jindal Foundation's 2025 Scholarship"

    def test_too_short_title_falls_back_to_default(self):
        assert extract_name("## Ab Award\n") == DEFAULT_NAME

    def test_no_keyword_returns_default(self):
        text = "Some general advice about studying hard and saving money."
        assert extract_name(text) == DEFAULT_NAME


class TestExtractAmount:

    def test_rupee_symbol_with_unit(self):
        assert extract_amount("Amount: ₹50,000 per year") == "₹50,000 per year"

    def test_rupee_lakh(self):
        assert extract_amount("Covers up to ₹2.5 lakh of fees") == "₹2.5 lakh"

    def test_rs_prefix(self):
        assert extract_amount("Stipend of Rs. 12,000 annually") == "Rs. 12,000 annually"

    def test_inr_prefix(self):
        assert extract_amount("Award: INR 2,00,000 for tuition") == "INR 2,00,000"

    def test_label_without_digits_is_skipped(self):
        assert extract_amount("Amount: to be decided by the trust") == DEFAULT_AMOUNT

    def test_no_amount(self):
        assert extract_amount("Financial help is available") == DEFAULT_AMOUNT


class TestExtractEligibility:

    def test_explicit_label(self):
        text = "Eligibility: Students from families earning under three lakh per year\n"
        assert extract_eligibility(text) == "Students from families earning under three lakh per year"

    def test_for_students_phrase(self):
        text = "Open for first generation engineering students across India."
        assert extract_eligibility(text) == "first generation engineering students"

    def test_default(self):
        assert extract_eligibility("Nothing relevant here") == DEFAULT_ELIGIBILITY


class TestExtractDeadline:

    def test_explicit_label(self):
        assert extract_deadline("Deadline: December 31, 2025\n") == "December 31, 2025"

    def test_month_name_date(self):
        text = "Applications close on March 15, 2026 for all"
        assert extract_deadline(text) == "March 15, 2026"

    def test_due_by_phrase(self):
        assert extract_deadline("Forms are due by the end of October") == "by the end of October"

    def test_year_deadline_phrase(self):
        assert extract_deadline("Submit before the 2025 deadline.") == "2025 deadline"

    def test_numeric_date(self):
        assert extract_deadline("Submit forms before 15/11/2025 online") == "15/11/2025"

    def test_default(self):
        assert extract_deadline("No dates mentioned") == DEFAULT_DEADLINE


class TestExtractDescription:

    def test_first_two_sentences_joined(self):
        text = (
            "This scholarship supports talented students from rural districts of Maharashtra. "
            "It covers tuition and hostel fees for four years! Apply soon."
        )
        assert extract_description(text) == (
            "This scholarship supports talented students from rural districts of Maharashtra. "
            "It covers tuition and hostel fees for four years."
        )

    def test_label_sentences_are_skipped(self):
        text = (
            "Eligibility Criteria: students in the top ten percent of their class. "
            "The grant is funded by a private foundation based in Pune city."
        )
        assert extract_description(text) == "The grant is funded by a private foundation based in Pune city."

    def test_default_when_only_short_sentences(self):
        assert extract_description("Short. Tiny. Brief.") == DEFAULT_DESCRIPTION


class TestExtractLink:

    def test_absolute_url(self):
        assert extract_link("Apply here https://example.gov.in/apply") == "https://example.gov.in/apply"

    def test_trailing_sentence_punctuation_removed(self):
        assert extract_link("Visit https://scholarships.gov.in.") == "https://scholarships.gov.in"

    def test_bold_wrapped_url_loses_emphasis_markers(self):
        text = "**Link:** **https://scholarships.gov.in/nsp**"
        assert extract_link(text) == "https://scholarships.gov.in/nsp"

    def test_bare_domain_after_label_gets_https(self):
        text = "Apply at the portal: www.buddy4study.com for details"
        assert extract_link(text) == "https://www.buddy4study.com"

    def test_invalid_url_falls_through_to_next_pattern(self):
        text = "Broken https://[bad see website www.example.org"
        assert extract_link(text) == "https://www.example.org"

    def test_no_link(self):
        assert extract_link("No link in this text") is None

    def test_is_valid_url(self):
        assert is_valid_url("https://online-inspire.gov.in")
        assert not is_valid_url("not a url")
