"""Render a health summary request into the prompt sent to the generation backend.

Everything here is a pure function of the request: the same request always
yields the same prompt string.
"""

from collections.abc import Sequence

from app.models.summary import Allergy, MedicalRecord, PatientProfile, SummaryRequest

# Only the earliest records are sent; the rest are dropped without error.
MAX_PROMPT_RECORDS = 20

TRANSLATION_LANGUAGES = {
    "ta": "Tamil",
    "ml": "Malayalam",
}

UNKNOWN = "Unknown"

SUMMARY_PROMPT = """You are a compassionate medical AI assistant helping migrants maintain their health records. Generate a comprehensive, easy-to-understand health summary.{language_note}

Patient Info:
- Name: {full_name}
- Blood Type: {blood_type}
- DOB: {date_of_birth}
- {allergy_summary}

Medical Records ({record_count} total):
{record_lines}

Generate a structured health summary with these sections using ## headers:
## Health Overview
## Critical Alerts
## Current Medications Summary
## Missing Records & Gaps
## Preventive Care Recommendations
## Health Insights

Be concise, use bullet points, highlight critical items. Note any missing important records like annual checkups, vaccinations, or screenings. Use clear, accessible language suitable for patients."""


def format_record(record: MedicalRecord) -> str:
    """One prompt line per record; empty optional fields add nothing."""
    line = f"- [{record.record_type}] {record.title}"
    if record.diagnosis:
        line += f" | Diagnosis: {record.diagnosis}"
    if record.medications:
        line += f" | Meds: {record.medications}"
    if record.visit_date:
        line += f" | Date: {record.visit_date}"
    if record.is_critical:
        line += " [CRITICAL]"
    return line


def format_allergies(allergies: Sequence[Allergy] | None) -> str:
    if not allergies:
        return "No known allergies"
    entries = ", ".join(f"{a.allergen}({a.severity})" for a in allergies)
    return f"Allergies: {entries}"


def language_instruction(language: str | None) -> str:
    """Translation request for supported locale codes, else an empty string."""
    name = TRANSLATION_LANGUAGES.get(language or "")
    if not name:
        return ""
    return f" Please include a {name} translation after each section."


def build_summary_prompt(request: SummaryRequest) -> str:
    profile = request.profile or PatientProfile()
    record_lines = "\n".join(
        format_record(r) for r in request.records[:MAX_PROMPT_RECORDS]
    )

    return SUMMARY_PROMPT.format(
        language_note=language_instruction(request.language),
        full_name=profile.full_name or UNKNOWN,
        blood_type=profile.blood_type or UNKNOWN,
        date_of_birth=profile.date_of_birth or UNKNOWN,
        allergy_summary=format_allergies(request.allergies),
        record_count=len(request.records),
        record_lines=record_lines,
    )
