"""
Compliance analysis prompts.

The analyst system prompt fixes the JSON report format; the human template
carries the document and the filter focus.

Dependencies: langchain_core.prompts
System role: Prompt templates for compliance analysis
"""

from collections.abc import Sequence

from langchain_core.prompts import ChatPromptTemplate

from envreg.models.common import AreaOfInterest, RegulatoryScope
from envreg.models.compliance import ComplianceFilters
from envreg.models.law import SelectedLaw

MAX_DOCUMENT_CHARS = 5000

SYSTEM_PROMPT = """You are an expert environmental compliance analyst for Polimi Environmental Engineers. Your task is to analyze documents and check them against environmental regulations.

You will analyze the provided document content and generate a compliance report. You MUST respond with a valid JSON object in exactly this format:

{
  "status": "pass" or "fail",
  "summary": "Brief summary of the compliance analysis",
  "violations": [
    {
      "regulation": "The specific regulation violated (e.g., D.Lgs. 152/2006, Art. 73)",
      "description": "Description of what's wrong",
      "severity": "low" or "medium" or "high",
      "location": "Where in the document this was found (optional)"
    }
  ],
  "suggestions": [
    {
      "title": "Short title for the suggestion",
      "description": "Detailed description of what to do",
      "regulation": "Related regulation"
    }
  ]
}

Key regulations to check against:
- EU: Water Framework Directive 2000/60/EC, Industrial Emissions Directive 2010/75/EU, Waste Framework Directive 2008/98/EC
- Italy: D.Lgs. 152/2006 (Environmental Code), D.Lgs. 81/2008 (Safety)
- Lombardy: L.R. 26/2003, various D.G.R. for specific sectors

Be thorough but practical. Focus on real compliance issues."""

USER_TEMPLATE = """Analyze this document for environmental compliance:

Document name: {file_name}
Document content (base64 encoded, analyze the metadata and any text you can extract):
{file_content}...

{filter_context}

Provide your analysis as a JSON object with status, summary, violations, and suggestions."""

# The system prompt holds literal JSON braces, so it is injected as a variable.
COMPLIANCE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", USER_TEMPLATE),
])

SCOPE_FOCUS: dict[RegulatoryScope, str] = {
    RegulatoryScope.EUROPEAN: "European Union regulations",
    RegulatoryScope.NATIONAL: "Italian national laws",
    RegulatoryScope.LOMBARDY: "Lombardy regional regulations",
}

AREA_FOCUS: dict[AreaOfInterest, str] = {
    AreaOfInterest.SEWAGE: "sewage and wastewater regulations",
    AreaOfInterest.AIR_QUALITY: "air quality and emissions standards",
    AreaOfInterest.WASTE_MANAGEMENT: "waste management requirements",
    AreaOfInterest.WATER_RESOURCES: "water protection regulations",
    AreaOfInterest.NOISE_POLLUTION: "noise pollution limits",
    AreaOfInterest.SOIL_CONTAMINATION: "soil contamination standards",
    AreaOfInterest.ENERGY: "energy efficiency requirements",
    AreaOfInterest.GENERAL: "general environmental regulations",
}


def build_filter_context(filters: ComplianceFilters) -> str:
    """
    Describe the requested analysis focus.

    Returns "" when no scope or area is set.
    """
    context = ""
    if filters.regulatory_scopes:
        scopes = ", ".join(SCOPE_FOCUS[scope] for scope in filters.regulatory_scopes)
        context += f"\nFocus your analysis on compliance with: {scopes}."
    if filters.area_of_interest:
        context += (
            f"\nSpecifically check compliance with: {AREA_FOCUS[filters.area_of_interest]}."
        )
    return context


def build_compliance_prompt_values(
    file_name: str,
    file_content: str,
    filters: ComplianceFilters,
    selected_laws: Sequence[SelectedLaw] = (),
) -> dict[str, str]:
    """Template variables for COMPLIANCE_PROMPT; content is cut to MAX_DOCUMENT_CHARS."""
    filter_context = build_filter_context(filters)
    if selected_laws:
        names = ", ".join(law.short_name for law in selected_laws)
        filter_context += f"\nPay particular attention to these selected laws: {names}."
    return {
        "system_prompt": SYSTEM_PROMPT,
        "file_name": file_name,
        "file_content": file_content[:MAX_DOCUMENT_CHARS],
        "filter_context": filter_context,
    }
