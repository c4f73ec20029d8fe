"""
Format detection and section extraction for raw analytics documents

The analytics backend has produced two document shapes over its revisions:

- phase-keyed: sections nested under 'phase_1', 'phase_2' and 'phase_3'
- flat-labeled: sections as top-level keys with human-readable labels

Both are reduced to the same SectionMap so field resolution never needs
to know which shape it is reading.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

SectionMap = Dict[str, Mapping[str, Any]]


class DocumentFormat(str, Enum):
    PHASE_KEYED = "phase_keyed"
    FLAT_LABELED = "flat_labeled"


# Canonical section name -> (path in phase-keyed shape, label in flat shape).
# An empty path means the phase object itself is the section.
SECTION_PATHS: Dict[str, Tuple[Tuple[str, ...], str]] = {
    "commercial_context": (("phase_1", "CommercialContext"), "Commercial Context"),
    "sentiment_analysis": (("phase_1", "SentimentAnalysis"), "Sentiment Analysis"),
    "tone_and_strategy": (("phase_1", "ToneAndStrategyCues"), "Tone and Strategy Cues"),
    "technical_artifacts": (("phase_1", "TechnicalArtifacts"), "Technical Artifacts"),
    "timeline": (("phase_1", "TimelineInformation"), "Timeline Information"),
    "pricing": (("phase_1", "PricingInformation"), "Pricing Information"),
    "constraints": (("phase_1", "HeavyConstraints"), "Heavy Constraints"),
    "parties": (("phase_1", "PartiesAndRoles"), "Parties and Roles"),
    "concessions": (("phase_1", "ConcessionsAndSignals"), "Concessions and Negotiation Signals"),
    # 'NegotationStatus' is misspelled by the backend
    "negotiation_status": (("phase_2", "NegotationStatus"), "Negotiation Status & Health"),
    "summary": (("phase_2", "SummaryProvider"), "Summary"),
    "strategies": (("phase_3",), "Research-Backed Response Strategies"),
}


def detect_format(raw: Any) -> DocumentFormat:
    """Phase-keyed when a 'phase_1' key is present, flat-labeled otherwise"""
    if isinstance(raw, Mapping) and "phase_1" in raw:
        return DocumentFormat.PHASE_KEYED
    return DocumentFormat.FLAT_LABELED


def _as_section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _walk(raw: Mapping[str, Any], path: Tuple[str, ...]) -> Optional[Any]:
    node: Any = raw
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def extract_sections(raw: Any) -> SectionMap:
    """
    Map every canonical section name to its object in the raw document

    Missing or non-object sections resolve to an empty mapping, and a raw
    document that is not an object yields only empty sections.
    """
    if not isinstance(raw, Mapping):
        return {name: {} for name in SECTION_PATHS}

    doc_format = detect_format(raw)
    sections: SectionMap = {}
    for name, (phase_path, flat_label) in SECTION_PATHS.items():
        if doc_format is DocumentFormat.PHASE_KEYED:
            sections[name] = _as_section(_walk(raw, phase_path))
        else:
            sections[name] = _as_section(raw.get(flat_label))
    return sections
