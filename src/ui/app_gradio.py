"""Gradio web interface for vendor negotiation statistics"""
from __future__ import annotations

import json
from typing import List, Tuple

import gradio as gr

from config import logger
from src.core import AppError, InvalidInputError
from src.negotiation import build_comparison_table, get_statistics_service, rank_vendors
from src.negotiation.comparison import rows_as_lists, table_headers
from src.normalization import normalize

def normalize_ui(raw_text: str) -> Tuple[dict, dict]:
    """
    Gradio handler for normalizing a pasted analytics document

    Args:
        raw_text: JSON text in either backend shape

    Returns:
        Tuple of (record, forecaster context). On success the record holds
        the NegotiationMetadata fields (camelCase keys) and the context the
        subset sent along with forecaster chat requests. When the text is
        not JSON the record is an error dictionary with an 'error' key and
        the context is empty
    """
    logger.info("Received normalize request")
    try:
        if not raw_text or not raw_text.strip():
            raise InvalidInputError(message="Paste an analytics JSON document first")
        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError as e:
            raise InvalidInputError(message=f"Input is not valid JSON: {e}") from e
        metadata = normalize(raw)
        return metadata.to_json_dict(), metadata.forecaster_context()
    except AppError as e:
        logger.warning(f"AppError: {e}")
        return e.to_dict(), {}

def compare_ui(vendor_ids_text: str) -> Tuple[List[List[str]], str]:
    """
    Gradio handler for comparing vendors by id

    Args:
        vendor_ids_text: Comma or newline separated vendor ids

    Returns:
        Tuple of (table rows, ranking text). Vendors that fail to load are
        left out of the table
    """
    logger.info("Received compare request")
    vendor_ids = [v.strip() for v in vendor_ids_text.replace("\n", ",").split(",") if v.strip()]
    if not vendor_ids:
        return [], "Enter at least one vendor id"

    srv = get_statistics_service()
    statistics = srv.get_statistics_for_multiple(vendor_ids)
    rows = build_comparison_table(statistics)

    missing = [v for v in vendor_ids if v not in statistics]
    ranking = " > ".join(rank_vendors(statistics)) or "No statistics available"
    if missing:
        ranking += f"\nCould not load: {', '.join(missing)}"
    return rows_as_lists(rows), ranking

normalize_tab = gr.Interface(
    fn=normalize_ui,
    inputs=gr.Textbox(label="Analytics JSON", lines=18),
    outputs=[
        gr.JSON(label="Negotiation metadata"),
        gr.JSON(label="Forecaster context"),
    ],
    title="Normalize analytics",
    description="Paste a phase-keyed or flat-labeled analytics document to see the normalized negotiation metadata"
)

compare_tab = gr.Interface(
    fn=compare_ui,
    inputs=gr.Textbox(label="Vendor ids", lines=3, placeholder="vendor-1, vendor-2"),
    outputs=[
        gr.Dataframe(label="Comparison", headers=table_headers()),
        gr.Textbox(label="Ranking (best first)"),
    ],
    title="Compare vendors",
    description="Load statistics for several vendors and compare deal health, pricing and risk"
)

demo = gr.TabbedInterface(
    [normalize_tab, compare_tab],
    tab_names=["Normalize", "Compare"],
    title="Vendor Negotiation Statistics",
)

if __name__ == "__main__":
    demo.launch()
