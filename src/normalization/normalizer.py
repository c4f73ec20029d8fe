"""Negotiation metadata normalizer for raw analytics documents"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel

from config import get_logger
from src.core.models import NegotiationMetadata, NegotiationStrategy
from src.normalization.coercion import (
    Coercer,
    resolve_field,
    to_bool,
    to_int,
    to_number,
    to_optional_int,
    to_price,
    to_price_list,
    to_string_list,
    to_text,
)
from src.normalization.sections import detect_format, extract_sections

logger = get_logger("normalization")

# (output field, section, candidate source keys, coercer)
FieldRule = Tuple[str, str, Tuple[str, ...], Coercer]

FIELD_RULES: Tuple[FieldRule, ...] = (
    # Commercial context
    ("product_name", "commercial_context", ("product_or_service_name", "productName"), to_text),
    ("quantities", "commercial_context", ("quantities",), to_text),
    ("deal_term_months", "commercial_context", ("deal_term_months", "dealTermMonths"), to_optional_int),
    # Sentiment
    ("current_sentiment", "sentiment_analysis", ("current_conversation_sentiment", "currentSentiment"), to_text),
    ("sentiment_trajectory", "sentiment_analysis", ("sentiment_trajectory", "sentimentTrajectory"), to_text),
    ("seller_personality_profile", "sentiment_analysis", ("seller_personality_profile", "sellerPersonalityProfile"), to_text),
    ("seller_desperation_score", "sentiment_analysis", ("seller_desperation_score", "sellerDesperationScore"), to_number),
    ("relationship_warmth_score", "sentiment_analysis", ("relationship_warmth_score", "relationshipWarmthScore"), to_number),
    # Timeline
    ("critical_deadlines", "timeline", ("critical_deadlines", "criticalDeadlines"), to_string_list),
    ("days_until_deadline", "timeline", ("days_until_critical_deadline", "daysUntilDeadline"), to_int),
    ("seller_urgency_score", "timeline", ("seller_urgency_score", "sellerUrgencyScore"), to_number),
    ("thread_duration", "technical_artifacts", ("thread_duration", "threadDuration"), to_text),
    ("message_count_buyer", "technical_artifacts", ("message_count_buyer", "messageCountBuyer"), to_int),
    ("message_count_seller", "technical_artifacts", ("message_count_seller", "messageCountSeller"), to_int),
    ("avg_response_time_hours", "technical_artifacts", ("avg_response_time_hours_seller", "avgResponseTimeHours"), to_number),
    # Pricing
    ("seller_quoted_prices", "pricing", ("seller_quoted_prices", "sellerQuotedPrices"), to_price_list),
    ("buyer_target_price", "pricing", ("buyer_target_price", "buyerTargetPrice"), to_price),
    ("latest_quoted_price", "pricing", ("latest_quoted_price_numeric", "latestQuotedPrice"), to_number),
    ("latest_discount_percentage", "pricing", ("latest_discount_percentage", "latestDiscountPercentage"), to_number),
    ("currency", "pricing", ("currency_code", "currency"), to_text),
    # Negotiation status
    ("overall_deal_health_score", "negotiation_status", ("overall_deal_health_score", "overallDealHealthScore"), to_number),
    ("deal_phase", "negotiation_status", ("deal_phase", "dealPhase"), to_text),
    ("offer_saturation_level", "negotiation_status", ("offer_saturation_level", "offerSaturationLevel"), to_text),
    ("remaining_wiggle_room", "negotiation_status", ("remaining_price_wiggle_room_estimate", "remainingWiggleRoom"), to_number),
    ("leverage_distribution", "negotiation_status", ("leverage_distribution", "leverageDistribution"), to_text),
    ("leverage_reasoning", "negotiation_status", ("leverage_reasoning", "leverageReasoning"), to_text),
    ("stalemate_risk_probability", "negotiation_status", ("stalemate_risk_probability", "stalemateRiskProbability"), to_number),
    ("buyer_power_index", "tone_and_strategy", ("buyer_power_index", "buyerPowerIndex"), to_number),
    ("seller_floor_hit_probability", "concessions", ("seller_floor_hit_probability", "sellerFloorHitProbability"), to_number),
    ("concession_velocity_score", "concessions", ("concession_velocity_score", "concessionVelocityScore"), to_number),
    ("walk_away_readiness", "negotiation_status", ("walk_away_readiness", "walkAwayReadiness"), to_text),
    # Parties
    ("buyer_entity_name", "parties", ("buyer_entity_name", "buyerEntityName"), to_text),
    ("seller_entity_name", "parties", ("seller_entity_name", "sellerEntityName"), to_text),
    ("seller_location", "parties", ("seller_global_location", "sellerLocation"), to_text),
    ("decision_makers", "parties", ("decision_makers", "decisionMakers"), to_string_list),
    ("decision_maker_identified", "parties", ("decision_maker_identified", "decisionMakerIdentified"), to_bool),
    ("seller_team_size", "parties", ("seller_team_size", "sellerTeamSize"), to_int),
    # Constraints
    ("must_have_requirements", "constraints", ("must_have_requirements", "mustHaveRequirements"), to_string_list),
    ("nice_to_have_requirements", "constraints", ("nice_to_have_requirements", "niceToHaveRequirements"), to_string_list),
    ("compliance_obligations", "constraints", ("compliance_obligations", "complianceObligations"), to_string_list),
    ("legal_contractual_blockers", "constraints", ("legal_contractual_blockers", "legalContractualBlockers"), to_string_list),
    ("legal_complexity_score", "constraints", ("legal_complexity_score", "legalComplexityScore"), to_number),
    # Concessions
    ("seller_concessions", "concessions", ("seller_concessions", "sellerConcessions"), to_string_list),
    ("buyer_concessions", "concessions", ("buyer_concessions", "buyerConcessions"), to_string_list),
    ("first_offer_anchor", "concessions", ("first_offer_anchor", "firstOfferAnchor"), to_price),
    # Strategy
    ("recommended_strategy", "strategies", ("best_strategy_recommendation", "recommendedStrategy"), to_text),
    ("suggested_next_move", "tone_and_strategy", ("suggested_next_move", "suggestedNextMove"), to_text),
    ("market_context_summary", "strategies", ("market_context_summary", "marketContextSummary"), to_text),
    ("summary", "summary", ("summary",), to_text),
)

# (output field, candidate source keys, coercer) within one strategy entry
STRATEGY_RULES: Tuple[Tuple[str, Tuple[str, ...], Coercer], ...] = (
    ("strategy_name", ("strategy_name", "strategyName"), to_text),
    ("tone_to_adopt", ("tone_to_adopt", "toneToAdopt"), to_text),
    ("recommended_bullets", ("recommended_email_body_bullets", "recommendedBullets"), to_string_list),
    ("counter_offer_amount", ("specific_counter_offer_amount", "counterOfferAmount"), to_number),
    ("psychological_mechanism", ("psychological_mechanism_used", "psychologicalMechanism"), to_text),
    ("why_this_works", ("why_this_works", "whyThisWorks"), to_text),
    ("success_probability", ("success_probability", "successProbability"), to_number),
)


def _default(model: Type[BaseModel], field_name: str) -> Any:
    return model.model_fields[field_name].get_default(call_default_factory=True)


def _normalize_strategy(entry: Any) -> NegotiationStrategy:
    section = entry if isinstance(entry, Mapping) else {}
    values = {
        name: resolve_field(section, candidates, coerce, _default(NegotiationStrategy, name))
        for name, candidates, coerce in STRATEGY_RULES
    }
    return NegotiationStrategy(**values)


def _extract_strategies(section: Mapping[str, Any]) -> List[NegotiationStrategy]:
    entries = section.get("strategies")
    if not isinstance(entries, list):
        return []
    return [_normalize_strategy(entry) for entry in entries]


def normalize(raw: Any) -> NegotiationMetadata:
    """
    Convert a raw analytics document into a complete NegotiationMetadata

    Accepts either backend shape (phase-keyed or flat-labeled). Each field
    takes the first present candidate key of its section, coerced to the
    field type; absent keys and unparsable values fall back to the
    defaults declared on NegotiationMetadata. Never raises.

    The aggregate strategy_success_probability is the success probability
    of the first listed strategy, whichever strategy is recommended.

    Args:
        raw: Decoded JSON document; anything that is not an object is
            treated as an empty document

    Returns:
        NegotiationMetadata with every field populated
    """
    sections = extract_sections(raw)
    logger.debug(f"Normalizing {detect_format(raw).value} analytics document")

    values: Dict[str, Any] = {
        name: resolve_field(sections[section], candidates, coerce, _default(NegotiationMetadata, name))
        for name, section, candidates, coerce in FIELD_RULES
    }

    strategies = _extract_strategies(sections["strategies"])
    values["strategies"] = strategies
    values["strategy_success_probability"] = (
        strategies[0].success_probability
        if strategies
        else _default(NegotiationMetadata, "strategy_success_probability")
    )

    return NegotiationMetadata(**values)
