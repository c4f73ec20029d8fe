"""Tests for the negotiation metadata normalizer."""

import math

import pytest

from src.core import NegotiationMetadata
from src.normalization import normalize


def _assert_complete(metadata: NegotiationMetadata):
    for name, value in metadata:
        if name == "deal_term_months":
            continue
        assert value is not None, name
        if isinstance(value, float):
            assert not math.isnan(value), name


def test_empty_document_yields_defaults():
    metadata = normalize({})

    assert metadata.current_sentiment == "Neutral"
    assert metadata.overall_deal_health_score == 50
    assert metadata.must_have_requirements == []
    assert metadata.currency == "USD"
    assert metadata.product_name == "Unknown Product"
    assert metadata.buyer_target_price == "Not specified"
    assert metadata.first_offer_anchor == "Not specified"
    assert metadata.decision_maker_identified is False
    assert metadata.seller_team_size == 1
    assert metadata.strategies == []
    assert metadata.strategy_success_probability == 50
    assert metadata.deal_term_months is None
    assert metadata == NegotiationMetadata()


@pytest.mark.parametrize("raw", [None, [], "text", 42, {"phase_1": None}, {"phase_1": "x", "phase_2": 3}])
def test_non_object_input_never_raises(raw):
    metadata = normalize(raw)
    _assert_complete(metadata)
    assert metadata == NegotiationMetadata()


def test_phase_document(phase_document):
    metadata = normalize(phase_document)
    _assert_complete(metadata)

    assert metadata.product_name == "Industrial Sensors"
    assert metadata.deal_term_months == 24
    assert metadata.current_sentiment == "Cautiously Positive"
    assert metadata.relationship_warmth_score == 7
    assert metadata.critical_deadlines == ["Q3 budget freeze", "Board review"]
    assert metadata.days_until_deadline == -2
    assert metadata.avg_response_time_hours == 4.5
    assert metadata.seller_quoted_prices == ["$15,000", "$14500", "$14,000"]
    assert metadata.buyer_target_price == "$12,000"
    assert metadata.latest_quoted_price == 14000
    assert metadata.currency == "EUR"
    assert metadata.remaining_wiggle_room == 8
    assert metadata.buyer_power_index == 8
    assert metadata.seller_floor_hit_probability == 35
    assert metadata.seller_location == "Munich, DE"
    assert metadata.decision_maker_identified is True
    assert metadata.must_have_requirements == ["Net 30 payment terms"]
    assert metadata.legal_contractual_blockers == []
    assert metadata.first_offer_anchor == "$16,000"
    assert metadata.suggested_next_move == "Ask for volume tiering"
    assert metadata.summary == "Seller is flexible on delivery but firm on unit price."


def test_shapes_are_equivalent(phase_document, flat_document):
    assert normalize(phase_document) == normalize(flat_document)


def test_strategy_extraction_uses_first_entry_probability(flat_document):
    metadata = normalize(flat_document)

    assert len(metadata.strategies) == 2
    # The recommended strategy is the second one, with a higher probability
    assert metadata.recommended_strategy == "Competitive Pressure"
    assert metadata.strategy_success_probability == 62

    first, second = metadata.strategies
    assert first.counter_offer_amount == 1200
    assert first.psychological_mechanism == "Reciprocity"
    assert second.recommended_bullets == ["Mention the alternative quote"]
    assert second.counter_offer_amount == 0
    assert second.why_this_works == ""


def test_strategy_entries_that_are_not_objects_get_defaults():
    metadata = normalize({"Research-Backed Response Strategies": {"strategies": [None, "bogus"]}})

    assert len(metadata.strategies) == 2
    assert metadata.strategies[0].strategy_name == "Unknown"
    assert metadata.strategies[1].tone_to_adopt == "Neutral"
    assert metadata.strategy_success_probability == 50


def test_strategies_not_a_list_is_empty():
    metadata = normalize({"phase_1": {}, "phase_3": {"strategies": {"strategy_name": "Solo"}}})
    assert metadata.strategies == []
    assert metadata.strategy_success_probability == 50


def test_numeric_string_is_coerced():
    metadata = normalize({"Pricing Information": {"latest_quoted_price_numeric": "$12,500.50 approx"}})
    assert metadata.latest_quoted_price == 12500.5


def test_unparsable_numeric_string_uses_field_default():
    metadata = normalize({"Negotiation Status & Health": {"overall_deal_health_score": "n/a"}})
    assert metadata.overall_deal_health_score == 50


def test_single_string_becomes_one_element_list():
    metadata = normalize({"Heavy Constraints": {"compliance_obligations": "Net 30 payment terms"}})
    assert metadata.compliance_obligations == ["Net 30 payment terms"]


def test_price_formatting_asymmetry():
    metadata = normalize({"Pricing Information": {"seller_quoted_prices": [1500, "1500"]}})
    assert metadata.seller_quoted_prices == ["$1,500", "$1500"]


def test_camel_case_aliases_are_accepted():
    metadata = normalize({
        "Sentiment Analysis": {"currentSentiment": "Tense", "sellerDesperationScore": 9},
        "Parties and Roles": {"sellerEntityName": "Globex", "decisionMakerIdentified": 1},
    })
    assert metadata.current_sentiment == "Tense"
    assert metadata.seller_desperation_score == 9
    assert metadata.seller_entity_name == "Globex"
    assert metadata.decision_maker_identified is True


def test_first_present_key_wins_even_when_falsy():
    metadata = normalize({
        "Technical Artifacts": {"message_count_buyer": 0, "messageCountBuyer": 12},
        "Negotiation Status & Health": {"overall_deal_health_score": 0, "overallDealHealthScore": 90},
    })
    assert metadata.message_count_buyer == 0
    assert metadata.overall_deal_health_score == 0


def test_null_value_does_not_fall_through_to_alias():
    metadata = normalize({"Sentiment Analysis": {"current_conversation_sentiment": None, "currentSentiment": "Hostile"}})
    assert metadata.current_sentiment == "Neutral"


def test_flat_sections_ignore_phase_keys():
    metadata = normalize({"phase_2": {"NegotationStatus": {"deal_phase": "Closing"}}})
    assert metadata.deal_phase == "Unknown"


def test_free_text_enumerations_are_not_validated():
    metadata = normalize({"Negotiation Status & Health": {"leverage_distribution": "Wobbly", "deal_phase": 3}})
    assert metadata.leverage_distribution == "Wobbly"
    assert metadata.deal_phase == "3"


def test_scores_are_not_clamped():
    metadata = normalize({"Timeline Information": {"seller_urgency_score": 42}})
    assert metadata.seller_urgency_score == 42


def test_serialized_keys_use_dashboard_names(flat_document):
    data = normalize(flat_document).to_json_dict()

    assert data["latestQuotedPrice"] == 14000
    assert data["overallDealHealthScore"] == 72
    assert data["strategies"][0]["strategyName"] == "Anchored Concession"
    assert data["strategies"][0]["whyThisWorks"] == "Seller already conceded once"
    assert NegotiationMetadata.model_validate(data) == normalize(flat_document)


def test_counts_and_days_serialize_as_integers():
    metadata = normalize({
        "Technical Artifacts": {"message_count_buyer": 9, "message_count_seller": "11 emails"},
        "Timeline Information": {"days_until_critical_deadline": -2.0},
        "Parties and Roles": {"seller_team_size": 3.0},
    })
    payload = metadata.to_json_dict()

    assert payload["messageCountBuyer"] == 9
    assert payload["messageCountSeller"] == 11
    assert payload["daysUntilDeadline"] == -2
    assert payload["sellerTeamSize"] == 3
    for key in ("messageCountBuyer", "messageCountSeller", "daysUntilDeadline", "sellerTeamSize"):
        assert type(payload[key]) is int
    assert type(NegotiationMetadata().to_json_dict()["sellerTeamSize"]) is int


def test_nan_text_value_uses_field_default():
    metadata = normalize({"Sentiment Analysis": {"current_conversation_sentiment": float("nan")}})
    assert metadata.current_sentiment == "Neutral"
