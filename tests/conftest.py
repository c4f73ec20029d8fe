import copy

import pytest


COMMERCIAL = {
    "product_or_service_name": "Industrial Sensors",
    "quantities": "500 units",
    "deal_term_months": 24,
}
SENTIMENT = {
    "current_conversation_sentiment": "Cautiously Positive",
    "sentiment_trajectory": "Improving",
    "seller_personality_profile": "Analytical",
    "seller_desperation_score": 6,
    "relationship_warmth_score": "7",
}
TONE = {
    "buyer_power_index": 8,
    "suggested_next_move": "Ask for volume tiering",
}
TECHNICAL = {
    "thread_duration": "3 weeks",
    "message_count_buyer": 9,
    "message_count_seller": 11,
    "avg_response_time_hours_seller": "4.5 hours",
}
TIMELINE = {
    "critical_deadlines": ["Q3 budget freeze", "Board review"],
    "days_until_critical_deadline": -2,
    "seller_urgency_score": 7,
}
PRICING = {
    "seller_quoted_prices": [15000, "14500", "$14,000"],
    "buyer_target_price": 12000,
    "latest_quoted_price_numeric": "$14,000",
    "latest_discount_percentage": 6.5,
    "currency_code": "EUR",
}
CONSTRAINTS = {
    "must_have_requirements": "Net 30 payment terms",
    "nice_to_have_requirements": ["On-site training"],
    "compliance_obligations": ["ISO 9001"],
    "legal_contractual_blockers": [],
    "legal_complexity_score": 3,
}
PARTIES = {
    "buyer_entity_name": "Acme Corp",
    "seller_entity_name": "SensorWorks GmbH",
    "seller_global_location": "Munich, DE",
    "decision_makers": ["J. Weber"],
    "decision_maker_identified": True,
    "seller_team_size": 3,
}
CONCESSIONS = {
    "seller_concessions": ["Free shipping"],
    "buyer_concessions": ["Longer term"],
    "first_offer_anchor": 16000,
    "seller_floor_hit_probability": 35,
    "concession_velocity_score": 4,
}
STATUS = {
    "overall_deal_health_score": 72,
    "deal_phase": "Bargaining",
    "offer_saturation_level": "Medium",
    "remaining_price_wiggle_room_estimate": "8%",
    "leverage_distribution": "Buyer-leaning",
    "leverage_reasoning": "Multiple competing quotes",
    "stalemate_risk_probability": 25,
    "walk_away_readiness": "Low",
}
SUMMARY = {"summary": "Seller is flexible on delivery but firm on unit price."}
STRATEGIES = {
    "strategies": [
        {
            "strategy_name": "Anchored Concession",
            "tone_to_adopt": "Collaborative",
            "recommended_email_body_bullets": ["Acknowledge the discount", "Propose 10% volume rebate"],
            "specific_counter_offer_amount": 1200,
            "psychological_mechanism_used": "Reciprocity",
            "why_this_works": "Seller already conceded once",
            "success_probability": 62,
        },
        {
            "strategy_name": "Competitive Pressure",
            "tone_to_adopt": "Firm",
            "recommended_email_body_bullets": "Mention the alternative quote",
            "success_probability": 80,
        },
    ],
    "best_strategy_recommendation": "Competitive Pressure",
    "market_context_summary": "Sensor prices fell 4% this quarter.",
}


@pytest.fixture
def phase_document():
    return copy.deepcopy({
        "phase_1": {
            "CommercialContext": COMMERCIAL,
            "SentimentAnalysis": SENTIMENT,
            "ToneAndStrategyCues": TONE,
            "TechnicalArtifacts": TECHNICAL,
            "TimelineInformation": TIMELINE,
            "PricingInformation": PRICING,
            "HeavyConstraints": CONSTRAINTS,
            "PartiesAndRoles": PARTIES,
            "ConcessionsAndSignals": CONCESSIONS,
        },
        "phase_2": {
            "NegotationStatus": STATUS,
            "SummaryProvider": SUMMARY,
        },
        "phase_3": STRATEGIES,
    })


@pytest.fixture
def flat_document():
    return copy.deepcopy({
        "Commercial Context": COMMERCIAL,
        "Sentiment Analysis": SENTIMENT,
        "Tone and Strategy Cues": TONE,
        "Technical Artifacts": TECHNICAL,
        "Timeline Information": TIMELINE,
        "Pricing Information": PRICING,
        "Heavy Constraints": CONSTRAINTS,
        "Parties and Roles": PARTIES,
        "Concessions and Negotiation Signals": CONCESSIONS,
        "Negotiation Status & Health": STATUS,
        "Summary": SUMMARY,
        "Research-Backed Response Strategies": STRATEGIES,
    })
