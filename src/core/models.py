"""Core data models for the vendor negotiation statistics system"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class _CamelModel(BaseModel):
    """Serializes with the dashboard's camelCase keys, accepts snake_case or camelCase on input"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump to a JSON-compatible dict keyed by camelCase aliases"""
        return self.model_dump(mode="json", by_alias=True)


class NegotiationStrategy(_CamelModel):
    """One candidate negotiation tactic proposed by the analytics backend"""
    strategy_name: str = Field(default="Unknown", description="Name of the tactic")
    tone_to_adopt: str = Field(default="Neutral", description="Recommended tone for the next message")
    recommended_bullets: List[str] = Field(
        default_factory=list,
        description="Ordered bullet points for the message body"
    )
    counter_offer_amount: float = Field(
        default=0,
        description="Proposed counter-offer discount amount (0 if none)"
    )
    psychological_mechanism: str = Field(default="", description="Mechanism the tactic relies on")
    why_this_works: str = Field(default="", description="Rationale for the tactic")
    success_probability: float = Field(default=50, description="Estimated success probability (0-100)")


class NegotiationMetadata(_CamelModel):
    """
    Everything the dashboard can display about one vendor negotiation thread

    Every field carries a default, so NegotiationMetadata() is the
    all-defaults record returned for an empty analytics document.
    Bounded scores (1-10, 0-100, percentages) are stored as received
    and never clamped.
    """
    # Commercial context
    product_name: str = Field(default="Unknown Product")
    quantities: str = Field(default="Not specified")
    deal_term_months: Optional[int] = Field(default=None)

    # Sentiment
    current_sentiment: str = Field(default="Neutral")
    sentiment_trajectory: str = Field(default="Stable")
    seller_personality_profile: str = Field(default="Unknown")
    seller_desperation_score: float = Field(default=5, description="1-10")
    relationship_warmth_score: float = Field(default=5, description="1-10")

    # Timeline
    critical_deadlines: List[str] = Field(default_factory=list)
    days_until_deadline: int = Field(default=0, description="Negative when overdue")
    seller_urgency_score: float = Field(default=5, description="1-10")
    thread_duration: str = Field(default="Unknown")
    message_count_buyer: int = Field(default=0)
    message_count_seller: int = Field(default=0)
    avg_response_time_hours: float = Field(default=0)

    # Pricing
    seller_quoted_prices: List[str] = Field(default_factory=list, description="Formatted with currency symbol")
    buyer_target_price: str = Field(default="Not specified")
    latest_quoted_price: float = Field(default=0)
    latest_discount_percentage: float = Field(default=0)
    currency: str = Field(default="USD")

    # Negotiation status
    overall_deal_health_score: float = Field(default=50, description="0-100")
    deal_phase: str = Field(default="Unknown")
    offer_saturation_level: str = Field(default="Unknown")
    remaining_wiggle_room: float = Field(default=0, description="Percentage")
    leverage_distribution: str = Field(default="Balanced")
    leverage_reasoning: str = Field(default="No reasoning available")
    stalemate_risk_probability: float = Field(default=0, description="Percentage")
    buyer_power_index: float = Field(default=5, description="1-10")
    seller_floor_hit_probability: float = Field(default=0, description="Percentage")
    concession_velocity_score: float = Field(default=5, description="1-10")
    walk_away_readiness: str = Field(default="Unknown")

    # Parties
    buyer_entity_name: str = Field(default="Unknown Buyer")
    seller_entity_name: str = Field(default="Unknown Seller")
    seller_location: str = Field(default="Unknown Location")
    decision_makers: List[str] = Field(default_factory=list)
    decision_maker_identified: bool = Field(default=False)
    seller_team_size: int = Field(default=1)

    # Constraints
    must_have_requirements: List[str] = Field(default_factory=list)
    nice_to_have_requirements: List[str] = Field(default_factory=list)
    compliance_obligations: List[str] = Field(default_factory=list)
    legal_contractual_blockers: List[str] = Field(default_factory=list)
    legal_complexity_score: float = Field(default=5, description="1-10")

    # Concessions
    seller_concessions: List[str] = Field(default_factory=list)
    buyer_concessions: List[str] = Field(default_factory=list)
    first_offer_anchor: str = Field(default="Not specified")

    # Strategy
    strategies: List[NegotiationStrategy] = Field(default_factory=list)
    recommended_strategy: str = Field(default="No recommendation")
    strategy_success_probability: float = Field(
        default=50,
        description="Success probability of the first listed strategy, not of the recommended one"
    )
    suggested_next_move: str = Field(default="Continue negotiation")
    market_context_summary: str = Field(default="")
    summary: str = Field(default="No summary available")

    def forecaster_context(self) -> Dict[str, Any]:
        """
        Subset of the record attached to forecaster chat requests as 'negotiationContext'

        Returns:
            Dict keyed by camelCase field names
        """
        keys = (
            "product_name",
            "deal_phase",
            "overall_deal_health_score",
            "latest_quoted_price",
            "buyer_target_price",
            "remaining_wiggle_room",
            "stalemate_risk_probability",
            "seller_urgency_score",
            "buyer_power_index",
            "recommended_strategy",
            "summary",
        )
        return {to_camel(key): getattr(self, key) for key in keys}


class ComparisonRow(BaseModel):
    """One vendor's line in the comparison table"""
    vendor_id: str
    values: Dict[str, str] = Field(
        default_factory=dict,
        description="Display value per enabled comparison column key"
    )
    health_band: str = Field(..., description="'Excellent', 'Good', 'Fair' or 'At Risk'")
    risk_band: str = Field(..., description="'Low', 'Moderate', 'Elevated' or 'High'")
