"""Audience, intent and value-proposition inference from page text.

:func:`infer_signals` classifies the lower-cased body excerpt of a page with
ordered keyword rule tables.  Every table is evaluated top to bottom and the
first rule whose keywords occur in the text wins; when nothing matches, the
generic default is used.  Matching is plain substring containment, so
``"vs"`` also matches inside longer words.

Audience tiers
--------------
Audience detection is two-level.  The top-level tiers (business first, then
consumer) decide which refinement table applies; a refinement from one tier
is never applied to the other.

``business``
    business / company / enterprise / organization / professional / agency,
    refined into marketing, technical and financial audiences.

``consumer``
    personal / individual / home / family / lifestyle, refined into health,
    food and travel audiences.
"""

from typing import NamedTuple, Optional, Tuple

from metagen.models.signals import InferredSignals


class Rule(NamedTuple):
    keywords: Tuple[str, ...]
    result: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


class AudienceTier(NamedTuple):
    rule: Rule
    refinements: Tuple[Rule, ...]


DEFAULT_AUDIENCE = "professionals or businesses seeking expertise"
DEFAULT_INTENT = "finding actionable information or solutions"
DEFAULT_VALUE_PROPOSITION = "expert insights and practical solutions"

AUDIENCE_TIERS: Tuple[AudienceTier, ...] = (
    AudienceTier(
        Rule(
            ("business", "company", "enterprise", "organization", "professional", "agency"),
            "business professionals or organizations",
        ),
        (
            Rule(
                ("marketing", "seo", "advertising"),
                "marketing professionals or businesses seeking growth",
            ),
            Rule(
                ("software", "developer", "coding"),
                "software developers or technical professionals",
            ),
            Rule(
                ("finance", "investment", "accounting"),
                "financial professionals or businesses",
            ),
        ),
    ),
    AudienceTier(
        Rule(
            ("personal", "individual", "home", "family", "lifestyle"),
            "individual consumers or homeowners",
        ),
        (
            Rule(
                ("health", "fitness", "wellness"),
                "health-conscious individuals seeking wellness solutions",
            ),
            Rule(("recipe", "cooking", "food"), "home cooks or food enthusiasts"),
            Rule(("travel", "vacation", "destination"), "travelers or vacation planners"),
        ),
    ),
)

INTENT_RULES: Tuple[Rule, ...] = (
    Rule(
        ("how to", "guide", "tutorial", "learn"),
        "learning how to accomplish a specific task or goal",
    ),
    Rule(("buy", "price", "cost", "purchase"), "making a purchase decision"),
    Rule(
        ("compare", "vs", "versus", "best"),
        "comparing options to make an informed choice",
    ),
    Rule(("solve", "fix", "problem", "issue"), "solving a specific problem or challenge"),
)

VALUE_PROPOSITION_RULES: Tuple[Rule, ...] = (
    Rule(
        ("save time", "quick", "fast", "efficient"),
        "time-saving solutions or efficiency improvements",
    ),
    Rule(
        ("save money", "affordable", "budget"),
        "cost-effective solutions or money-saving strategies",
    ),
    Rule(
        ("expert", "professional", "experienced"),
        "expert insights backed by professional experience",
    ),
    Rule(
        ("step by step", "actionable", "practical"),
        "practical, actionable guidance with clear steps",
    ),
)


def first_match(rules: Tuple[Rule, ...], text: str) -> Optional[str]:
    """Return the result of the first rule matching *text*, or None."""
    for rule in rules:
        if rule.matches(text):
            return rule.result
    return None


def infer_audience(text: str) -> str:
    for tier in AUDIENCE_TIERS:
        if tier.rule.matches(text):
            return first_match(tier.refinements, text) or tier.rule.result
    return DEFAULT_AUDIENCE


def infer_intent(text: str) -> str:
    return first_match(INTENT_RULES, text) or DEFAULT_INTENT


def infer_value_proposition(text: str) -> str:
    return first_match(VALUE_PROPOSITION_RULES, text) or DEFAULT_VALUE_PROPOSITION


def infer_signals(text: Optional[str]) -> InferredSignals:
    """Classify page text into audience, intent and value proposition.

    Args:
        text: Body excerpt of the page.  Case does not matter; ``None`` and
            ``""`` give the three defaults.
    """
    content = (text or "").lower()
    return InferredSignals(
        audience_type=infer_audience(content),
        user_intent=infer_intent(content),
        value_proposition=infer_value_proposition(content),
    )
