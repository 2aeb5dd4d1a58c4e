"""
Keyword and category tagging.

Frequency-based keywords and a weighted keyword-set classifier that assigns
every document and chunk one topic category.

Dependencies: re, collections.Counter
System role: Metadata stage applied to documents and chunks before saving
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"

STOPWORDS = frozenset({
    "this", "that", "with", "have", "will", "from", "they", "been", "said",
    "each", "which", "their", "time", "would", "there", "could", "other",
})

_PUNCTUATION = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class CategoryRule:
    """Keyword set and weight for one topic category."""

    keywords: tuple[str, ...]
    weight: float = 1.0


# Declaration order is the tie-break order.
CATEGORY_RULES: dict[str, CategoryRule] = {
    "hours": CategoryRule(
        ("hours", "timing", "schedule", "monday", "tuesday", "wednesday", "thursday",
         "friday", "saturday", "sunday", "am", "pm", "open", "close", "operating",
         "business hours", "opening hours", "closing time", "weekdays", "weekends"),
        1.5,
    ),
    "contact": CategoryRule(
        ("contact", "phone", "email", "address", "location", "call", "reach", "telephone",
         "mobile", "whatsapp", "gmail", "yahoo", "hotmail", "street", "city", "pincode", "zip"),
        1.2,
    ),
    "menu": CategoryRule(
        ("menu", "food", "dish", "cuisine", "appetizer", "starter", "main", "dessert",
         "beverage", "drink", "curry", "rice", "bread", "naan", "biryani", "pizza",
         "burger", "sandwich", "salad", "soup"),
    ),
    "reservations": CategoryRule(
        ("reservation", "booking", "table", "seat", "waitlist", "book", "reserve",
         "advance booking", "party size", "group booking"),
    ),
    "courses": CategoryRule(
        ("course", "program", "curriculum", "subject", "syllabus", "class", "lecture",
         "tutorial", "workshop", "training", "certification", "degree", "diploma",
         "semester", "batch", "module"),
    ),
    "admissions": CategoryRule(
        ("admission", "enroll", "enrollment", "application", "apply", "eligibility",
         "requirement", "entrance", "selection", "interview", "document", "form",
         "deadline", "registration"),
    ),
    "faculty": CategoryRule(
        ("faculty", "teacher", "instructor", "professor", "trainer", "staff",
         "experience", "qualification", "expertise", "teaching", "mentor"),
    ),
    "services": CategoryRule(
        ("service", "treatment", "therapy", "consultation", "diagnosis", "procedure",
         "surgery", "checkup", "examination", "test", "scan", "x-ray", "medicine",
         "prescription"),
    ),
    "doctors": CategoryRule(
        ("doctor", "physician", "specialist", "surgeon", "consultant", "medical",
         "clinic", "hospital", "patient", "appointment"),
    ),
    "pricing": CategoryRule(
        ("price", "cost", "fee", "charge", "rate", "tariff", "amount", "rupee", "dollar",
         "payment", "discount", "offer", "package deal"),
        0.8,
    ),
    "delivery": CategoryRule(
        ("delivery", "takeaway", "pickup", "order", "shipping", "courier", "packaging",
         "home delivery", "online order", "swiggy", "zomato", "uber eats"),
    ),
    "directions": CategoryRule(
        ("direction", "map", "location", "parking", "metro", "bus", "transport",
         "landmark", "route", "distance", "accessibility", "wheelchair", "elevator"),
    ),
    "policies": CategoryRule(
        ("policy", "terms", "condition", "rule", "regulation", "guideline",
         "cancellation", "refund", "privacy", "terms of service", "disclaimer"),
    ),
    "events": CategoryRule(
        ("event", "catering", "party", "celebration", "wedding", "corporate", "meeting",
         "conference", "birthday", "anniversary", "private dining", "banquet"),
    ),
    "amenities": CategoryRule(
        ("amenity", "facility", "wifi", "parking", "washroom", "restroom",
         "air conditioning", "seating", "comfort", "convenience", "infrastructure"),
    ),
    "technology": CategoryRule(
        ("app", "website", "online", "digital", "software", "platform", "login",
         "account", "password", "registration", "download", "mobile app"),
    ),
    "support": CategoryRule(
        ("support", "help", "assistance", "customer service", "helpline", "complaint",
         "feedback", "query", "question", "issue", "problem", "solution"),
    ),
    "offers": CategoryRule(
        ("offer", "deal", "promotion", "discount", "coupon", "loyalty", "reward",
         "points", "cashback", "special", "combo", "package"),
    ),
    "dietary": CategoryRule(
        ("dietary", "allergen", "vegan", "vegetarian", "gluten", "dairy", "nut", "sugar",
         "organic", "healthy", "nutrition", "calorie", "ingredient"),
    ),
    "faq": CategoryRule(
        ("faq", "frequently asked", "question", "answer", "common", "query", "doubt",
         "clarification"),
    ),
    "social": CategoryRule(
        ("social", "instagram", "facebook", "twitter", "youtube", "linkedin", "follow",
         "share", "community", "review", "rating"),
    ),
}

CURRENCY_SYMBOLS = ("₹", "$", "€")
PHONE_MARKERS = ("+91", "+1", "phone:", "tel:")
EMAIL_DOMAINS = (".com", ".in", ".org")

PRICING_CURRENCY_BONUS = 2.0
CONTACT_PHONE_BONUS = 3.0
CONTACT_EMAIL_BONUS = 2.0


def top_keywords(text: str | None, limit: int = 10) -> list[str]:
    """
    Return the most frequent content words.

    Words are lowercased with punctuation removed; words of three characters
    or fewer and stopwords are dropped. Equal counts keep first-seen order.

    Args:
        text: Text to analyse
        limit: Maximum number of keywords

    Returns:
        list[str]: Keywords by descending frequency
    """
    words = _PUNCTUATION.sub(" ", (text or "").lower()).split()
    counts = Counter(
        word for word in words
        if len(word) > 3 and word not in STOPWORDS
    )
    return [word for word, _ in counts.most_common(limit)]


def extract_keywords(text: str | None, limit: int = 10) -> str:
    """Top keywords joined as a comma-separated summary string."""
    return ", ".join(top_keywords(text, limit))


def score_categories(text: str | None, filename: str | None = None) -> dict[str, float]:
    """
    Score text against every category rule.

    Each keyword adds (non-overlapping occurrences in the text, plus one if
    it appears in the filename) times the category weight. Currency symbols
    add a pricing bonus; phone prefixes and email-like strings add contact
    bonuses.

    Args:
        text: Document or chunk text
        filename: Original filename

    Returns:
        dict[str, float]: Score per category in declaration order
    """
    content = (text or "").lower()
    name = (filename or "").lower()

    scores = {}
    for category, rule in CATEGORY_RULES.items():
        score = 0.0
        for keyword in rule.keywords:
            name_match = 1 if keyword in name else 0
            score += (content.count(keyword) + name_match) * rule.weight
        scores[category] = score

    if any(symbol in content for symbol in CURRENCY_SYMBOLS):
        scores["pricing"] += PRICING_CURRENCY_BONUS
    if any(marker in content for marker in PHONE_MARKERS):
        scores["contact"] += CONTACT_PHONE_BONUS
    if "@" in content and any(domain in content for domain in EMAIL_DOMAINS):
        scores["contact"] += CONTACT_EMAIL_BONUS

    return scores


def categorize_content(text: str | None, filename: str | None = None) -> str:
    """
    Classify text into a single topic category.

    Args:
        text: Document or chunk text
        filename: Original filename

    Returns:
        str: Highest-scoring category; the first declared wins ties;
            "general" when nothing matched
    """
    scores = score_categories(text, filename)
    best_category = DEFAULT_CATEGORY
    best_score = 0.0
    for category, score in scores.items():
        if score > best_score:
            best_category, best_score = category, score

    logger.debug(f"{__name__}:categorize_content - Categorized as {best_category} (score: {best_score})")
    return best_category
