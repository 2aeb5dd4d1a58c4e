"""
Intent and sentiment heuristics.

Keyword lookup tables that label a user message for analytics and decide
whether the client should offer a human hand-off form.

Dependencies: None
System role: Message classification for chat replies
"""

DEFAULT_INTENT = "inquiry"

# Declaration order decides which intent wins when several match.
INTENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "greeting": ("hello", "hi", "hey", "good morning", "good afternoon", "good evening"),
    "pricing": ("price", "cost", "fee", "charge", "money", "expensive", "cheap", "budget"),
    "programs": ("course", "program", "class", "training", "curriculum", "syllabus"),
    "schedule": ("time", "schedule", "timing", "when", "batch", "duration"),
    "admission": ("admission", "enroll", "join", "register", "apply", "eligibility"),
    "contact": ("contact", "call", "phone", "email", "address", "location", "visit", "whatsapp"),
    "demo": ("demo", "trial", "sample", "free", "preview"),
    "placement": ("placement", "job", "career", "employment", "salary"),
    "policies": ("policy", "refund", "terms", "conditions", "rules"),
    "complaint": ("problem", "issue", "complain", "bad", "terrible", "worst", "disappointed"),
}

POSITIVE_WORDS = (
    "good", "great", "excellent", "amazing", "love", "best", "awesome",
    "perfect", "happy", "satisfied", "thank",
)
NEGATIVE_WORDS = (
    "bad", "terrible", "worst", "hate", "awful", "horrible", "disappointed",
    "angry", "frustrated", "sad",
)

CONTACT_FORM_TRIGGERS = (
    "contact", "call me", "speak to someone", "human", "agent", "phone number",
    "email", "visit", "meet", "appointment", "whatsapp",
)


def analyze_intent(message: str | None) -> str:
    """
    Label a message with the first intent whose keywords it contains.

    Matching is substring based, so "hi" also matches inside longer words.

    Returns:
        str: Intent name, "inquiry" when nothing matches
    """
    text = (message or "").lower()
    for intent, keywords in INTENT_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return intent
    return DEFAULT_INTENT


def analyze_sentiment(message: str | None) -> str:
    """Compare positive and negative keyword counts: positive, negative or neutral."""
    text = (message or "").lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in text)
    negative = sum(1 for word in NEGATIVE_WORDS if word in text)
    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def should_show_contact_form(intent: str, message: str | None) -> bool:
    text = (message or "").lower()
    return intent == "contact" or any(trigger in text for trigger in CONTACT_FORM_TRIGGERS)
