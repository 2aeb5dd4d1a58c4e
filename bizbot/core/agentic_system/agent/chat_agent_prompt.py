"""
Chat agent system prompt.

Builds the grounded system prompt for a business: the business record as an
authoritative fallback, the style directive, the grounding policy and, when
present, the retrieved context.

Dependencies: bizbot.models, bizbot.core.retriever
System role: Prompt composition for the chat agent
"""

from bizbot.core.retriever import is_contact_like
from bizbot.models import Business

MISSING_VALUE = "—"

FALLBACK_CARD_START = "=== FALLBACK_CONTACT_CARD ==="
FALLBACK_CARD_END = "=== END_FALLBACK_CONTACT_CARD ==="

CONTEXT_CONTACT_MARKERS = (
    "=== contact_card ===",
    "phone:",
    "whatsapp:",
    "email:",
    "address:",
    "website:",
    "hours:",
)

BASE_PROMPT = """You are a helpful AI assistant for {name}.

BUSINESS INFORMATION (authoritative fallback if the context lacks specifics):
- Name: {name}
- Description: {description}
- Phone: {phone}
- Email: {email}
- Address: {address}
- Website: {website}
- Hours: {hours}

PERSONALITY & STYLE:
- Friendly, professional, conversational; avoid sounding robotic.
- Use natural language that feels human; be concise but complete.
- Offer to help further or connect with a human when appropriate.

RESPONSE GUIDELINES:
- Prefer information in the CONTEXT below. If a requested field is missing in the context, use BUSINESS INFORMATION above.
- For contact/location questions, copy numbers, emails, URLs, and addresses exactly as written (no paraphrasing).
- Never invent prices, dates, or details not present in the context or business info.
- If something truly isn't available in either, say so plainly and offer next steps."""

CONTEXT_SECTION = """

CONTEXT (retrieved knowledge):
{context}

Answer the user using the context. If the context lacks a requested field, safely backfill from BUSINESS INFORMATION. If they conflict, prefer CONTEXT."""


def build_system_prompt(business: Business, context: str | None = None) -> str:
    """
    Compose the system prompt.

    The CONTEXT section is omitted entirely when there is no context.

    Args:
        business: Business record
        context: Numbered context block, possibly with a fallback card

    Returns:
        str: System prompt
    """
    prompt = BASE_PROMPT.format(
        name=business.name,
        description=business.description or MISSING_VALUE,
        phone=business.phone or MISSING_VALUE,
        email=business.email or MISSING_VALUE,
        address=business.address or MISSING_VALUE,
        website=business.website or MISSING_VALUE,
        hours=business.hours or MISSING_VALUE,
    )
    if context and context.strip():
        prompt += CONTEXT_SECTION.format(context=context)
    return prompt


def build_context(contents: list[str]) -> str:
    """Number chunk contents as "[n] content" blocks separated by blank lines."""
    return "\n\n".join(f"[{index}] {content}" for index, content in enumerate(contents, start=1))


def build_fallback_contact_card(business: Business) -> str:
    """
    Render the business record as a contact card.

    WhatsApp falls back to the phone number when the phone field mentions
    WhatsApp.
    """
    lines = [FALLBACK_CARD_START]
    if business.phone:
        lines.append(f"Phone: {business.phone}")
    whatsapp = business.whatsapp
    if not whatsapp and "whatsapp" in (business.phone or "").lower():
        whatsapp = business.phone
    if whatsapp:
        lines.append(f"WhatsApp: {whatsapp}")
    if business.email:
        lines.append(f"Email: {business.email}")
    if business.address:
        lines.append(f"Address: {business.address}")
    if business.website:
        lines.append(f"Website: {business.website}")
    if business.hours:
        lines.append(f"Hours:\n{business.hours}")
    lines.append(FALLBACK_CARD_END)
    return "\n".join(lines)


def context_has_contact(context: str | None) -> bool:
    text = (context or "").lower()
    return any(marker in text for marker in CONTEXT_CONTACT_MARKERS)


def ensure_contact_in_context(context: str | None, business: Business, query: str) -> str:
    """
    Prepend the fallback contact card for contact-like queries whose context
    carries no contact details.

    Args:
        context: Numbered context block (may be empty)
        business: Business record
        query: User message

    Returns:
        str: Context, possibly with the fallback card in front
    """
    context = context or ""
    if is_contact_like(query) and not context_has_contact(context):
        return f"{build_fallback_contact_card(business)}\n\n{context}".strip()
    return context
