"""Prompt assembly for the analysis model.

``assemble`` turns a classified upload plus optional context text into the
ordered list of parts sent to the model: content parts first, then exactly
one instruction part that refers back to "the provided content".
"""

from __future__ import annotations

import logging

from scamfinder.models.content import ContentCategory, InlineBinary, PromptPart, PromptPayload, TextPart

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert cybersecurity analyst and fraud detection system. "
    "Be critical and detail-oriented. "
    "For HTML files, pay special attention to scripts and hidden redirects."
)

HTML_START_MARKER = "[ANALYSIS TARGET: HTML FILE CONTENT START]"
HTML_END_MARKER = "[HTML FILE CONTENT END]"

CONTEXT_LABEL = "Additional Context/Text Input:"

BASE_INSTRUCTION = """\
Analyze the provided content for scam indicators.

1. Text Scam Analysis:
   - Extract all URLs, Phone Numbers, Emails.
   - Flag poor grammar, urgency keywords, money-transfer patterns.
   - Detect URL shorteners, punycode, or mismatched domains.
"""

_HTML_CHECKLIST = """\
2. HTML/Web Source Analysis:
   - CRITICAL: Identify embedded malicious scripts, hidden iframes, or obfuscated JS.
   - Analyze href attributes for phishing redirects.
   - Detect deceptive visual overlays or fake login form structures.
"""

_EMAIL_CHECKLIST = """\
2. Email/Outlook File Analysis:
   - Analyze email headers (if visible) for spoofing.
   - Check for "From" address mismatches.
   - Detect phishing attachments or links to credential harvesting sites.
"""

_IMAGE_CHECKLIST = """\
2. Image Forensics (AI Likelihood):
   - Analyze skin smoothness, background warping, eye reflection symmetry, object edge consistency.
   - Estimate AI generation probability.
"""

_DOCUMENT_CHECKLIST = """\
2. Document Analysis:
   - Extract readable text from the document.
   - Analyze the content for fraudulent patterns.
"""

CATEGORY_CHECKLISTS: dict[ContentCategory, str] = {
    ContentCategory.HTML_SOURCE: _HTML_CHECKLIST,
    ContentCategory.EMAIL_CONTAINER: _EMAIL_CHECKLIST,
    ContentCategory.IMAGE: _IMAGE_CHECKLIST,
    ContentCategory.GENERIC_DOCUMENT: _DOCUMENT_CHECKLIST,
}


def build_instruction(category: ContentCategory, context: str = "") -> str:
    """Compose the instruction text: base checklist, category checklist, context."""
    text = BASE_INSTRUCTION
    checklist = CATEGORY_CHECKLISTS.get(category)
    if checklist:
        text += "\n" + checklist
    if context and context.strip():
        text += f"\n{CONTEXT_LABEL} {context}"
    return text


def _html_part(payload: bytes, mime_type: str) -> PromptPart:
    try:
        decoded = payload.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("HTML payload is not valid UTF-8 (%s); sending as inline binary", e.reason)
        return InlineBinary(data=payload, mime_type=mime_type)
    return TextPart(text=f"{HTML_START_MARKER}\n{decoded}\n{HTML_END_MARKER}")


def assemble(
    category: ContentCategory,
    payload: bytes | None = None,
    context: str = "",
    *,
    mime_type: str = "application/octet-stream",
) -> PromptPayload:
    """Build the prompt parts for one scan.

    Args:
        category: Classified content category, ``NONE`` when no file.
        payload: Raw file bytes, ignored for ``NONE``.
        context: Free text typed by the user; appended as labelled context.
        mime_type: Normalized MIME type used for inline binary parts.

    Returns:
        A ``PromptPayload`` whose last part is the instruction text.
    """
    parts: list[PromptPart] = []

    if category is not ContentCategory.NONE and payload is not None:
        if category is ContentCategory.HTML_SOURCE:
            parts.append(_html_part(payload, mime_type))
        else:
            parts.append(InlineBinary(data=payload, mime_type=mime_type))

    parts.append(TextPart(text=build_instruction(category, context)))

    logger.debug(
        "Assembled prompt: category=%s parts=%d inline_binary=%s",
        category.value,
        len(parts),
        any(isinstance(p, InlineBinary) for p in parts),
    )
    return PromptPayload(parts=tuple(parts))
