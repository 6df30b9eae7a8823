"""
Prompt Builder Layer
====================

Assembles the value object every generation backend receives.

Responsibilities:
- Defines the authoritative SYSTEM_PROMPT brand/format contract
- Binds the product name into the contract
- Packages system instruction + user prompt into an immutable GenerationPrompt

Invariants:
- The system instruction is identical for every backend in one cascade run
- The user prompt is capped at _MAX_PROMPT_CHARS before it is sent out
- The contract always asks for a bare {"subject": ..., "body": ...} JSON object,
  which is what GeminiModelBackend's extractor expects
- {user}, {appName} and {ctaLink} stay as literal placeholders; they are
  substituted after generation, never by the model
"""

from string import Template
from typing import Optional

from inference import GenerationPrompt

# ── Budget Constants ──────────────────────────────────────────────────────────
_MAX_PROMPT_CHARS: int = 4000

# ── Behavioral Contract ───────────────────────────────────────────────────────
# $app_name is bound by build_system_instruction(); braces are left alone.
SYSTEM_PROMPT = """You are an expert email copywriter for $app_name, a GitHub automation tool. Generate professional, engaging HTML emails.

REQUIREMENTS:
1. Return ONLY valid JSON with this exact structure: {"subject": "...", "body": "..."}
2. The "body" must be the INNER HTML content only (no DOCTYPE, html, head, body tags - those are added later)
3. Use inline CSS styles on each element
4. Use $app_name brand colors: primary green #39d353, background #161b22, text #c9d1d9
5. Include a prominent CTA button with gradient background and link to {ctaLink}
6. Keep emails concise, friendly, and action-oriented
7. Use emojis sparingly but effectively
8. Write {user} for the recipient name, {appName} for the product name and {ctaLink} for the action URL
9. Structure: Greeting → Main message → CTA button → Closing

BUTTON STYLE:
<table role="presentation" cellpadding="0" cellspacing="0" style="margin: 0 auto;">
    <tr>
        <td style="background: linear-gradient(135deg, #39d353 0%, #2ea043 100%); border-radius: 8px;">
            <a href="{ctaLink}" style="display: inline-block; padding: 14px 28px; color: #0d1117; text-decoration: none; font-weight: 700; font-size: 16px;">
                Button Text →
            </a>
        </td>
    </tr>
</table>

TEXT STYLES:
- Headings: color: #f0f6fc; font-size: 24px; font-weight: 700;
- Body text: color: #c9d1d9; font-size: 16px; line-height: 1.6;
- Muted text: color: #8b949e; font-size: 14px;"""


def build_system_instruction(app_name: str) -> str:
    """Bind the product name into SYSTEM_PROMPT."""
    return Template(SYSTEM_PROMPT).safe_substitute(app_name=app_name)


def build_prompt(
    user_input: str,
    app_name: str,
    trace_id: Optional[str] = None,
) -> GenerationPrompt:
    """
    Assemble the GenerationPrompt handed to each backend.

    Args:
        user_input: The admin's request (stripped, then capped at _MAX_PROMPT_CHARS).
        app_name:   Product name bound into the system instruction.
        trace_id:   Optional correlation id, forwarded into backend log records.

    Returns:
        Frozen GenerationPrompt, safe to share across sequential attempts.
    """
    return GenerationPrompt(
        system_instruction=build_system_instruction(app_name),
        user_prompt=user_input.strip()[:_MAX_PROMPT_CHARS],
        trace_id=trace_id,
    )
