"""
Email Template Catalog

Static, keyword-tagged fallback messages used when generation fails.
Built once at import, read-only afterwards; safe for concurrent readers.

Supported placeholders (see variables.py):
  {user}     recipient name
  {appName}  product name
  {ctaLink}  call-to-action URL
"""

from typing import Iterable, Iterator, Tuple

from pydantic import BaseModel, Field


class TemplateCatalogError(Exception):
    """Catalog is structurally invalid."""
    pass


class EmailTemplate(BaseModel):
    """One fallback template. An empty keyword set marks the general fallback."""

    id: str
    name: str
    keywords: Tuple[str, ...] = Field(default_factory=tuple)
    subject: str
    body: str

    class Config:
        frozen = True

    @property
    def is_fallback(self) -> bool:
        return len(self.keywords) == 0


class TemplateCatalog:
    """
    Ordered, immutable template collection.

    Order matters: the matcher breaks score ties by catalog position.
    Exactly one template must have no keywords.
    """

    def __init__(self, templates: Iterable[EmailTemplate]):
        self._templates: Tuple[EmailTemplate, ...] = tuple(templates)

        ids = [t.id for t in self._templates]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise TemplateCatalogError(f"Duplicate template ids: {', '.join(duplicates)}")

        fallbacks = [t for t in self._templates if t.is_fallback]
        if len(fallbacks) != 1:
            raise TemplateCatalogError(
                f"Catalog needs exactly one keyword-less fallback template, found {len(fallbacks)}"
            )
        self._fallback = fallbacks[0]

    @property
    def templates(self) -> Tuple[EmailTemplate, ...]:
        return self._templates

    @property
    def fallback(self) -> EmailTemplate:
        return self._fallback

    @property
    def scored(self) -> Tuple[EmailTemplate, ...]:
        """Templates that compete on keyword score, in catalog order."""
        return tuple(t for t in self._templates if not t.is_fallback)

    def get(self, template_id: str) -> EmailTemplate:
        for template in self._templates:
            if template.id == template_id:
                return template
        raise KeyError(template_id)

    def __iter__(self) -> Iterator[EmailTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


# ── Shared HTML fragments ─────────────────────────────────────────────────────
_H2 = '<h2 style="color: #f0f6fc; font-size: 24px; margin: 0 0 20px 0; font-weight: 700;">{}</h2>'
_P = '<p style="color: #c9d1d9; font-size: 16px; line-height: 1.6; margin: 0 0 20px 0;">\n    {}\n</p>'
_MUTED = '<p style="color: #8b949e; font-size: 14px; line-height: 1.6; margin: 24px 0 0 0; text-align: center;">\n    {}\n</p>'


def _cta_button(label: str) -> str:
    return (
        '<table role="presentation" cellpadding="0" cellspacing="0" style="margin: 0 auto;">\n'
        '    <tr>\n'
        '        <td style="background: linear-gradient(135deg, #39d353 0%, #2ea043 100%); border-radius: 8px;">\n'
        '            <a href="{ctaLink}" style="display: inline-block; padding: 14px 28px; color: #0d1117; '
        'text-decoration: none; font-weight: 700; font-size: 16px;">\n'
        f'                {label}\n'
        '            </a>\n'
        '        </td>\n'
        '    </tr>\n'
        '</table>'
    )


def _body(*blocks: str) -> str:
    return "\n\n".join(blocks) + "\n"


EMAIL_TEMPLATES: Tuple[EmailTemplate, ...] = (
    EmailTemplate(
        id="feedback",
        name="Feedback Request",
        keywords=("feedback", "review", "testimonial", "opinion", "experience", "rate", "survey"),
        subject="We'd Love Your Feedback on {appName}! 💬",
        body=_body(
            _H2.format("We'd Love Your Feedback ❤️"),
            _P.format("Hey {user} 👋"),
            _P.format(
                'Thanks for using <strong style="color: #39d353;">{appName}</strong>! Your experience '
                "matters a lot to us, and it helps improve the product for everyone."
            ),
            _P.format("Can you please take a moment to share your honest feedback?"),
            _cta_button("Give Feedback 🚀"),
            _MUTED.format("Thank you for being part of the {appName} community 💚<br/>\n    Keep building. Keep committing."),
        ),
    ),
    EmailTemplate(
        id="announcement",
        name="Announcement",
        keywords=("announce", "announcement", "news", "update", "launch", "release", "introducing", "new"),
        subject="🎉 Exciting News from {appName}!",
        body=_body(
            _H2.format("Big Announcement! 🎉"),
            _P.format("Hey {user} 👋"),
            _P.format("We have some exciting news to share with you!"),
            _P.format("[Your announcement content here]"),
            _cta_button("Learn More →"),
            _MUTED.format("Thanks for being with us on this journey! 🚀"),
        ),
    ),
    EmailTemplate(
        id="feature_update",
        name="Feature Update",
        keywords=("feature", "improvement", "upgrade", "version", "changelog", "fix", "enhance", "better"),
        subject="✨ New Feature Alert: {appName} Just Got Better!",
        body=_body(
            _H2.format("New Feature Unlocked! ✨"),
            _P.format("Hey {user} 👋"),
            _P.format(
                "We've been working hard on making "
                '<strong style="color: #39d353;">{appName}</strong> even better for you!'
            ),
            '<div style="background: #161b22; border: 1px solid #30363d; border-radius: 12px; padding: 20px; margin: 20px 0;">\n'
            '    <h3 style="color: #f0f6fc; font-size: 18px; margin: 0 0 12px 0;">What\'s New:</h3>\n'
            '    <ul style="color: #c9d1d9; font-size: 15px; line-height: 1.8; margin: 0; padding-left: 20px;">\n'
            "        <li>Feature improvement 1</li>\n"
            "        <li>Feature improvement 2</li>\n"
            "        <li>Bug fixes and performance boosts</li>\n"
            "    </ul>\n"
            "</div>",
            _cta_button("Try It Now →"),
        ),
    ),
    EmailTemplate(
        id="promotion",
        name="Promotion / CTA",
        keywords=("promo", "promotion", "offer", "discount", "deal", "sale", "limited", "exclusive", "free", "trial"),
        subject="🔥 Special Offer Inside - Don't Miss Out!",
        body=_body(
            _H2.format("Special Offer Just For You! 🔥"),
            _P.format("Hey {user} 👋"),
            _P.format("We've got something special for our amazing {appName} users!"),
            '<div style="background: linear-gradient(135deg, rgba(57, 211, 83, 0.1) 0%, rgba(88, 166, 255, 0.1) 100%); '
            'border: 1px solid #39d353; border-radius: 12px; padding: 20px; margin: 20px 0; text-align: center;">\n'
            '    <p style="color: #39d353; font-size: 28px; font-weight: 700; margin: 0;">\n'
            "        [Your Offer Here]\n"
            "    </p>\n"
            "</div>",
            _cta_button("Claim Now →"),
            _MUTED.format("Hurry, this offer won't last forever! ⏰"),
        ),
    ),
    EmailTemplate(
        id="general",
        name="General Purpose",
        keywords=(),
        subject="A Message from {appName} 💌",
        body=_body(
            '<h2 style="color: #f0f6fc; font-size: 26px; margin: 0 0 24px 0; font-weight: 800; text-align: center;">\n'
            "    Hello, {user}! 👋\n"
            "</h2>",
            '<div style="border: 1px solid rgba(57, 211, 83, 0.15); border-radius: 16px; padding: 24px; margin: 24px 0;">\n'
            '    <p style="color: #c9d1d9; font-size: 16px; line-height: 1.7; margin: 0; text-align: center;">\n'
            '        We have something to share with you from <strong style="color: #39d353;">{appName}</strong>\n'
            "    </p>\n"
            "</div>",
            _P.format("[Your personalized message content goes here]"),
            _cta_button("Open {appName} →"),
            _MUTED.format("You're receiving this because you're part of the {appName} community 💚"),
        ),
    ),
)

DEFAULT_CATALOG = TemplateCatalog(EMAIL_TEMPLATES)
