"""
tests/unit/test_template_matcher.py

Unit tests for the template catalog and keyword matcher.

Verifies:
✔ Highest keyword count wins
✔ Ties resolve to the first-listed template
✔ Zero matches → general fallback
✔ Matching is case-insensitive and substring-based
✔ Catalog rejects duplicate ids and zero/multiple fallbacks
✔ Default catalog shape (5 templates, "general" last)
"""

import pytest

from composer.templates import (
    DEFAULT_CATALOG,
    EmailTemplate,
    TemplateCatalog,
    TemplateCatalogError,
    find_matching_template,
    score_template,
)


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


def make_template(template_id: str, keywords=()):
    return EmailTemplate(
        id=template_id,
        name=template_id.title(),
        keywords=tuple(keywords),
        subject=f"{template_id} subject",
        body=f"{template_id} body",
    )


@pytest.fixture
def small_catalog():
    return TemplateCatalog([
        make_template("alpha", ["sale", "offer"]),
        make_template("beta", ["launch", "sale"]),
        make_template("fallback"),
    ])


# ─────────────────────────────────────────────────────
# Scoring
# ─────────────────────────────────────────────────────


class TestScoring:
    def test_score_counts_substring_hits(self):
        template = make_template("t", ["feed", "back", "zzz"])
        assert score_template("Give FEEDBACK please", template) == 2

    def test_fallback_scores_zero(self):
        assert score_template("anything", make_template("f")) == 0


# ─────────────────────────────────────────────────────
# Matching
# ─────────────────────────────────────────────────────


class TestFindMatchingTemplate:
    def test_highest_score_wins(self, small_catalog):
        # beta: launch + sale = 2, alpha: sale = 1
        assert find_matching_template("launch sale", small_catalog).id == "beta"

    def test_higher_score_wins_even_when_listed_later(self):
        catalog = TemplateCatalog([
            make_template("b", ["one"]),
            make_template("a", ["one", "two"]),
            make_template("fallback"),
        ])
        assert find_matching_template("one two", catalog).id == "a"

    def test_tie_goes_to_first_listed(self, small_catalog):
        assert find_matching_template("big sale", small_catalog).id == "alpha"

    def test_no_match_returns_fallback(self, small_catalog):
        assert find_matching_template("hello world", small_catalog).id == "fallback"

    def test_empty_prompt_returns_fallback(self, small_catalog):
        assert find_matching_template("", small_catalog).id == "fallback"

    def test_fallback_position_irrelevant(self):
        catalog = TemplateCatalog([
            make_template("fallback"),
            make_template("alpha", ["sale"]),
        ])
        assert find_matching_template("sale", catalog).id == "alpha"
        assert find_matching_template("nothing", catalog).id == "fallback"

    def test_case_insensitive(self, small_catalog):
        assert find_matching_template("LAUNCH", small_catalog).id == "beta"


class TestDefaultCatalog:
    def test_shape(self):
        ids = [t.id for t in DEFAULT_CATALOG]
        assert ids == ["feedback", "announcement", "feature_update", "promotion", "general"]
        assert DEFAULT_CATALOG.fallback.name == "General Purpose"

    def test_feedback_prompt(self):
        template = find_matching_template("write a feedback request", DEFAULT_CATALOG)
        assert template.name == "Feedback Request"

    def test_announcement_beats_feature_update(self):
        # announcement: "announce" + "new" = 2, feature_update: "feature" = 1
        template = find_matching_template("announce new feature", DEFAULT_CATALOG)
        assert template.name == "Announcement"

    def test_unmatched_prompt_uses_general(self):
        template = find_matching_template("hello there friends", DEFAULT_CATALOG)
        assert template.name == "General Purpose"

    def test_every_template_has_placeholders(self):
        for template in DEFAULT_CATALOG:
            assert "{ctaLink}" in template.body
            assert "{appName}" in template.subject or "{appName}" in template.body

    def test_get_by_id(self):
        assert DEFAULT_CATALOG.get("promotion").name == "Promotion / CTA"
        with pytest.raises(KeyError):
            DEFAULT_CATALOG.get("missing")


class TestCatalogValidation:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(TemplateCatalogError):
            TemplateCatalog([make_template("a", ["x"]), make_template("a", ["y"]), make_template("f")])

    def test_missing_fallback_rejected(self):
        with pytest.raises(TemplateCatalogError):
            TemplateCatalog([make_template("a", ["x"])])

    def test_two_fallbacks_rejected(self):
        with pytest.raises(TemplateCatalogError):
            TemplateCatalog([make_template("f1"), make_template("f2")])
