"""Tests for recommendation text parsing."""

import pytest

from seo_audit.models import Priority, Recommendation
from seo_audit.parser import normalize_priority, parse_recommendations


def test_parses_mixed_sample():
    text = (
        "1. [HIGH] Missing title tag → Add a descriptive title element.\n"
        "2. [LOW] No canonical link"
    )
    assert parse_recommendations(text) == [
        Recommendation(Priority.HIGH, "Missing title tag", "Add a descriptive title element."),
        Recommendation(Priority.LOW, "No canonical link", "No canonical link"),
    ]


def test_inline_fix_is_trimmed():
    recs = parse_recommendations("3.   [HIGH]   Slow LCP   →   Preload the hero image   ")
    assert recs == [Recommendation(Priority.HIGH, "Slow LCP", "Preload the hero image")]


@pytest.mark.parametrize("token", ["MED", "med", "MEDIUM", "Medium", "medium"])
def test_medium_variants_normalize(token):
    recs = parse_recommendations(f"1. [{token}] Issue → Fix")
    assert recs[0].priority is Priority.MEDIUM


def test_priority_prefix_and_case():
    recs = parse_recommendations("1. [PRIORITY: high] Issue → Fix\n2. [priority:low] Other → Do it")
    assert [r.priority for r in recs] == [Priority.HIGH, Priority.LOW]
    assert recs[1].issue == "Other"


def test_normalize_priority():
    assert normalize_priority("low") is Priority.LOW
    assert normalize_priority("Med") is Priority.MEDIUM


def test_fix_on_next_line_is_consumed_once():
    text = (
        "1. [HIGH] Render-blocking CSS\n"
        "→ Inline critical CSS and defer the rest\n"
        "2. [LOW] Missing favicon → Add one"
    )
    recs = parse_recommendations(text)
    assert len(recs) == 2
    assert recs[0].fix == "Inline critical CSS and defer the rest"
    assert recs[1].issue == "Missing favicon"


def test_next_line_not_starting_with_arrow_is_not_a_fix():
    text = "1. [HIGH] Render-blocking CSS\nSome commentary → not a fix"
    recs = parse_recommendations(text)
    assert recs == [Recommendation(Priority.HIGH, "Render-blocking CSS", "Render-blocking CSS")]


def test_arrow_line_after_header_with_inline_fix_is_ignored():
    text = "1. [HIGH] Issue → Inline fix\n→ dangling"
    recs = parse_recommendations(text)
    assert recs == [Recommendation(Priority.HIGH, "Issue", "Inline fix")]


def test_consumed_fix_line_is_not_reparsed_as_header():
    text = "1. [LOW] First\n→ 2. [HIGH] Looks like a header"
    recs = parse_recommendations(text)
    assert len(recs) == 1
    assert recs[0].fix == "2. [HIGH] Looks like a header"


def test_fix_falls_back_to_issue():
    recs = parse_recommendations("1. [MEDIUM] Images missing alt text")
    assert recs[0].fix == recs[0].issue == "Images missing alt text"


def test_empty_arrow_segment_falls_back_to_issue():
    recs = parse_recommendations("1. [LOW] Thin content →   ")
    assert recs[0].fix
    assert recs[0].fix == recs[0].issue


def test_non_matching_lines_do_not_disturb_neighbours():
    text = (
        "Here are my recommendations:\n"
        "\n"
        "1. [HIGH] A → fix A\n"
        "- a stray bullet\n"
        "[HIGH] no ordinal → ignored\n"
        "2. [URGENT] unknown priority → ignored\n"
        "3. [LOW] C → fix C\n"
        "Hope this helps!"
    )
    recs = parse_recommendations(text)
    assert [(r.issue, r.fix) for r in recs] == [("A", "fix A"), ("C", "fix C")]


def test_order_preserved_and_not_truncated():
    lines = [f"{i}. [LOW] Issue {i} → Fix {i}" for i in range(1, 15)]
    recs = parse_recommendations("\n".join(reversed(lines)))
    assert len(recs) == 14
    assert [r.issue for r in recs] == [f"Issue {i}" for i in range(14, 0, -1)]


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_empty_input(text):
    assert parse_recommendations(text) == []


def test_prose_only_input():
    text = "Your site looks great overall.\nConsider improving performance."
    assert parse_recommendations(text) == []


def test_windows_line_endings():
    recs = parse_recommendations("1. [HIGH] A\r\n→ fix A\r\n2. [LOW] B → fix B\r\n")
    assert [(r.issue, r.fix) for r in recs] == [("A", "fix A"), ("B", "fix B")]


def test_idempotent():
    text = "1. [HIGH] A → B\n2. [MED] C\n→ D"
    assert parse_recommendations(text) == parse_recommendations(text)


@pytest.mark.parametrize("line", [
    "1. [HİGH] Slow LCP → Preload hero",
    "1. [MEDİUM] Slow LCP → Preload hero",
    "1. [PRİORİTY: LOW] Slow LCP → Preload hero",
    "١. [HIGH] Slow LCP → Preload hero",
    "１. [LOW] Slow LCP → Preload hero",
])
def test_non_ascii_lookalikes_are_skipped(line):
    text = f"{line}\n2. [LOW] Missing favicon → Add one"
    assert parse_recommendations(text) == [
        Recommendation(Priority.LOW, "Missing favicon", "Add one"),
    ]


def test_non_ascii_issue_text_is_kept():
    recs = parse_recommendations("1. [high] Título ausente → Añadir <title>")
    assert recs == [Recommendation(Priority.HIGH, "Título ausente", "Añadir <title>")]
