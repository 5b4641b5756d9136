import pytest

from stylelog.schemas.outfits import OutfitTags
from stylelog.services.analysis import analyze_outfit, analyze_tags, rules
from stylelog.services.analysis.engine import summarize
from tests.fixtures import make_outfit


def test_empty_style_is_neutral():
    assert analyze_tags(OutfitTags(colors=["red"])).style_coherence == 0.5


def test_single_color_and_no_colors():
    assert analyze_tags(OutfitTags(colors=["red"])).color_harmony == 0.9
    assert analyze_tags(OutfitTags()).color_harmony == 0.5


@pytest.mark.parametrize(
    "colors,expected",
    [
        (["black", "navy"], 0.9),
        (["red", "navy"], 0.7),
        (["red", "green"], 0.5),
        (["light-gray", "charcoal-black", "red", "yellow"], 0.7),
    ],
)
def test_color_harmony_neutral_ratio(colors, expected):
    assert analyze_tags(OutfitTags(colors=colors)).color_harmony == expected


def test_formal_casual_conflict_is_penalized():
    clean = analyze_tags(OutfitTags(style=["formal"], occasion=["work"]))
    mixed = analyze_tags(OutfitTags(style=["formal", "casual"], occasion=["work"]))
    assert mixed.style_coherence <= 0.6
    assert mixed.style_coherence < clean.style_coherence
    assert clean.style_coherence == 0.8


def test_multiple_conflicts_stack_and_clamp():
    tags = OutfitTags(style=["formal", "casual", "minimalist", "bohemian", "edgy", "romantic"])
    assert analyze_tags(tags).style_coherence == pytest.approx(0.2)


def test_occasion_fit():
    assert analyze_tags(OutfitTags()).occasion_appropriateness == 0.5
    assert analyze_tags(OutfitTags(occasion=["date"])).occasion_appropriateness == 0.8


def test_summary_tiers():
    assert summarize(0.8, 0.9, 0.8) == rules.SUMMARY_EXCELLENT
    assert summarize(0.8, 0.8, 0.8) == rules.SUMMARY_EXCELLENT
    assert summarize(0.6, 0.6, 0.6) == rules.SUMMARY_GOOD
    assert summarize(0.5, 0.5, 0.5) == rules.SUMMARY_ADJUST


def test_improvements_in_check_order():
    tags = OutfitTags(
        style=["formal", "casual", "edgy", "romantic"],
        colors=["red", "green"],
        garments=[f"piece {i}" for i in range(7)],
    )
    assert analyze_tags(tags).suggested_improvements == [
        rules.IMPROVE_STYLE,
        rules.IMPROVE_COLORS,
        rules.IMPROVE_SIMPLIFY,
    ]


def test_no_improvements_for_a_good_outfit():
    tags = OutfitTags(style=["classic"], colors=["navy"], occasion=["work"], garments=["blazer", "trousers"])
    analysis = analyze_tags(tags)
    assert analysis.suggested_improvements == []
    assert analysis.summary == rules.SUMMARY_EXCELLENT


def test_confidence_factors():
    tags = OutfitTags(style=["classic"], colors=["Dark-Navy"], occasion=["work"])
    assert analyze_tags(tags).confidence_factors == [
        rules.FACTOR_CLASSIC,
        rules.FACTOR_DARK_COLORS,
        rules.FACTOR_WORK,
    ]
    assert analyze_tags(OutfitTags(colors=["red"])).confidence_factors == []


def test_all_empty_tags_never_raise():
    analysis = analyze_tags(OutfitTags())
    assert (analysis.style_coherence, analysis.color_harmony, analysis.occasion_appropriateness) == (0.5, 0.5, 0.5)
    assert analysis.summary == rules.SUMMARY_ADJUST


def test_analyze_outfit_is_idempotent():
    outfit = make_outfit(style=["classic", "edgy"], colors=["black", "red"], occasion=["date"])
    assert analyze_outfit(outfit) == analyze_outfit(outfit)
