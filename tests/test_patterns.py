from stylelog.schemas.analysis import PatternCriteria
from stylelog.services.analysis import analyze_style_patterns
from stylelog.services.analysis.patterns import EMPTY_HISTORY_TIP, window_for
from tests.fixtures import NOW, make_outfit, rated, work_history


def _by_category(pattern):
    return {i.category: i for i in pattern.insights}


def test_empty_history_is_neutral():
    pattern = analyze_style_patterns([], PatternCriteria(), NOW)
    assert pattern.pattern_type == "overview"
    assert pattern.outfits_analyzed == 0
    assert pattern.insights == []
    assert pattern.recommendations == [EMPTY_HISTORY_TIP]


def test_overview_over_work_history():
    pattern = analyze_style_patterns(work_history(), PatternCriteria(time_period="month"), NOW)
    found = _by_category(pattern)
    assert pattern.outfits_analyzed == 10
    assert pattern.time_frame == "month"

    confidence = found["Confidence"]
    assert confidence.trend == "increasing"
    assert confidence.value == 6.0
    assert confidence.significance == "high"

    comfort = found["Comfort"]
    assert comfort.trend == "stable"
    assert comfort.significance == "low"

    style = found["Style Evolution"]
    assert style.value == 0.6
    assert "classic" in style.description
    for insight in pattern.insights:
        assert insight.trend in {"increasing", "decreasing", "stable"}
        assert insight.significance in {"high", "medium", "low"}


def test_single_analysis_type():
    criteria = PatternCriteria(analysis_type="confidence_trends")
    pattern = analyze_style_patterns(work_history(), criteria, NOW)
    assert pattern.pattern_type == "confidence_trends"
    assert [i.category for i in pattern.insights] == ["Confidence"]


def test_focus_category_filters_occasion():
    pattern = analyze_style_patterns(work_history(), PatternCriteria(focus_category="work"), NOW)
    assert pattern.outfits_analyzed == 5


def test_declining_confidence_recommends_go_to_outfits():
    history = [make_outfit(days_ago=10 - i, ratings=rated(9 - i, 7, 7)) for i in range(6)]
    pattern = analyze_style_patterns(history, PatternCriteria(analysis_type="confidence_trends"), NOW)
    assert pattern.insights[0].trend == "decreasing"
    assert any("go-to" in r for r in pattern.recommendations)


def test_low_confidence_occasion_flagged():
    history = [
        make_outfit(days_ago=1, occasion=["formal"], ratings=rated(3, 5, 5)),
        make_outfit(days_ago=2, occasion=["casual"], ratings=rated(8, 8, 8)),
    ]
    pattern = analyze_style_patterns(history, PatternCriteria(analysis_type="occasion_analysis"), NOW)
    weak = _by_category(pattern)["Occasion Confidence"]
    assert "formal" in weak.description
    assert weak.significance == "high"


def test_window_for_periods():
    start, end = window_for("week", NOW)
    assert end == NOW
    assert (end - start).days == 7
    assert (NOW - window_for("year", NOW)[0]).days == 365
