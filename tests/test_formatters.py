# tests/test_formatters.py

import core.formatters as formatters


def test_display_score_is_short():
    assert formatters.format_score(95.0) == "95"
    assert formatters.format_score(100 / 3) == "33.3333"


def test_format_score_lines():
    assert formatters.format_score_lines({"Math": 95.0, "Art": 88.5}) == [
        "  - Math: 95",
        "  - Art: 88.5",
    ]


def test_format_average():
    assert formatters.format_average(91.75) == "91.75"
    assert formatters.format_average(0) == "0.00"
