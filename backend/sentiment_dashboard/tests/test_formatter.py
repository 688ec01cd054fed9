from sentiment_dashboard.analytics import format_count, format_percent, format_score


def test_format_count_keeps_small_counts_plain():
    assert format_count(0) == "0"
    assert format_count(999) == "999"


def test_format_count_boundary_is_exclusive():
    assert format_count(1000) == "1000"
    assert format_count(1001) == "1.0K"


def test_format_count_abbreviates_thousands():
    assert format_count(43200) == "43.2K"
    assert format_count(2820) == "2.8K"


def test_format_score_rounds_to_one_decimal():
    assert format_score("8.2") == "8.2"
    assert format_score(7.0) == "7.0"
    assert format_score(7.78) == "7.8"
    assert format_score(0) == "0.0"


def test_format_percent_preserves_sign():
    assert format_percent(94) == "94%"
    assert format_percent(-5) == "-5%"
