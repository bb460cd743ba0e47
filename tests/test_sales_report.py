from gustanto_pos.domain import daily_totals, order_date


def test_sums_totals_per_day():
    orders = [
        {"total": 100, "timestamp": "2024-05-01T09:00:00.000Z"},
        {"total": 150, "timestamp": "2024-05-01T18:30:00.000Z"},
        {"total": 75, "timestamp": "2024-05-02T08:00:00.000Z"},
    ]

    assert daily_totals(orders) == [
        {"date": "2024-05-01", "total": 250},
        {"date": "2024-05-02", "total": 75},
    ]


def test_days_keep_first_seen_order():
    orders = [
        {"total": 1, "timestamp": "2024-05-03T00:00:00Z"},
        {"total": 2, "timestamp": "2024-05-01T00:00:00Z"},
        {"total": 3, "timestamp": "2024-05-03T12:00:00Z"},
    ]

    assert [row["date"] for row in daily_totals(orders)] == ["2024-05-03", "2024-05-01"]


def test_missing_total_counts_as_zero():
    orders = [
        {"timestamp": "2024-05-01T09:00:00Z"},
        {"total": None, "timestamp": "2024-05-01T10:00:00Z"},
        {"total": 20, "timestamp": "2024-05-01T11:00:00Z"},
    ]

    assert daily_totals(orders) == [{"date": "2024-05-01", "total": 20}]


def test_unreadable_timestamps_are_skipped():
    orders = [
        {"total": 10},
        {"total": 10, "timestamp": "not a date"},
        {"total": 10, "timestamp": "2024-05-01T11:00:00Z"},
    ]

    assert daily_totals(orders) == [{"date": "2024-05-01", "total": 10}]


def test_date_is_taken_in_utc():
    assert order_date("2024-05-01T23:30:00-02:00") == "2024-05-02"
    assert order_date("2024-05-01T23:30:00") == "2024-05-01"


def test_empty_input():
    assert daily_totals([]) == []
