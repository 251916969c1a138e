from datetime import date

from spotbnb.services.booking.overlap import conflict_errors, ranges_overlap

JUNE_1 = date(2024, 6, 1)
JUNE_5 = date(2024, 6, 5)


def test_ranges_overlap_inclusive_bounds():
    assert ranges_overlap(date(2024, 6, 5), date(2024, 6, 8), JUNE_1, JUNE_5)
    assert ranges_overlap(date(2024, 5, 28), JUNE_1, JUNE_1, JUNE_5)
    assert not ranges_overlap(date(2024, 6, 6), date(2024, 6, 9), JUNE_1, JUNE_5)
    assert not ranges_overlap(date(2024, 5, 20), date(2024, 5, 31), JUNE_1, JUNE_5)


def test_conflict_errors_names_the_clashing_endpoint():
    assert conflict_errors(date(2024, 6, 4), date(2024, 6, 10), JUNE_1, JUNE_5) == {
        "startDate": "Start date conflicts with an existing booking"
    }
    assert conflict_errors(date(2024, 5, 25), date(2024, 6, 2), JUNE_1, JUNE_5) == {
        "endDate": "End date conflicts with an existing booking"
    }
    assert set(conflict_errors(date(2024, 6, 2), date(2024, 6, 3), JUNE_1, JUNE_5)) == {"startDate", "endDate"}


def test_conflict_errors_for_enclosing_range():
    errors = conflict_errors(date(2024, 5, 30), date(2024, 6, 10), JUNE_1, JUNE_5)
    assert set(errors) == {"startDate", "endDate"}


def test_no_conflict_for_disjoint_range():
    assert conflict_errors(date(2024, 6, 6), date(2024, 6, 10), JUNE_1, JUNE_5) == {}
