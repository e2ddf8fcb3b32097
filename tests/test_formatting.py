from mediacatalog.utils.formatting import format_date, join_values


def test_format_date_month_day_year():
    assert format_date("2023-06-05T14:30:00.000Z") == "June 5, 2023"
    assert format_date("2021-12-31") == "December 31, 2021"


def test_format_date_passes_through_garbage():
    assert format_date("someday") == "someday"
    assert format_date("") == ""


def test_join_values():
    assert join_values(["a", "b"]) == "a, b"
    assert join_values([1, 3]) == "1, 3"
    assert join_values("2") == ""
    assert join_values(None) == ""
