from okazje.table import SortDirection, SortDirective, TableView

COLUMNS = {
    "title": lambda r: r.get("title"),
    "price": lambda r: r.get("price"),
}

DEALS = [
    {"title": "Słuchawki", "price": 199.0},
    {"title": "Ekspres", "price": 899.0},
    {"title": "Ładowarka", "price": 49.0},
    {"title": "Akumulator", "price": None},
]


def test_state_reports_page_sort_and_columns():
    view = TableView(DEALS, page_size=2, initial_sort=SortDirective("price", SortDirection.DESC), columns=COLUMNS)
    state = view.state()
    assert [d["title"] for d in state["items"]] == ["Ekspres", "Słuchawki"]
    assert state["page"] == 1
    assert state["total_pages"] == 2
    assert state["total_items"] == 4
    assert state["range"] == {"start": 1, "end": 2}
    assert state["sort"] == {"field": "price", "direction": "desc"}
    assert state["columns"]["price"] == {"icon": "desc", "next_sort": {"field": "price", "direction": "asc"}}
    assert state["columns"]["title"] == {"icon": None, "next_sort": {"field": "title", "direction": "asc"}}


def test_request_sort_reorders_and_keeps_page():
    view = TableView(DEALS, page_size=2, columns=COLUMNS)
    view.go_to_page(2)
    view.request_sort("title")
    assert view.pager.current_page == 2
    assert [d["title"] for d in view.items()] == ["Ładowarka", "Słuchawki"]


def test_missing_prices_stay_last_after_toggle():
    view = TableView(DEALS, page_size=10, columns=COLUMNS)
    view.request_sort("price")
    assert view.items()[-1]["title"] == "Akumulator"
    view.request_sort("price")
    assert view.items()[-1]["title"] == "Akumulator"
    assert view.items()[0]["title"] == "Ekspres"


def test_set_records_after_filter_heals_page():
    view = TableView(DEALS, page_size=1, columns=COLUMNS)
    view.go_to_last_page()
    view.set_records(DEALS[:2])
    assert view.state()["page"] == 2


def test_set_page_size_returns_to_first_page():
    view = TableView(DEALS, page_size=1, columns=COLUMNS)
    view.go_to_page(3)
    view.set_page_size(2)
    assert view.state()["page"] == 1
    assert view.state()["page_size"] == 2
