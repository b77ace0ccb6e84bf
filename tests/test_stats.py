from app.domain.stats import item_total, order_total, total_revenue


def test_item_defaults():
    assert item_total({}) == 0
    assert item_total({"price": 10}) == 10
    assert item_total({"price": 10, "quantity": 3}) == 30
    assert item_total({"quantity": 4}) == 0


def test_zero_quantity_counts_once():
    assert item_total({"price": 5, "quantity": 0}) == 5


def test_non_mapping_items_contribute_nothing():
    assert item_total("pizza") == 0
    assert item_total(None) == 0


def test_order_without_items():
    assert order_total({}) == 0
    assert order_total({"items": None}) == 0


def test_total_revenue_sums_every_item_of_every_order():
    orders = [
        {"items": [{}, {"price": 10, "quantity": 3}]},
        {"items": [{"price": 2.5, "quantity": 2}, {"price": 4}]},
        {"phone": "no-items"},
    ]
    assert total_revenue(orders) == 39
    assert total_revenue([]) == 0


def test_numeric_strings_are_parsed():
    assert item_total({"price": "10", "quantity": 3}) == 30
    assert item_total({"price": "2.5", "quantity": "2"}) == 5.0
    assert item_total({"price": " 4 "}) == 4


def test_non_numeric_values_contribute_nothing():
    assert item_total({"price": "free", "quantity": 3}) == 0
    assert item_total({"price": 10, "quantity": "many"}) == 0
    assert item_total({"price": [1], "quantity": 2}) == 0
    assert item_total({"price": "nan", "quantity": 2}) == 0


def test_items_that_are_not_a_list():
    assert order_total({"items": {"price": 10}}) == 0
    assert order_total({"items": "pizza"}) == 0
