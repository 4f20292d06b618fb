# unit tests for parsing and orchestration, fast and independent of live http

import json
import math
from pathlib import Path
import pytest
from numagg.client import CatalogClient
from numagg.models import SeriesSummary
from numagg.service import compute_all, find_laptop, parse_laptops, price_summary, summarize

DB_PATH = Path(__file__).parent / "data" / "db.json"


@pytest.fixture
def laptops():
    return parse_laptops(json.loads(DB_PATH.read_text()))


def test_parse_laptops_example(laptops):
    assert len(laptops) == 3
    assert isinstance(laptops[0].price.amount, float)


def test_parse_laptops_accepts_bare_list():
    payload = json.loads(DB_PATH.read_text())["laptops"]
    assert [l.name for l in parse_laptops(payload)][0] == "Macbook Pro 13"


def test_parse_laptops_rejects_unknown_shapes():
    with pytest.raises(ValueError):
        parse_laptops({"desktops": []})
    with pytest.raises(ValueError):
        parse_laptops("laptops")
    with pytest.raises(ValueError):
        parse_laptops([{"name": "No price"}])


def test_macbook_pro_is_very_expensive(laptops):
    macbook = find_laptop(laptops, "Macbook Pro 13")
    assert macbook.price.currency == "USD"
    assert macbook.price.amount > 1000


def test_macbook_pro_only_has_usb_type_c(laptops):
    assert find_laptop(laptops, "Macbook Pro 13").only_has_usb_type_c is True


def test_macbook_pro_built_in_apps(laptops):
    macbook = find_laptop(laptops, "Macbook Pro 13")
    assert list(macbook.built_in_apps) == ["Siri", "Safari", "Messages", "Facetime"]


def test_find_laptop_missing(laptops):
    assert find_laptop(laptops, "Macbook Air") is None


def test_summarize():
    assert summarize("s", [1, 15, 3, 2, 4]) == SeriesSummary(name="s", average=5, biggest=15)


def test_compute_all_is_sorted_by_name():
    results = compute_all({"beta": [5, 5, 5], "Alpha": [1, 2, 3], "gamma": [-1, -2]}, max_workers=2)
    assert [r.name for r in results] == ["Alpha", "beta", "gamma"]
    assert results[0].average == 2
    assert results[1].biggest == 5
    # zero seed carries through
    assert results[2].biggest == 0


def test_compute_all_orders_case_only_ties():
    for _ in range(5):
        results = compute_all({"a": [1], "A": [2], "b": [3]}, max_workers=3)
        assert [r.name for r in results] == ["A", "a", "b"]


def test_compute_all_propagates_worker_errors():
    with pytest.raises(TypeError):
        compute_all({"bad": [1, "two"]})


def test_compute_all_empty_series():
    (result,) = compute_all({"empty": []})
    assert math.isnan(result.average)
    assert result.biggest == 0


def test_price_summary_from_file():
    summary = price_summary(CatalogClient(path=DB_PATH))
    assert summary.name == "laptops"
    assert summary.biggest == 1499
    assert summary.average == pytest.approx((1499 + 999 + 1299) / 3)
