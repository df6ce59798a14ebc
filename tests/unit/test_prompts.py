from truckorder.api.menu_store import default_catalog
from truckorder.api.prompts import added_to_cart_text, click_to_add_text, describe_item
from truckorder.api.parser.types import MatchResult


def test_describe_item_formats_price():
    burger = default_catalog().get(1)
    assert describe_item(burger) == "Classic Burger - $12.99"


def test_click_to_add_text():
    wrap = default_catalog().get(4)
    assert click_to_add_text(wrap) == "Added Veggie Wrap to cart"


def test_added_to_cart_text_single_item():
    tacos = default_catalog().get(2)
    assert added_to_cart_text([MatchResult(tacos, 3)]) == "Added 3 Chicken Tacos to your cart!"
