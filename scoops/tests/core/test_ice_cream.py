"""Tests for BasicIceCream."""

from scoops.core.models import BasicIceCream
from scoops.core.ports import IceCream


def test_basic_ice_cream_is_an_ice_cream() -> None:
    assert isinstance(BasicIceCream(), IceCream)


def test_fixed_description_and_cost() -> None:
    """Every basic ice cream has the same name and price."""
    scoop = BasicIceCream()
    assert scoop.get_description() == "Basic Ice Cream"
    assert scoop.cost() == 2.0


def test_flavor_starts_unset() -> None:
    assert BasicIceCream().get_flavor() is None


def test_set_flavor_overwrites() -> None:
    """The last flavor chosen wins."""
    scoop = BasicIceCream()
    scoop.set_flavor("vanilla")
    scoop.set_flavor("pistachio")
    assert scoop.get_flavor() == "pistachio"


def test_toppings_keep_order_and_duplicates() -> None:
    """Toppings are appended as given, duplicates included."""
    scoop = BasicIceCream()
    for topping in ("sprinkles", "fudge", "sprinkles"):
        scoop.add_topping(topping)

    assert scoop.get_toppings() == ["sprinkles", "fudge", "sprinkles"]


def test_toppings_not_shared_between_instances() -> None:
    first = BasicIceCream()
    second = BasicIceCream()
    first.add_topping("nuts")

    assert second.get_toppings() == []


def test_choices_do_not_change_cost() -> None:
    """Flavor and toppings are free."""
    scoop = BasicIceCream()
    scoop.set_flavor("chocolate")
    scoop.add_topping("cherry")
    assert scoop.cost() == 2.0


def test_equality_is_identity() -> None:
    """Two scoops with identical choices are still different items."""
    assert BasicIceCream(flavor="mint") != BasicIceCream(flavor="mint")
