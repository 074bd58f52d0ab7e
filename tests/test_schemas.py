from pizzeria.schemas import Card, CardType, Cheese, Crust, OrderLine, Size

from tests.factories import make_address, make_order, make_pizza


def test_ingredient_cost_by_size():
    crust = Crust(name="Thin", small_cost=2.0, medium_cost=3.0, large_cost=4.0)

    assert crust.cost(Size.SMALL) == 2.0
    assert crust.cost(Size.MEDIUM) == 3.0
    assert crust.cost("large") == 4.0


def test_pizza_cost_sums_every_ingredient():
    pizza = make_pizza()

    # crust + sauce + two cheeses + one topping
    assert pizza.cost(Size.SMALL) == 2.0 + 0.5 + 1.0 + 1.25 + 0.25
    assert pizza.cost(Size.LARGE) == 4.0 + 1.0 + 2.0 + 1.75 + 0.75


def test_unset_unit_cost_falls_back_to_pizza_cost():
    pizza = make_pizza()
    line = OrderLine(pizza=pizza, size=Size.MEDIUM, quantity=3)

    assert line.unit_cost is None
    assert line.effective_unit_cost == pizza.cost(Size.MEDIUM)


def test_zero_unit_cost_is_a_real_price():
    line = OrderLine(pizza=make_pizza(), size=Size.MEDIUM, quantity=3, unit_cost=0.0)

    assert line.effective_unit_cost == 0.0


def test_order_total_cost():
    order = make_order()
    large = order.lines[0].pizza.cost(Size.LARGE)

    assert order.total_cost == large * 2 + 5.0


def test_card_defaults_to_unknown_type():
    card = Card(address=make_address())

    assert card.type is CardType.UNKNOWN
    assert card.id == 0


def test_shared_references_are_kept():
    order = make_order()

    assert order.customer.address is order.address
    assert order.card.address is order.address
    assert order.lines[0].pizza is order.lines[1].pizza


def test_subtypes_are_not_equal_to_each_other():
    values = dict(name="Same", small_cost=1.0, medium_cost=1.0, large_cost=1.0)

    assert Crust(**values) != Cheese(**values)
