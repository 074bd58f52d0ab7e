import pytest

from pizzeria.exceptions import ConstraintViolation, NotFound
from pizzeria.models import CrustModel, IngredientModel
from pizzeria.schemas import Cheese, Crust, Ingredient, Sauce, Topping


def add_crust(storage, name="Thin", costs=(2.0, 3.0, 4.0)):
    crust = Crust(name=name, small_cost=costs[0], medium_cost=costs[1], large_cost=costs[2])
    storage.ingredients.insert(crust)
    storage.crusts.insert(crust)
    return crust


def test_insert_assigns_id(storage):
    crust = Crust(name="Thin", small_cost=2.0, medium_cost=3.0, large_cost=4.0)

    storage.ingredients.insert(crust)

    assert crust.id > 0
    assert storage.ingredients.get_by_id(crust.id).name == "Thin"


def test_insert_is_idempotent(storage, count):
    crust = add_crust(storage)
    first_id = crust.id

    storage.ingredients.insert(crust)
    storage.crusts.insert(crust)

    assert crust.id == first_id
    assert count(IngredientModel) == 1
    assert count(CrustModel) == 1


def test_cost_order_is_enforced(storage, count):
    cheese = Cheese(name="Brie", small_cost=3.0, medium_cost=2.0, large_cost=4.0)

    with pytest.raises(ConstraintViolation) as exc_info:
        storage.ingredients.insert(cheese)

    assert exc_info.value.table == "ingredient"
    assert cheese.id == 0
    assert count(IngredientModel) == 0


def test_duplicate_name_is_rejected(storage):
    add_crust(storage, name="Thin")

    with pytest.raises(ConstraintViolation):
        storage.ingredients.insert(Sauce(name="Thin", small_cost=1.0, medium_cost=1.0, large_cost=1.0))


def test_store_usable_after_rejected_insert(storage):
    with pytest.raises(ConstraintViolation):
        storage.ingredients.insert(Cheese(name="Brie", small_cost=3.0, medium_cost=2.0, large_cost=1.0))

    crust = add_crust(storage)

    assert storage.crusts.get_by_id(crust.id) == crust


def test_update_rewrites_fields(storage):
    crust = add_crust(storage)
    crust.name = "Extra Thin"
    crust.large_cost = 5.0

    storage.ingredients.update(crust)

    assert storage.crusts.get_by_id(crust.id) == crust


def test_update_unknown_id(storage):
    ghost = Ingredient(id=42, name="Ghost", small_cost=1.0, medium_cost=1.0, large_cost=1.0)

    with pytest.raises(NotFound):
        storage.ingredients.update(ghost)


def test_update_checks_cost_order(storage):
    crust = add_crust(storage)
    crust.small_cost = 10.0

    with pytest.raises(ConstraintViolation):
        storage.ingredients.update(crust)

    assert storage.crusts.get_by_id(crust.id).small_cost == 2.0


def test_get_by_name(storage):
    crust = add_crust(storage)

    assert storage.ingredients.get_by_name("Thin").id == crust.id
    with pytest.raises(NotFound):
        storage.ingredients.get_by_name("Deep Dish")


def test_subtype_insert_requires_ingredient_row(storage):
    with pytest.raises(NotFound):
        storage.sauces.insert(Sauce(name="Pesto", small_cost=1.0, medium_cost=1.0, large_cost=1.0))


def test_subtype_shares_ingredient_id(storage):
    sauce = Sauce(name="Pesto", small_cost=1.0, medium_cost=1.5, large_cost=2.0)
    storage.ingredients.insert(sauce)
    ingredient_id = sauce.id

    storage.sauces.insert(sauce)

    assert sauce.id == ingredient_id
    assert storage.sauces.get_by_id(ingredient_id) == sauce


def test_view_only_lists_its_subtype(storage):
    thin = add_crust(storage, name="Thin")
    deep = add_crust(storage, name="Deep", costs=(3.0, 4.0, 5.0))
    topping = Topping(name="Olives", small_cost=0.5, medium_cost=0.5, large_cost=0.5)
    storage.ingredients.insert(topping)
    storage.toppings.insert(topping)

    assert storage.crusts.get_all() == [thin, deep]
    assert storage.toppings.get_all() == [topping]
    assert storage.cheeses.get_all() == []


def test_crust_get_by_id_not_found(storage):
    topping = Topping(name="Olives", small_cost=0.5, medium_cost=0.5, large_cost=0.5)
    storage.ingredients.insert(topping)
    storage.toppings.insert(topping)

    with pytest.raises(NotFound):
        storage.crusts.get_by_id(topping.id)
