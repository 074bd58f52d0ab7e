import pytest

from pizzeria.exceptions import ConstraintViolation, InvalidLogin, InvalidOperation, NotFound
from pizzeria.models import AddressModel, CustomerModel
from pizzeria.schemas import Address, CardType

from tests.factories import make_address, make_card, make_customer


def persist_customer(storage, email="j@x.com", password="pw"):
    address = make_address()
    card = make_card(address)
    storage.addresses.insert(address)
    storage.cards.insert(card)
    customer = make_customer(address, card, email=email, password=password)
    storage.customers.insert(customer)
    return customer


# Addresses

def test_address_round_trip(storage):
    address = make_address()

    storage.addresses.insert(address)

    assert address.id > 0
    assert storage.addresses.get_by_id(address.id) == address


def test_address_without_line2(storage):
    address = Address(line1="2 Elm St", city="Shelbyville", state="IL", zip="62565")

    storage.addresses.insert(address)

    assert storage.addresses.get_by_id(address.id).line2 is None


def test_address_not_found(storage):
    with pytest.raises(NotFound):
        storage.addresses.get_by_id(1)


@pytest.mark.parametrize("state,zip", [("ILL", "62701"), ("IL", "6270"), ("I", "627011")])
def test_address_format_checks(storage, state, zip):
    with pytest.raises(ConstraintViolation) as exc_info:
        storage.addresses.insert(make_address(state=state, zip=zip))

    assert exc_info.value.table == "address"


def test_address_unique(storage, count):
    storage.addresses.insert(make_address())

    with pytest.raises(ConstraintViolation):
        storage.addresses.insert(make_address())

    assert count(AddressModel) == 1


@pytest.mark.parametrize("second_line2", [None, ""])
def test_address_unique_without_line2(storage, count, second_line2):
    storage.addresses.insert(Address(line1="2 Elm St", city="Shelbyville", state="IL", zip="62565"))
    duplicate = Address(line1="2 Elm St", line2=second_line2, city="Shelbyville", state="IL", zip="62565")

    with pytest.raises(ConstraintViolation):
        storage.addresses.insert(duplicate)

    assert count(AddressModel) == 1
    assert duplicate.id == 0


def test_address_insert_is_idempotent(storage, count):
    address = make_address()
    storage.addresses.insert(address)
    first_id = address.id

    storage.addresses.insert(address)

    assert address.id == first_id
    assert count(AddressModel) == 1


# Cards

def test_card_resolves_address(storage):
    address = make_address()
    storage.addresses.insert(address)
    card = make_card(address, card_type=CardType.DEBIT)

    storage.cards.insert(card)

    loaded = storage.cards.get_by_id(card.id)
    assert loaded == card
    assert loaded.type is CardType.DEBIT
    assert loaded.address.city == "Springfield"


def test_card_requires_persisted_address(storage):
    card = make_card(make_address())

    with pytest.raises(ConstraintViolation) as exc_info:
        storage.cards.insert(card)

    assert exc_info.value.table == "card"
    assert card.id == 0


def test_unknown_card_type_is_rejected(storage):
    address = make_address()
    storage.addresses.insert(address)

    with pytest.raises(ConstraintViolation):
        storage.cards.insert(make_card(address, card_type=CardType.UNKNOWN))


@pytest.mark.parametrize("number", ["1234567890123456", "1234-5678-9012-345"])
def test_card_number_format(storage, number):
    address = make_address()
    storage.addresses.insert(address)

    with pytest.raises(ConstraintViolation):
        storage.cards.insert(make_card(address, number=number))


def test_card_not_found(storage):
    with pytest.raises(NotFound):
        storage.cards.get_by_id(7)


# Customers

def test_customer_round_trip(storage):
    customer = persist_customer(storage)

    assert storage.customers.get_by_id(customer.id) == customer
    assert storage.customers.get_by_email("j@x.com") == customer


def test_customer_without_card(storage):
    address = make_address()
    storage.addresses.insert(address)
    customer = make_customer(address, None)

    storage.customers.insert(customer)

    assert storage.customers.get_by_id(customer.id).active_card is None


def test_customer_lookup_not_found(storage):
    with pytest.raises(NotFound):
        storage.customers.get_by_id(3)
    with pytest.raises(NotFound):
        storage.customers.get_by_email("nobody@x.com")


def test_customer_email_unique(storage, count):
    persist_customer(storage)
    address = storage.addresses.get_by_id(1)

    with pytest.raises(ConstraintViolation) as exc_info:
        storage.customers.insert(make_customer(address, None))

    assert exc_info.value.table == "customer"
    assert count(CustomerModel) == 1


@pytest.mark.parametrize("field,value", [("email", "not-an-email"), ("phone", "555-1234")])
def test_customer_format_checks(storage, field, value):
    address = make_address()
    storage.addresses.insert(address)
    customer = make_customer(address, None)
    setattr(customer, field, value)

    with pytest.raises(ConstraintViolation):
        storage.customers.insert(customer)


def test_customer_requires_persisted_card(storage):
    address = make_address()
    storage.addresses.insert(address)
    customer = make_customer(address, make_card(address))

    with pytest.raises(ConstraintViolation):
        storage.customers.insert(customer)


def test_customer_update(storage):
    customer = persist_customer(storage)
    customer.notes = "Ring twice"
    customer.active_card = None

    storage.customers.update(customer)

    assert storage.customers.get_by_id(customer.id) == customer


def test_update_unsaved_customer(storage):
    address = make_address()
    storage.addresses.insert(address)

    with pytest.raises(InvalidOperation):
        storage.customers.update(make_customer(address, None))


def test_update_missing_customer(storage):
    address = make_address()
    storage.addresses.insert(address)
    customer = make_customer(address, None)
    customer.id = 99

    with pytest.raises(NotFound):
        storage.customers.update(customer)


# Login

def test_login_succeeds(storage):
    customer = persist_customer(storage, email="e@x.co", password="p")

    assert storage.customers.login("e@x.co", "p") == customer


def test_login_wrong_password(storage):
    persist_customer(storage, email="e@x.co", password="p")

    with pytest.raises(InvalidLogin) as exc_info:
        storage.customers.login("e@x.co", "wrong")

    assert str(exc_info.value) == "Invalid username or password."


def test_login_unknown_email(storage):
    persist_customer(storage, email="e@x.co", password="p")

    with pytest.raises(InvalidLogin) as exc_info:
        storage.customers.login("nouser@x.co", "p")

    assert str(exc_info.value) == "Invalid username or password."


def test_login_end_to_end(storage):
    address = Address(line1="1 Main St", line2="", city="Springfield", state="IL", zip="62701")
    storage.addresses.insert(address)
    card = make_card(address)
    storage.cards.insert(card)
    customer = make_customer(address, card, email="j@x.com", password="pw")
    storage.customers.insert(customer)

    logged_in = storage.customers.login("j@x.com", "pw")

    assert logged_in.address.city == "Springfield"
    assert logged_in.active_card.number == "1234-5678-9012-3456"
