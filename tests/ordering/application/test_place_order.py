"""Application tests for cart commands, checkout and order history."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from marketplace.catalogue.product.details import DeleteProduct, UpdateProduct
from marketplace.catalogue.product.product import Product
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.cart.items import AddToCart, RemoveFromCart
from marketplace.ordering.cart.view import get_cart_view
from marketplace.ordering.order.history import list_orders
from marketplace.ordering.order.order import Order
from marketplace.ordering.order.placement import PlaceOrder


def _add_to_cart(owner_id, product_id, quantity):
    return current_domain.process(
        AddToCart(owner_id=owner_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


def _place_order(owner_id, total_amount=99.99, idempotency_key=None):
    return current_domain.process(
        PlaceOrder(owner_id=owner_id, total_amount=total_amount, idempotency_key=idempotency_key),
        asynchronous=False,
    )


def _cart_for(owner_id):
    return current_domain.repository_for(Cart).find_for_owner(owner_id)


class TestAddToCart:
    def test_first_add_creates_the_cart(self, buyer_id, add_product):
        product_id = add_product()
        assert _cart_for(buyer_id) is None
        _add_to_cart(buyer_id, product_id, 2)
        cart = _cart_for(buyer_id)
        assert cart.snapshot() == [{"product_id": product_id, "quantity": 2}]

    def test_one_cart_per_owner(self, buyer_id, add_product):
        first = add_product(name="Tomatoes")
        second = add_product(name="Onions")
        cart_id = _add_to_cart(buyer_id, first, 1)
        assert _add_to_cart(buyer_id, second, 1) == cart_id
        assert len(current_domain.repository_for(Cart)._dao.query.all().items) == 1

    def test_adding_again_merges_quantities(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        _add_to_cart(buyer_id, product_id, 3)
        assert _cart_for(buyer_id).snapshot() == [{"product_id": product_id, "quantity": 5}]

    def test_unknown_product(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            _add_to_cart(buyer_id, "missing", 1)

    def test_deleted_product_cannot_be_added(self, buyer_id, seller_id, add_product):
        product_id = add_product()
        current_domain.process(DeleteProduct(product_id=product_id, user_id=seller_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            _add_to_cart(buyer_id, product_id, 1)

    def test_zero_quantity_is_rejected(self, buyer_id, add_product):
        with pytest.raises(ValidationError):
            _add_to_cart(buyer_id, add_product(), 0)


class TestRemoveFromCart:
    def test_remove_line(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        current_domain.process(RemoveFromCart(owner_id=buyer_id, product_id=product_id), asynchronous=False)
        assert _cart_for(buyer_id).snapshot() == []

    def test_remove_absent_line_leaves_cart_unchanged(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        current_domain.process(RemoveFromCart(owner_id=buyer_id, product_id="other"), asynchronous=False)
        assert _cart_for(buyer_id).snapshot() == [{"product_id": product_id, "quantity": 2}]

    def test_remove_without_a_cart(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveFromCart(owner_id=buyer_id, product_id="any"), asynchronous=False)


class TestCartView:
    def test_line_totals_use_the_current_price(self, buyer_id, seller_id, add_product):
        product_id = add_product(unit_price=25.0)
        _add_to_cart(buyer_id, product_id, 2)
        assert get_cart_view(buyer_id)["items"][0]["line_total"] == 50.0

        current_domain.process(
            UpdateProduct(product_id=product_id, user_id=seller_id, unit_price=30.0),
            asynchronous=False,
        )
        view = get_cart_view(buyer_id)
        assert view["items"][0]["line_total"] == 60.0
        assert view["items"][0]["product"]["name"] == "Tomatoes"
        assert view["total"] == 60.0

    def test_deleted_product_resolves_to_nothing(self, buyer_id, seller_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        current_domain.process(DeleteProduct(product_id=product_id, user_id=seller_id), asynchronous=False)
        line = get_cart_view(buyer_id)["items"][0]
        assert line["product"] is None
        assert line["line_total"] == 0.0

    def test_no_cart(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            get_cart_view(buyer_id)


class TestPlaceOrder:
    def test_worked_example(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        _add_to_cart(buyer_id, product_id, 3)

        order_id = _place_order(buyer_id, 99.99)

        order = current_domain.repository_for(Order).get(order_id)
        assert [(str(i.product_id), i.quantity) for i in order.items] == [(product_id, 5)]
        assert order.total_amount == 99.99
        with pytest.raises(ObjectNotFoundError):
            get_cart_view(buyer_id)

    def test_empty_cart(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 1)
        current_domain.process(RemoveFromCart(owner_id=buyer_id, product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            _place_order(buyer_id)

    def test_no_cart(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            _place_order(buyer_id)

    def test_total_is_taken_as_given(self, buyer_id, add_product):
        _add_to_cart(buyer_id, add_product(unit_price=25.0), 2)
        order_id = _place_order(buyer_id, 1.0)
        assert current_domain.repository_for(Order).get(order_id).total_amount == 1.0

    def test_stock_is_not_touched(self, buyer_id, add_product):
        product_id = add_product(quantity=10)
        _add_to_cart(buyer_id, product_id, 4)
        _place_order(buyer_id)
        assert current_domain.repository_for(Product).get(product_id).quantity == 10

    def test_retry_with_same_key_returns_same_order(self, buyer_id, add_product):
        _add_to_cart(buyer_id, add_product(), 1)
        first = _place_order(buyer_id, idempotency_key="checkout-1")
        second = _place_order(buyer_id, idempotency_key="checkout-1")
        assert first == second
        assert len(current_domain.repository_for(Order).for_owner(buyer_id)) == 1

    def test_new_cart_after_checkout(self, buyer_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 1)
        _place_order(buyer_id)
        _add_to_cart(buyer_id, product_id, 2)
        assert _cart_for(buyer_id).snapshot() == [{"product_id": product_id, "quantity": 2}]


class TestListOrders:
    def test_no_orders_is_not_found(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            list_orders(buyer_id)

    def test_orders_are_scoped_to_their_owner(self, buyer_id, register_user, add_product):
        other = register_user("other@example.com")
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 1)
        _place_order(buyer_id)
        _add_to_cart(other, product_id, 3)
        _place_order(other)

        orders = list_orders(buyer_id)
        assert len(orders) == 1
        assert orders[0]["items"][0]["quantity"] == 1
        assert orders[0]["items"][0]["product"]["id"] == product_id

    def test_order_lines_survive_product_changes(self, buyer_id, seller_id, add_product):
        product_id = add_product()
        _add_to_cart(buyer_id, product_id, 2)
        _place_order(buyer_id)
        current_domain.process(DeleteProduct(product_id=product_id, user_id=seller_id), asynchronous=False)

        line = list_orders(buyer_id)[0]["items"][0]
        assert line["quantity"] == 2
        assert line["product"] is None
