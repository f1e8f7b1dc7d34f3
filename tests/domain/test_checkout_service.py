"""Unit tests for the Checkout domain service.

Covers the totals, the validation order, and the guarantee that a
rejected checkout mutates nothing.
"""

import logging
from datetime import timedelta
from decimal import Decimal

import pytest

from pos.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientFundsError,
    InsufficientStockError,
    ProductExpiredError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money, Weight
from pos.domain.service.checkout_service import SHIPPING_RATE_PER_KG, CheckoutService
from pos.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import FixedClock, biscuits, cheese, make_product, scratch_card, tv


def _setup(products=None, balance: str = "1000"):
    if products is None:
        products = [cheese(), biscuits(), tv(), scratch_card()]
    repo = InMemoryProductRepository(products)
    clock = FixedClock()
    service = CheckoutService(repo, clock)
    customer = Customer("Ibrahim", Money.of(balance))
    return service, repo, clock, customer


def _cart(repo, *items: tuple[str, int]) -> Cart:
    cart = Cart()
    for name, qty in items:
        cart.add(repo.get_by_name(name), qty)
    return cart


def _stock(repo) -> dict[str, int]:
    return {p.name: p.quantity for p in repo.list_all()}


class TestCheckoutReferenceScenario:

    def test_totals(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))

        receipt = service.checkout(customer, cart)

        assert receipt.subtotal == Money.of("300")
        assert receipt.shipping == Money.of("9")
        assert receipt.total == Money.of("309")
        assert receipt.balance == Money.of("691")
        assert str(receipt.balance) == "691.00"

    def test_shipment_notice(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))

        notice = service.checkout(customer, cart).shipment

        assert [line.description for line in notice.lines] == [
            "1x Cheese    200g",
            "1x Biscuits    700g",
        ]
        assert notice.total_weight == Weight.of("0.9")

    def test_settlement(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))

        service.checkout(customer, cart)

        assert _stock(repo) == {"Cheese": 9, "Biscuits": 4, "TV": 3, "Scratch Card": 99}
        assert customer.balance == Money.of("691")
        assert cart.is_empty()

    def test_receipt_lines_follow_cart_order(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Scratch Card", 2), ("Cheese", 3))

        receipt = service.checkout(customer, cart)

        assert [
            (line.quantity, line.product_name, line.line_total) for line in receipt.lines
        ] == [
            (2, "Scratch Card", Money.of("100")),
            (3, "Cheese", Money.of("300")),
        ]


class TestCheckoutTotals:

    def test_no_shippable_items_means_no_notice_and_no_shipping(self):
        service, repo, _, customer = _setup()
        receipt = service.checkout(customer, _cart(repo, ("Scratch Card", 3)))
        assert receipt.shipment is None
        assert receipt.shipping == Money.of("0")
        assert receipt.total == Money.of("150")

    def test_shipping_scales_with_quantity(self):
        service, repo, _, customer = _setup()
        receipt = service.checkout(customer, _cart(repo, ("Cheese", 3)))
        # 3 × 0.2 kg × 10 per kg
        assert receipt.shipping == Money.of("6")
        assert receipt.shipment.lines[0].description == "3x Cheese    600g"

    def test_balance_after_is_balance_minus_subtotal_and_shipping(self):
        service, repo, _, customer = _setup(balance="20000")
        receipt = service.checkout(
            customer, _cart(repo, ("TV", 2), ("Biscuits", 2), ("Scratch Card", 5))
        )
        subtotal = Money.of("10000") + Money.of("300") + Money.of("250")
        shipping = Money.of("10") * Decimal("21.4")
        assert receipt.subtotal == subtotal
        assert receipt.shipping == shipping
        assert customer.balance == Money.of("20000") - subtotal - shipping

    def test_custom_shipping_rate(self):
        repo = InMemoryProductRepository([cheese()])
        service = CheckoutService(repo, FixedClock(), shipping_rate=Money.of("25"))
        customer = Customer("Ibrahim", Money.of("1000"))
        receipt = service.checkout(customer, _cart(repo, ("Cheese", 2)))
        assert receipt.shipping == Money.of("10")

    def test_default_shipping_rate_is_ten_per_kg(self):
        assert SHIPPING_RATE_PER_KG == Money.of("10")

    def test_exact_balance_is_enough(self):
        service, repo, _, customer = _setup(balance="309")
        cart = _cart(repo, ("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))
        receipt = service.checkout(customer, cart)
        assert receipt.balance == Money.of("0")


class TestCheckoutRejections:

    def test_empty_cart(self):
        service, _, _, customer = _setup()
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            service.checkout(customer, Cart())

    def test_second_checkout_of_same_cart_is_empty(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Cheese", 1))
        service.checkout(customer, cart)
        with pytest.raises(EmptyCartError):
            service.checkout(customer, cart)

    def test_expired_product_mutates_nothing(self):
        service, repo, clock, customer = _setup()
        cart = _cart(repo, ("Scratch Card", 1), ("Cheese", 1))
        clock.advance(timedelta(days=2))

        with pytest.raises(ProductExpiredError, match="Cheese is expired") as info:
            service.checkout(customer, cart)

        assert info.value.product_name == "Cheese"
        assert _stock(repo) == {"Cheese": 10, "Biscuits": 5, "TV": 3, "Scratch Card": 100}
        assert customer.balance == Money.of("1000")
        assert len(cart) == 2

    def test_stock_is_revalidated_at_checkout(self):
        service, repo, _, customer = _setup()
        cart = _cart(repo, ("Biscuits", 4))
        repo.get_by_name("Biscuits").reduce_quantity(3)  # sold elsewhere

        with pytest.raises(InsufficientStockError, match="Biscuits") as info:
            service.checkout(customer, cart)

        assert (info.value.requested, info.value.available) == (4, 2)
        assert customer.balance == Money.of("1000")
        assert len(cart) == 1

    def test_insufficient_funds_mutates_nothing(self):
        service, repo, _, customer = _setup(balance="308.99")
        cart = _cart(repo, ("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))

        with pytest.raises(InsufficientFundsError) as info:
            service.checkout(customer, cart)

        assert info.value.total == Decimal("309")
        assert info.value.balance == Decimal("308.99")
        assert _stock(repo) == {"Cheese": 10, "Biscuits": 5, "TV": 3, "Scratch Card": 100}
        assert customer.balance == Money.of("308.99")
        assert len(cart) == 3

    def test_line_failure_reported_before_funds(self):
        service, repo, clock, customer = _setup(balance="1")
        cart = _cart(repo, ("TV", 1), ("Cheese", 1))
        clock.advance(timedelta(days=2))
        with pytest.raises(ProductExpiredError):
            service.checkout(customer, cart)

    def test_first_failing_line_wins(self):
        service, repo, clock, customer = _setup()
        cart = _cart(repo, ("Biscuits", 5), ("Cheese", 1))
        repo.get_by_name("Biscuits").reduce_quantity(1)
        clock.advance(timedelta(days=2))
        # Biscuits comes first and is also expired
        with pytest.raises(ProductExpiredError, match="Biscuits"):
            service.checkout(customer, cart)

    def test_product_removed_from_catalog(self):
        widget = make_product(id="9", name="Widget")
        service, _, _, customer = _setup(products=[cheese()])
        cart = Cart()
        cart.add(widget, 1)
        with pytest.raises(EntityNotFoundError, match="no longer in the catalog"):
            service.checkout(customer, cart)

    def test_retry_after_removing_offending_line(self):
        service, repo, clock, customer = _setup()
        cart = _cart(repo, ("Cheese", 1), ("Scratch Card", 1))
        clock.advance(timedelta(days=2))
        with pytest.raises(ProductExpiredError):
            service.checkout(customer, cart)

        cart.remove("1")
        receipt = service.checkout(customer, cart)
        assert receipt.total == Money.of("50")


class TestCheckoutLogging:

    def test_settlement_logged(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("pos"), "propagate", True)
        service, repo, _, customer = _setup()
        with caplog.at_level(logging.INFO, logger="pos"):
            service.checkout(customer, _cart(repo, ("Cheese", 1)))
        assert "Checkout settled for Ibrahim" in caplog.text

    def test_rejection_logged(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("pos"), "propagate", True)
        service, _, _, customer = _setup()
        with caplog.at_level(logging.WARNING, logger="pos"):
            with pytest.raises(EmptyCartError):
                service.checkout(customer, Cart())
        assert "Checkout rejected for Ibrahim" in caplog.text
