"""Application service: Add To Cart use case."""

from __future__ import annotations

from dealer_pricing.domain.exceptions import (
    ProductInactiveError,
    ProductNotAvailableError,
    ProductNotFoundError,
    ValidationError,
)
from dealer_pricing.domain.model.cart import Cart
from dealer_pricing.domain.repository.cart_repository import CartRepository
from dealer_pricing.domain.repository.catalog_repository import CatalogRepository
from dealer_pricing.domain.service.pricing_service import PricingService


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        catalog_repo: CatalogRepository,
        pricing_service: PricingService,
    ) -> None:
        self._cart_repo = cart_repo
        self._catalog_repo = catalog_repo
        self._pricing = pricing_service

    def handle(
        self,
        dealer_user_id: str,
        dealer_account_id: str,
        product_code: str,
        quantity: int,
    ) -> Cart:
        """Add a product to the user's cart, creating the cart if needed.

        A cart is billed to one dealer account for its whole life; adding
        on behalf of any other account is rejected.  Only existence,
        activity and entitlement are checked here.  Band and price gaps
        surface when the cart is priced, so a dealer can still see what
        they asked for.
        """
        cart = self._cart_repo.get_for_user(dealer_user_id)
        if cart is not None and cart.dealer_account_id != dealer_account_id:
            raise ValidationError(
                f"Cart for user '{dealer_user_id}' is billed to dealer "
                f"{cart.dealer_account_id}, not {dealer_account_id}"
            )

        product = self._catalog_repo.find_product_by_code(product_code)
        if product is None:
            raise ProductNotFoundError(product_code)
        if not product.is_active:
            raise ProductInactiveError(product_code)
        if not self._pricing.can_dealer_view_product(dealer_account_id, product.part_type):
            raise ProductNotAvailableError(product_code, product.part_type.value)

        if cart is None:
            cart = Cart(dealer_user_id=dealer_user_id, dealer_account_id=dealer_account_id)

        cart.add_item(product.code, quantity)
        self._cart_repo.save(cart)
        return cart
