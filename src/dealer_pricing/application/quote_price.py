"""Application service: Quote Price use case (query)."""

from __future__ import annotations

from dealer_pricing.application.dto import PriceQuoteDTO
from dealer_pricing.domain.service.pricing_service import PricingService


class QuotePriceHandler:

    def __init__(self, pricing_service: PricingService) -> None:
        self._pricing = pricing_service

    def handle(self, dealer_account_id: str, product_code: str, quantity: int = 1) -> PriceQuoteDTO:
        result = self._pricing.calculate_price(dealer_account_id, product_code, quantity)
        return PriceQuoteDTO.from_result(result)
