"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly.  Each class carries a stable
``reason`` string; callers switch on the exception type (or the reason),
never on the message text.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    reason = "DOMAIN_ERROR"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    reason = "VALIDATION_ERROR"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    reason = "NOT_FOUND"


# --- Pricing --------------------------------------------------------------


class PricingError(DomainException):
    """A product exists but cannot be priced for this dealer."""

    reason = "PRICING_ERROR"


class ProductNotFoundError(EntityNotFoundError):
    reason = "PRODUCT_NOT_FOUND"

    def __init__(self, product_code: str) -> None:
        super().__init__(f"Product not found: {product_code}")
        self.product_code = product_code


class ProductInactiveError(PricingError):
    reason = "PRODUCT_INACTIVE"

    def __init__(self, product_code: str) -> None:
        super().__init__(f"Product is inactive: {product_code}")
        self.product_code = product_code


class ProductNotAvailableError(PricingError):
    """The dealer's entitlement excludes the product's part type.

    The message deliberately matches what an unentitled dealer is shown;
    the part type is kept on the instance for operators only.
    """

    reason = "PRODUCT_NOT_AVAILABLE"

    def __init__(self, product_code: str, part_type: str | None = None) -> None:
        super().__init__("Product not available")
        self.product_code = product_code
        self.part_type = part_type


# --- Configuration gaps ---------------------------------------------------


class ConfigurationError(DomainException):
    """Dealer or catalog setup is incomplete (not a policy decision)."""

    reason = "CONFIGURATION_ERROR"


class NoBandAssignmentError(ConfigurationError):
    reason = "NO_BAND_ASSIGNMENT"

    def __init__(self, dealer_account_id: str, part_type: str) -> None:
        super().__init__(
            f"Dealer {dealer_account_id} has no band assignment for {part_type}"
        )
        self.dealer_account_id = dealer_account_id
        self.part_type = part_type


class NoPriceForBandError(ConfigurationError):
    reason = "NO_PRICE_FOR_BAND"

    def __init__(self, product_code: str, band_code: str) -> None:
        super().__init__(
            f"No price available for product {product_code} at band {band_code}"
        )
        self.product_code = product_code
        self.band_code = band_code


# --- Dealers --------------------------------------------------------------


class DealerNotFoundError(EntityNotFoundError):
    reason = "DEALER_NOT_FOUND"

    def __init__(self, dealer_account_id: str) -> None:
        super().__init__(f"Dealer account not found: {dealer_account_id}")
        self.dealer_account_id = dealer_account_id


class DealerInactiveError(DomainException):
    reason = "DEALER_INACTIVE"

    def __init__(self, dealer_account_id: str, status: str) -> None:
        super().__init__(f"Dealer account {dealer_account_id} is {status}")
        self.dealer_account_id = dealer_account_id
        self.status = status
