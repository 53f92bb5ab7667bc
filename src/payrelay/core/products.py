from dataclasses import dataclass
from typing import Literal

ProductTier = Literal["blueprint", "complete_kit", "unknown"]

BLUEPRINT_LINK = "https://drive.google.com/drive/folders/1S8n0feXCtWhDDufW-toGcgO3n-2LDvGm"
COMPLETE_KIT_LINK = "https://drive.google.com/drive/folders/1ktVOK--idZkGvE8ko20uRbgD_Xj7-Zqq"

# Price points in paise
PRICE_BLUEPRINT_PAISE = 14900
PRICE_COMPLETE_PAISE = 24900


@dataclass(frozen=True)
class ProductLink:
    label: str
    url: str


@dataclass(frozen=True)
class Product:
    tier: ProductTier
    title: str
    links: tuple[ProductLink, ...] = ()


BLUEPRINT = Product(
    tier="blueprint",
    title="Tactical BA Blueprint",
    links=(ProductLink("Tactical BA Blueprint", BLUEPRINT_LINK),),
)

COMPLETE_KIT = Product(
    tier="complete_kit",
    title="Tactical BA Complete Package",
    links=(
        ProductLink("Tactical BA Blueprint", BLUEPRINT_LINK),
        ProductLink("Tactical BA Complete Kit", COMPLETE_KIT_LINK),
    ),
)

# Default arm: a new price point still gets a confirmation, just without links.
UNKNOWN_PRODUCT = Product(tier="unknown", title="Tactical BA Purchase")

PRODUCTS_BY_AMOUNT: dict[int, Product] = {
    PRICE_BLUEPRINT_PAISE: BLUEPRINT,
    PRICE_COMPLETE_PAISE: COMPLETE_KIT,
}


def lookup_product(amount_minor: int) -> Product:
    """Exact match on the amount in minor units. Fees or rounding land in the unknown arm."""
    return PRODUCTS_BY_AMOUNT.get(amount_minor, UNKNOWN_PRODUCT)


def format_amount(amount_minor: int) -> str:
    """
    minor units -> human readable major units.
    24900 -> "249", 14950 -> "149.5", 14905 -> "149.05"
    """
    sign = "-" if amount_minor < 0 else ""
    major, minor = divmod(abs(amount_minor), 100)
    if minor == 0:
        return f"{sign}{major}"
    return f"{sign}{major}.{minor:02d}".rstrip("0")


def known_price_labels() -> list[str]:
    return [f"₹{format_amount(amount)}" for amount in sorted(PRODUCTS_BY_AMOUNT)]
