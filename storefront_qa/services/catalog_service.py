# Overview: Pure accessors over a fetched Product snapshot.

"""
Catalog accessors.

Every function here is read-only and deterministic for a given snapshot.

LOOKUP MISSES (absent language, branch, model or index) are valid domain
states and return "", 0, -1, None or [] instead of raising.
Malformed snapshots raise InvariantViolation.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from ..errors import InvariantViolation
from ..models import BranchStock, Product, Variation


# -----------------------------------------------------------------------------
# Names & descriptions
# -----------------------------------------------------------------------------

def _main_language_text(product: Product, language: str, attr: str) -> str:
    entry = product.languages.get(language)
    return getattr(entry, attr) if entry else ""


def main_product_name(product: Product, language: str) -> str:
    """Product-level name; "" when the product has variations or no entry for `language`."""
    if product.has_model:
        return ""
    return _main_language_text(product, language, "name")


def main_product_description(product: Product, language: str) -> str:
    if product.has_model:
        return ""
    return _main_language_text(product, language, "description")


def variation_group_name(product: Product, language: str) -> str:
    """
    Pipe-joined group labels ("Color|Size") taken from the first variation.

    Raises InvariantViolation when a product declaring variations has none.
    """
    if not product.models:
        if product.has_model:
            raise InvariantViolation(f"Product {product.id} has hasModel=true but no variations")
        return ""
    entry = product.models[0].languages.get(language)
    return entry.label if entry else ""


def variation_values(product: Product, language: str) -> List[str]:
    """Pipe-joined value string per variation, in position order; "" where `language` is absent."""
    return [variation_value(product, language, index) for index in range(len(product.models))]


def variation_value(product: Product, language: str, index: int) -> str:
    if not 0 <= index < len(product.models):
        return ""
    entry = product.models[index].languages.get(language)
    return entry.name if entry else ""


def _find_model(product: Product, model_id: Optional[int]) -> Optional[Variation]:
    return next((model for model in product.models if model.id == model_id), None)


def version_name(product: Product, model_id: int, language: str) -> str:
    """Variation version name, falling back to the product-level name."""
    model = _find_model(product, model_id)
    if model and language in model.languages:
        return model.languages[language].version_name
    return _main_language_text(product, language, "name")


def version_description(product: Product, model_id: int, language: str) -> str:
    model = _find_model(product, model_id)
    if model and language in model.languages:
        return model.languages[language].description
    return _main_language_text(product, language, "description")


def check_variation_consistency(product: Product):
    """
    Every variation must have as many "|" segments in its value as the
    group label has, in every language any variation carries, and share
    the label of the first variation that has that language.
    """
    if not product.has_model:
        return
    if not product.models:
        raise InvariantViolation(f"Product {product.id} has hasModel=true but no variations")

    languages: List[str] = []
    for model in product.models:
        for code in model.languages:
            if code not in languages:
                languages.append(code)

    for language in languages:
        reference_label: Optional[str] = None
        for position, model in enumerate(product.models):
            entry = model.languages.get(language)
            if entry is None:
                continue
            if reference_label is None:
                reference_label = entry.label
            elif entry.label != reference_label:
                raise InvariantViolation(
                    f"Product {product.id} variation #{position} (model {model.id}) label "
                    f"{entry.label!r} != {reference_label!r} in language {language!r}"
                )
            expected_groups = len(entry.label.split("|"))
            segments = len(entry.name.split("|"))
            if segments != expected_groups:
                raise InvariantViolation(
                    f"Product {product.id} variation #{position} (model {model.id}) value "
                    f"{entry.name!r} has {segments} segment(s), expected {expected_groups} "
                    f"in language {language!r}"
                )


# -----------------------------------------------------------------------------
# Prices & identifiers
# -----------------------------------------------------------------------------

def variation_listing_prices(product: Product) -> List[int]:
    return [model.org_price for model in product.models]


def variation_selling_prices(product: Product) -> List[int]:
    return [model.new_price for model in product.models]


def variation_cost_prices(product: Product) -> List[int]:
    return [model.cost_price for model in product.models]


def variation_listing_price(product: Product, index: int) -> int:
    return product.models[index].org_price


def variation_selling_price(product: Product, index: int) -> int:
    return product.models[index].new_price


def variation_cost_price(product: Product, index: int) -> int:
    return product.models[index].cost_price


def listing_price(product: Product, index: int = 0) -> int:
    """Listing price of variation `index`, or of the product when it has no variations."""
    return product.models[index].org_price if product.has_model else product.org_price


def selling_price(product: Product, index: int = 0) -> int:
    return product.models[index].new_price if product.has_model else product.new_price


def variation_model_ids(product: Product) -> List[int]:
    return [model.id for model in product.models]


def variation_model_id(product: Product, index: int) -> int:
    ids = variation_model_ids(product)
    return ids[index] if 0 <= index < len(ids) else -1


def barcode_list(product: Product) -> List[str]:
    return [model.barcode for model in product.models]


def variation_status(product: Product, index: int) -> str:
    return product.models[index].status if 0 <= index < len(product.models) else ""


# -----------------------------------------------------------------------------
# Stock
# -----------------------------------------------------------------------------

def _remaining(stock: BranchStock) -> int:
    remaining = stock.remaining
    if remaining < 0:
        raise InvariantViolation(
            f"Branch {stock.branch_id} has negative remaining stock "
            f"(totalItem={stock.total_item}, soldItem={stock.sold_item})"
        )
    return remaining


def stock_by_model_and_branch(product: Product, model_id: Optional[int], branch_id: int) -> int:
    """
    Remaining stock at one branch.

    model_id=None reads product-level stock; otherwise the variation's.
    An unknown model or an unstocked branch yields 0.
    """
    if model_id is None:
        branches = product.branches
    else:
        model = _find_model(product, model_id)
        if model is None:
            return 0
        branches = model.branches
    return sum(_remaining(stock) for stock in branches if stock.branch_id == branch_id)


def stock_quantity_map(product: Product) -> Dict[Optional[int], List[int]]:
    """Model id -> remaining stock per branch; a single None key for products without variations."""
    if product.has_model:
        return {model.id: [_remaining(stock) for stock in model.branches] for model in product.models}
    return {None: [_remaining(stock) for stock in product.branches]}


def branch_stocks(product: Product, model_id: Optional[int]) -> List[int]:
    stock_map = stock_quantity_map(product)
    if model_id not in stock_map:
        raise InvariantViolation(f"Model {model_id} does not exist on product {product.id}")
    return stock_map[model_id]


def total_stock_quantity(product: Product) -> int:
    return sum(sum(stocks) for stocks in stock_quantity_map(product).values())


def is_product_in_stock(product: Product) -> bool:
    """True iff any branch, product-level or on any variation, has remaining stock."""
    if any(_remaining(stock) > 0 for stock in product.branches):
        return True
    return any(
        _remaining(stock) > 0
        for model in product.models
        for stock in model.branches
    )
