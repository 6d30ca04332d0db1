# Overview: Randomized product fixtures and immutable update helpers for creation/update payloads.

"""
Product fixture generation.

PRICING RULES:
- org  = rand(0, MAX_PRICE)
- new  = org when no_discount, else rand(0, org)
- cost = 0 when no_cost, else rand(0, new) (variations: cost = new)

STOCK RULES:
- has_model=False: stock lives on the product
- has_model=True: stock lives on each variation, product branches stay empty
- branch stock is only set for active branches and never when lot-managed
- lot management is only possible when not managed by IMEI

All randomness comes from the `rng` argument, so a seeded random.Random
reproduces the same fixture.
"""
from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from ..models import (
    INVENTORY_MANAGE_IMEI, INVENTORY_MANAGE_PRODUCT, STATUS_ACTIVE, STATUS_INACTIVE,
    BranchStock, ItemAttribute, MainLanguage, Product, ShippingInfo, Variation, VersionLanguage,
)
from ..time_utils import epoch_millis, now_stamp
from .variation_service import random_variation_schema


logger = logging.getLogger(__name__)

MAX_PRICE = 99999999999
MAX_ID = 10000
MAX_ATTRIBUTES = 10
MAX_DIMENSION = 100


@dataclass
class ProductFixtureOptions:
    """Switches for generate_product(); defaults build a plain, discounted, in-stock product."""
    has_model: bool = False
    no_cost: bool = False
    no_discount: bool = False
    manage_by_imei: bool = False
    has_seo: bool = False
    is_hide_stock: bool = False
    show_out_of_stock: bool = True
    has_dimension: bool = False
    has_lot: bool = False
    has_attribution: bool = False
    on_web: bool = True
    on_app: bool = True
    in_store: bool = True
    in_gosocial: bool = True
    branch_ids: List[int] = field(default_factory=list)
    active_branch_ids: Optional[List[int]] = None
    branch_stock: List[int] = field(default_factory=list)
    language_codes: List[str] = field(default_factory=lambda: ["vi"])
    default_language: str = "vi"
    vat_ids: List[int] = field(default_factory=list)
    vat_names: List[str] = field(default_factory=list)

    @property
    def lot_available(self) -> bool:
        return self.has_lot and not self.manage_by_imei


def _rand_below(rng: random.Random, upper: int) -> int:
    return rng.randrange(upper) if upper > 0 else 0


def _product_name(options: ProductFixtureOptions, language: str, stamp: str) -> str:
    mode = "IMEI" if options.manage_by_imei else "Normal"
    shape = "Variation" if options.has_model else "without variation"
    return f"[{language}] Auto - {mode} - {shape} - {stamp}"


def _branch_stocks(options: ProductFixtureOptions) -> List[BranchStock]:
    active = set(options.branch_ids if options.active_branch_ids is None else options.active_branch_ids)
    stocks = []
    for index, branch_id in enumerate(options.branch_ids):
        quantity = 0
        if branch_id in active and not options.lot_available and index < len(options.branch_stock):
            quantity = options.branch_stock[index]
        stocks.append(BranchStock(branch_id=branch_id, total_item=quantity, sold_item=0))
    return stocks


def _item_attributes(count: int, rng: random.Random) -> List[ItemAttribute]:
    return [
        ItemAttribute(
            attribute_name=f"Attribute Name{index}",
            attribute_value=f"Attribute Value{index}",
            is_display=rng.random() < 0.5,
        )
        for index in range(1, count + 1)
    ]


def relabel(text: str, default_language: str, language: str) -> str:
    """Rewrite the default-language prefix of every "|" segment: vi_var1_1|vi_var2_1 -> en_var1_1|en_var2_1."""
    prefix = f"{default_language}_"
    return "|".join(
        f"{language}_{segment[len(prefix):]}" if segment.startswith(prefix) else segment
        for segment in text.split("|")
    )


def _main_languages(options: ProductFixtureOptions, stamp: str, millis: int) -> Dict[str, MainLanguage]:
    languages = {}
    for language in options.language_codes:
        entry = MainLanguage(
            language=language,
            name=_product_name(options, language, stamp),
            description=f"[{language}] product description",
        )
        if options.has_seo:
            entry.seo_title = f"SEO Title{millis}"
            entry.seo_description = f"SEO Description{millis}"
            entry.seo_keywords = f"SEO Keywords{millis}"
            entry.seo_url = str(millis)
        languages[language] = entry
    return languages


def _variations(options: ProductFixtureOptions, rng: random.Random, millis: int) -> List[Variation]:
    schema = random_variation_schema(options.default_language, rng)
    values = schema.combinations
    group_name = schema.group_name
    model_ids = rng.sample(range(1, MAX_ID), len(values))

    models = []
    for index, value in enumerate(values):
        org_price = _rand_below(rng, MAX_PRICE)
        new_price = org_price if options.no_discount else _rand_below(rng, org_price)
        models.append(Variation(
            id=model_ids[index],
            name=value,
            sku=f"SKU_{value}_{millis}",
            org_price=org_price,
            new_price=new_price,
            cost_price=0 if options.no_cost else new_price,
            label=group_name,
            barcode=f"{millis}{index}",
            use_product_description=rng.random() < 0.5,
            reuse_attributes=True,
            status=STATUS_ACTIVE,
            branches=_branch_stocks(options),
            languages={
                language: VersionLanguage(
                    language=language,
                    name=relabel(value, options.default_language, language),
                    label=relabel(group_name, options.default_language, language),
                )
                for language in options.language_codes
            },
            model_attributes=_item_attributes(_rand_below(rng, MAX_ATTRIBUTES), rng),
        ))
    return models


def generate_product(
    options: ProductFixtureOptions,
    rng: random.Random,
    now: Optional[datetime] = None,
) -> Product:
    """Build a complete product snapshot ready for to_payload()."""
    now = now or datetime.now()
    stamp = now_stamp(now)
    millis = epoch_millis(now)

    org_price = _rand_below(rng, MAX_PRICE)
    new_price = org_price if options.no_discount else _rand_below(rng, org_price)
    cost_price = 0 if options.no_cost else _rand_below(rng, new_price)

    languages = _main_languages(options, stamp, millis)
    default_entry = languages.get(options.default_language)

    product = Product(
        id=_rand_below(rng, MAX_ID),
        name=default_entry.name if default_entry else _product_name(options, options.default_language, stamp),
        description=default_entry.description if default_entry else "",
        org_price=org_price,
        new_price=new_price,
        cost_price=cost_price,
        shipping_info=ShippingInfo(
            weight=_rand_below(rng, MAX_DIMENSION),
            width=_rand_below(rng, MAX_DIMENSION),
            height=_rand_below(rng, MAX_DIMENSION),
            length=_rand_below(rng, MAX_DIMENSION),
        ) if options.has_dimension else ShippingInfo(),
        models=_variations(options, rng, millis) if options.has_model else [],
        has_model=options.has_model,
        show_out_of_stock=options.show_out_of_stock,
        barcode=str(millis),
        branches=[] if options.has_model else _branch_stocks(options),
        languages=languages,
        item_attributes=_item_attributes(_rand_below(rng, MAX_ATTRIBUTES), rng) if options.has_attribution else [],
        on_app=options.on_app,
        on_web=options.on_web,
        in_store=options.in_store,
        in_gosocial=options.in_gosocial,
        is_hide_stock=options.is_hide_stock,
        inventory_manage_type=INVENTORY_MANAGE_IMEI if options.manage_by_imei else INVENTORY_MANAGE_PRODUCT,
        status=STATUS_ACTIVE,
        lot_available=options.lot_available,
        expired_quality=rng.random() < 0.5,
    )
    if options.has_seo:
        product.seo_title = "SEO Title"
        product.seo_description = "SEO Description"
        product.seo_keywords = "SEO Keywords"
        product.seo_url = "seo-url"
    if options.vat_ids:
        vat_index = rng.randrange(len(options.vat_ids))
        product.tax_id = options.vat_ids[vat_index]
        if vat_index < len(options.vat_names):
            product.tax_name = options.vat_names[vat_index]

    logger.debug("Generated product fixture %r with %s variation(s)", product.name, len(product.models))
    return product


# -----------------------------------------------------------------------------
# Update helpers (never mutate their input)
# -----------------------------------------------------------------------------

def with_translations(product: Product, language: str, stamp: Optional[str] = None) -> Product:
    """Copy of `product` with a translation added (or replaced) for `language`."""
    stamp = stamp or now_stamp()
    updated = copy.deepcopy(product)
    updated.languages[language] = MainLanguage(
        language=language,
        name=f"[{language}] {updated.name} - {stamp}",
        description=f"[{language}] product description - {stamp}",
    )
    base_language = next(iter(product.languages), language)
    for model in updated.models:
        source = model.languages.get(base_language)
        if source is None:
            continue
        model.languages[language] = VersionLanguage(
            language=language,
            name=relabel(source.name, base_language, language),
            label=relabel(source.label, base_language, language),
            description=f"[{language}] version description - {stamp}",
            version_name=f"[{language}] version name - {stamp}",
        )
    return updated


def with_toggled_status(product: Product, model_ids: Optional[Sequence[int]] = None) -> Product:
    """
    Copy of `product` with ACTIVE/INACTIVE flipped.

    With `model_ids`, only those variations are flipped; otherwise the product itself.
    """
    def flip(status: str) -> str:
        return STATUS_INACTIVE if status == STATUS_ACTIVE else STATUS_ACTIVE

    if model_ids is None:
        return replace(copy.deepcopy(product), status=flip(product.status))

    targets = set(model_ids)
    updated = copy.deepcopy(product)
    for model in updated.models:
        if model.id in targets:
            model.status = flip(model.status)
    return updated


def with_attributes(product: Product, rng: random.Random, count: Optional[int] = None) -> Product:
    """Copy of `product` with freshly generated attributes on the product and every variation."""
    updated = copy.deepcopy(product)
    size = _rand_below(rng, MAX_ATTRIBUTES) + 1 if count is None else count
    updated.item_attributes = _item_attributes(size, rng)
    for model in updated.models:
        model.model_attributes = _item_attributes(size, rng)
    return updated


def to_payload(product: Product) -> Dict[str, Any]:
    """camelCase creation/update body for the product API."""
    return product.to_dict()

