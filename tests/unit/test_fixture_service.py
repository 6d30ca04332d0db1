# Storefront QA Unit Tests - Product Fixtures
#
# Tests for:
# - Seeded reproducibility
# - Price ordering rules (org >= new >= cost)
# - Stock placement for products with and without variations
# - Lot / IMEI exclusivity and inactive branches
# - Update helpers returning copies

import random
from datetime import datetime

import pytest

from storefront_qa.models import Product
from storefront_qa.services import catalog_service as catalog
from storefront_qa.services.fixture_service import (
    MAX_PRICE,
    ProductFixtureOptions,
    generate_product,
    relabel,
    to_payload,
    with_attributes,
    with_toggled_status,
    with_translations,
)

pytestmark = [pytest.mark.unit, pytest.mark.variations]


NOW = datetime(2024, 5, 17, 9, 30, 0)


def options(**overrides) -> ProductFixtureOptions:
    defaults = dict(branch_ids=[11, 12], branch_stock=[5, 7], language_codes=["vi", "en"])
    defaults.update(overrides)
    return ProductFixtureOptions(**defaults)


class TestGeneration:

    def test_same_seed_same_product(self):
        first = generate_product(options(has_model=True), random.Random(99), now=NOW)
        second = generate_product(options(has_model=True), random.Random(99), now=NOW)
        assert first == second

    @pytest.mark.parametrize("seed", range(10))
    def test_price_ordering(self, seed):
        """
        SCENARIO: Default options (discount and cost enabled)
        EXPECTED: 0 <= cost <= new <= org < MAX_PRICE
        """
        product = generate_product(options(), random.Random(seed), now=NOW)

        assert 0 <= product.cost_price <= product.new_price <= product.org_price < MAX_PRICE

    def test_no_discount_and_no_cost(self, rng):
        product = generate_product(options(no_discount=True, no_cost=True), rng, now=NOW)

        assert product.new_price == product.org_price
        assert product.cost_price == 0

    def test_product_level_stock(self, rng):
        product = generate_product(options(), rng, now=NOW)

        assert product.has_model is False
        assert product.models == []
        assert [(b.branch_id, b.total_item) for b in product.branches] == [(11, 5), (12, 7)]
        assert catalog.stock_by_model_and_branch(product, None, 12) == 7

    def test_variation_level_stock(self, rng):
        """
        SCENARIO: has_model=True
        EXPECTED: Product branches empty, every variation carries the branch stock
        """
        product = generate_product(options(has_model=True), rng, now=NOW)

        assert product.branches == []
        assert product.models
        for model in product.models:
            assert [b.total_item for b in model.branches] == [5, 7]
            assert model.cost_price == model.new_price
            assert model.new_price <= model.org_price
        assert catalog.total_stock_quantity(product) == 12 * len(product.models)

    def test_variation_cost_zero_with_no_cost(self, rng):
        product = generate_product(options(has_model=True, no_cost=True), rng, now=NOW)
        assert set(catalog.variation_cost_prices(product)) == {0}

    def test_model_ids_are_unique(self):
        for seed in range(20):
            product = generate_product(options(has_model=True), random.Random(seed), now=NOW)
            model_ids = catalog.variation_model_ids(product)
            assert len(model_ids) == len(set(model_ids))

    def test_generated_variations_are_consistent(self, rng):
        product = generate_product(options(has_model=True), rng, now=NOW)

        catalog.check_variation_consistency(product)
        assert catalog.variation_group_name(product, "en").startswith("en_var1")
        assert all(value.startswith("en_") for value in catalog.variation_values(product, "en"))

    def test_names_per_language(self, rng):
        product = generate_product(options(manage_by_imei=True), rng, now=NOW)

        assert catalog.main_product_name(product, "vi") == "[vi] Auto - IMEI - without variation - 2024-05-17T09:30:00"
        assert catalog.main_product_name(product, "en").startswith("[en] Auto - IMEI")
        assert product.name == catalog.main_product_name(product, "vi")

    def test_imei_excludes_lot(self, rng):
        product = generate_product(options(manage_by_imei=True, has_lot=True), rng, now=NOW)

        assert product.managed_by_imei is True
        assert product.lot_available is False
        assert [b.total_item for b in product.branches] == [5, 7]

    def test_lot_managed_product_has_no_branch_stock(self, rng):
        product = generate_product(options(has_lot=True), rng, now=NOW)

        assert product.lot_available is True
        assert [b.total_item for b in product.branches] == [0, 0]

    def test_inactive_branch_gets_no_stock(self, rng):
        product = generate_product(options(active_branch_ids=[11]), rng, now=NOW)
        assert [b.total_item for b in product.branches] == [5, 0]

    def test_optional_sections(self, rng):
        product = generate_product(
            options(has_seo=True, has_dimension=True, vat_ids=[3], vat_names=["VAT 10%"]),
            rng,
            now=NOW,
        )

        assert product.seo_title == "SEO Title"
        assert product.languages["en"].seo_url
        assert product.tax_id == 3
        assert product.tax_name == "VAT 10%"


class TestRelabel:

    @pytest.mark.parametrize("text,expected", [
        ("vi_var1_1|vi_var2_3", "en_var1_1|en_var2_3"),
        ("vi_var1", "en_var1"),
        ("Red|vi_var2_1", "Red|en_var2_1"),
        ("", ""),
    ])
    def test_relabel(self, text, expected):
        assert relabel(text, "vi", "en") == expected


class TestUpdateHelpers:
    """Helpers return new snapshots and leave their input untouched."""

    def test_with_translations(self, rng):
        product = generate_product(options(has_model=True, language_codes=["vi"]), rng, now=NOW)
        before = product.to_dict()

        updated = with_translations(product, "en", stamp="STAMP")

        assert product.to_dict() == before
        assert updated.languages["en"].name == f"[en] {product.name} - STAMP"
        for model in updated.models:
            assert model.languages["en"].name == relabel(model.languages["vi"].name, "vi", "en")
            assert model.languages["en"].version_name == "[en] version name - STAMP"
        catalog.check_variation_consistency(updated)

    def test_toggle_product_status(self, rng):
        product = generate_product(options(), rng, now=NOW)

        toggled = with_toggled_status(product)

        assert product.status == "ACTIVE"
        assert toggled.status == "INACTIVE"
        assert with_toggled_status(toggled).status == "ACTIVE"

    def test_toggle_selected_variations(self, rng):
        product = generate_product(options(has_model=True), rng, now=NOW)
        target = product.models[0].id

        toggled = with_toggled_status(product, [target])

        assert toggled.models[0].status == "INACTIVE"
        assert all(model.status == "ACTIVE" for model in toggled.models[1:])
        assert all(model.status == "ACTIVE" for model in product.models)

    def test_with_attributes(self, rng):
        product = generate_product(options(has_model=True), rng, now=NOW)

        updated = with_attributes(product, rng, count=3)

        assert len(updated.item_attributes) == 3
        assert all(len(model.model_attributes) == 3 for model in updated.models)
        assert updated.item_attributes[0].attribute_name == "Attribute Name1"
        assert product.item_attributes == []

    def test_payload_reads_back(self, rng):
        product = generate_product(options(has_model=True, has_seo=True), rng, now=NOW)

        payload = to_payload(product)

        assert payload["hasModel"] is True
        assert payload["bhStatus"] == "ACTIVE"
        assert Product.from_dict(payload) == product
