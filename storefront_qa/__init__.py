"""
storefront_qa: verification and fixture logic for storefront end-to-end tests.

Packages:
- models: typed snapshots of the seller/storefront API payloads
- api: endpoint wrappers returning those snapshots
- services: pure catalog accessors, price resolution, stock reconciliation,
  pagination fan-out, fixture generation and UI-vs-API verification
"""

__version__ = "0.1.0"
