"""
Catalog Domain - Entities and Value Objects.

This domain handles the vendor catalog feed:
- Feed items (CatalogItemPayload)
- Brand / model / characteristic references carried by an item
"""
