"""Stockroom bounded context: industrial parts, categories and stock levels.

Products carry their own on-hand stock; categories group products by name and
embed their subcategories.
"""

from protean.domain import Domain

# Domain Composition Root
stockroom = Domain(name="stockroom")
