"""Catalog entities: products and the categories they are filed under."""
