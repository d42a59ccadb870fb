"""
Dessert catalog client.

Fetches the dessert list from TheMealDB and normalizes single recipe lookups
into compact Recipe values.
"""
