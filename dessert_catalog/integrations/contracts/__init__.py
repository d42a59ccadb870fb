"""
Contracts (data models).

This folder defines the wire shapes returned by TheMealDB and the domain
values built from them:
- catalog entries (idMeal / strMeal) and DessertSummary
- flat recipe records with numbered ingredient/measurement slots and Recipe
- the failure taxonomy raised across the integration layer

Both the real HTTP transport and the local stub feed bytes that are decoded
against these contracts, so flows never deal with ad-hoc dicts.
"""
