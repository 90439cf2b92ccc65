"""digital-market.

Relational data model of a digital-asset marketplace.

The package declares six tables (users, categories, assets, cart items,
purchases and ratings) as SQLModel entities, the insert-validation schemas
derived from them, and two read-only composite views used for presentation.

Core subpackages
----------------

- ``digital_market.core.database.entities``: one SQLModel table per module.
- ``digital_market.core.database.schemas``: insert, read and composite-view
  schemas.
- ``digital_market.core.database.repositories``: async insert and lookup
  operations over an ``AsyncSession``.

Typical workflow
----------------

1. Build an engine with ``create_engine`` and materialise the tables with
   ``create_all`` (tests and local development).
2. Open a session and build a ``SqlRepoBundle`` from it.
3. Insert rows from insert-schema payloads; read them back as entities or as
   ``AssetWithDetails`` / ``CartItemWithDetails`` projections.
"""
