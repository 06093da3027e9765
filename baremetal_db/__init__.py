"""baremetal-db.

Async data access layer for a bare-metal infrastructure management backend.

High-level architecture
-----------------------

Every table of the relational schema gets three pieces:

- **Entity**: a SQLModel table model with the standard audit columns
  (``id``, ``created``, ``updated``, ``created_by`` and, for soft-deletable
  tables, ``deleted``).
- **Schemas**: Pydantic input models describing what a caller may create,
  update, clear to NULL, or filter on.
- **Repository**: an async DAO built on ``AsyncSession`` that turns those
  inputs into SQL, re-fetching rows after every mutation.

Core subpackages
----------------

- ``baremetal_db.core.database``:

  - ``entities`` / ``schemas`` / ``repositories`` per table.
  - ``paginator`` for offset/limit paging with a total count and a
    validated ordering.
  - ``search`` for the combined full-text and ILIKE search predicate.
  - ``transaction`` for explicit transactions and Postgres advisory locks.

- ``baremetal_db.core.config`` / ``baremetal_db.core.logging_config``:
  settings and logging shared by everything above.

Typical workflow
----------------

1. Build an engine with ``create_engine`` and a session factory with
   ``create_sessionmaker``.
2. Build a ``SqlRepoBundle`` for a session.
3. Call the repository for the table you need, e.g.
   ``await repos.vpcs.get_all(VpcFilterInput(site_ids=[site_id]), PageInput(limit=50))``.
"""
