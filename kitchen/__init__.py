"""Describes the kitchen domain. Centres around two repositories.

- `RecipeRepository` holds recipes, `InventoryRepository` holds what is in
  the cupboards.
- Both live in memory and are seeded once at startup.
- Nothing is ever edited in place. Records are added or deleted.

The invariants worth enforcing are few:

- Every record is validated before it is stored, and a rejected record leaves
  the repository untouched.
- Ids are sequential and never handed out twice while a higher id exists.

Everything else (filtering, searching, scaling) is a pure function of the
records, see `kitchen.queries`.
"""
