"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (store client,
settings, logging, the camelCase record base). Keep table names and
resource-specific mapping in the resource package (e.g. `cars/`).
"""
