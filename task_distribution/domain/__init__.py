"""
Domain layer - Domain errors, value objects and transaction boundary.

This layer contains:
- Domain exceptions (NotFoundError, UnknownValueError)
- Value objects and enum parsing (SortDirection, parse_enum)
- Unit of Work abstraction

No dependencies on HTTP frameworks.
"""
