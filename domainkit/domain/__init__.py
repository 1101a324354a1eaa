"""
Domain layer.

The domain layer holds the building blocks business code is modelled with.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Aggregate Roots: Consistency boundaries
- Domain Events: Facts that happened inside a bounded context
"""
