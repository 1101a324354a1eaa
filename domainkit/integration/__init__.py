"""
Integration layer.

Contracts for communication with other services: integration events
and the mappers that build them from domain event notifications.
"""
