"""
Application layer - Use case orchestration.

Services in this layer coordinate domain objects and repositories
inside a Unit of Work. They hold no state of their own.
"""
