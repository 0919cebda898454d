"""Core module containing interfaces."""

from app.core.interfaces import IEmployeeRepository

__all__ = ["IEmployeeRepository"]
