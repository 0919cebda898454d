"""
Domain layer - Business logic and domain models.

This layer contains:
- Value objects (Salary, EmployeeRegistration: immutable, self-validating)
- The Employee aggregate (with business rules)
- The error taxonomy shared by every layer
- The Unit of Work boundary

No dependencies on HTTP or CLI frameworks.
"""
