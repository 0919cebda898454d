"""
Tests for the Employee Management Service

Tests are organized by layer:
- test_value_objects.py: Salary and EmployeeRegistration rules
- test_employee_entity.py: Employee aggregate invariants and mutations
- test_employee_repository.py: SQLAlchemy repository against SQLite
- test_employee_service.py: Use case orchestration
- test_manage_employees_cli.py: Management CLI
- api/test_employees_api.py: HTTP endpoints
"""
