#!/usr/bin/env python3
"""
CLI tool to manage employee records.

Usage:
    python -m app.cli.manage_employees list
    python -m app.cli.manage_employees show --id <employee_id>
    python -m app.cli.manage_employees create --name "Jane Doe" --job-role Engineer --salary 5000 --registration 123456
    python -m app.cli.manage_employees raise-salary --id <employee_id> --percentage 10
    python -m app.cli.manage_employees delete --id <employee_id>

Examples:
    # Create an employee
    python -m app.cli.manage_employees create --name "Jane Doe" --job-role "Software Engineer" \\
        --salary 5000.50 --registration 123456

    # List all employees
    python -m app.cli.manage_employees list

    # Give a 10% raise
    python -m app.cli.manage_employees raise-salary --id 3f2a... --percentage 10
"""
import asyncio
import argparse
import sys
from decimal import Decimal, InvalidOperation

from app.application.employee_service import EmployeeService
from app.db.connection import init_db, close_db
from app.domain.entities import Employee
from app.domain.exceptions import DomainError, PersistenceError
from app.domain.unit_of_work import SQLAlchemyUnitOfWork
from app.config import settings

employee_service = EmployeeService()


def _print_employee(employee: Employee) -> None:
    print(f"  - {employee.name}")
    print(f"    ID: {employee.id}")
    print(f"    Job role: {employee.job_role}")
    print(f"    Salary: {employee.salary}")
    print(f"    Registration: {employee.employee_registration}")
    print(f"    Created: {employee.created_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    print(f"    Updated: {employee.updated_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    print()


async def _run(operation) -> int:
    """
    Run one service operation inside its own database + unit of work.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    database = await init_db(settings.database_url)
    try:
        async with SQLAlchemyUnitOfWork(database.session_maker) as uow:
            await operation(uow)
        return 0
    except DomainError as e:
        print(f"[ERROR] {e.message}")
        return 1
    except PersistenceError as e:
        print(f"[ERROR] Database error: {e.message}")
        return 1
    finally:
        await close_db(database)


async def list_employees(uow) -> None:
    """List all employees"""
    employees = await employee_service.list_employees(uow)

    if not employees:
        print("No employees found.")
        return

    print("\n" + "="*70)
    print("Employees:")
    print("="*70)
    print()

    for employee in employees:
        _print_employee(employee)

    print(f"Total employees: {len(employees)}")
    print("="*70)


def show_employee(employee_id: str):
    async def operation(uow) -> None:
        employee = await employee_service.get_employee(uow, employee_id)
        print()
        _print_employee(employee)
    return operation


def create_employee(name: str, job_role: str, salary: Decimal, registration: int):
    async def operation(uow) -> None:
        employee = await employee_service.create_employee(uow, {
            "name": name,
            "job_role": job_role,
            "salary": salary,
            "employee_registration": registration,
        })
        print("[SUCCESS] Employee created successfully!")
        print()
        _print_employee(employee)
    return operation


def raise_salary(employee_id: str, percentage: Decimal):
    async def operation(uow) -> None:
        employee = await employee_service.give_salary_increase(uow, employee_id, percentage)
        print(f"[SUCCESS] Salary for '{employee.name}' is now {employee.salary}")
    return operation


def delete_employee(employee_id: str):
    async def operation(uow) -> None:
        await employee_service.delete_employee(uow, employee_id)
        print(f"[SUCCESS] Employee '{employee_id}' deleted")
    return operation


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Manage employee records',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # List employees command
    subparsers.add_parser('list', help='List all employees')

    # Show employee command
    show_parser = subparsers.add_parser('show', help='Show one employee')
    show_parser.add_argument('--id', required=True, help='Employee ID')

    # Create employee command
    create_parser = subparsers.add_parser('create', help='Create a new employee')
    create_parser.add_argument('--name', required=True, help='Full name')
    create_parser.add_argument('--job-role', required=True, help='Job role')
    create_parser.add_argument('--salary', required=True, type=_decimal, help='Salary amount')
    create_parser.add_argument('--registration', required=True, type=int, help='6-digit registration number')

    # Raise salary command
    raise_parser = subparsers.add_parser('raise-salary', help='Increase salary by a percentage')
    raise_parser.add_argument('--id', required=True, help='Employee ID')
    raise_parser.add_argument('--percentage', required=True, type=_decimal, help='Increase in percent (0-100]')

    # Delete employee command
    delete_parser = subparsers.add_parser('delete', help='Delete an employee')
    delete_parser.add_argument('--id', required=True, help='Employee ID')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Execute command
    if args.command == 'list':
        operation = list_employees
    elif args.command == 'show':
        operation = show_employee(args.id)
    elif args.command == 'create':
        operation = create_employee(args.name, args.job_role, args.salary, args.registration)
    elif args.command == 'raise-salary':
        operation = raise_salary(args.id, args.percentage)
    else:
        operation = delete_employee(args.id)

    return asyncio.run(_run(operation))


if __name__ == '__main__':
    sys.exit(main())
