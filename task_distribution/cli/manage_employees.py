#!/usr/bin/env python3
"""
CLI tool to manage employees.

The HTTP API exposes employees read-only, so this is how they get in.

Usage:
    python -m task_distribution.cli.manage_employees add --name "Ivanov Ivan" --job-title "Backend developer"
    python -m task_distribution.cli.manage_employees list
"""
import asyncio
import argparse
import sys
from typing import Optional

from task_distribution.db.connection import init_db, close_db, get_db_session
from task_distribution.db.models import Employee
from task_distribution.repositories.employee_repository import EmployeeRepository


async def add_employee(full_name: str, job_title: Optional[str] = None) -> int:
    """Create an employee and return its id"""
    await init_db()
    try:
        async for session in get_db_session():
            employee = await EmployeeRepository(session).add(
                Employee(full_name=full_name, job_title=job_title)
            )
            employee_id = employee.id

        print("[SUCCESS] Employee created")
        print(f"  ID: {employee_id}")
        print(f"  Name: {full_name}")
        if job_title:
            print(f"  Job title: {job_title}")
        return employee_id
    finally:
        await close_db()


async def list_employees() -> None:
    """Print all employees with their task counts"""
    await init_db()
    try:
        employees = []
        async for session in get_db_session():
            employees = await EmployeeRepository(session).list_all()

        if not employees:
            print("No employees found.")
            return

        print("\n" + "=" * 70)
        print("Employees:")
        print("=" * 70)
        for employee in employees:
            print(f"  - [{employee.id}] {employee.full_name}")
            if employee.job_title:
                print(f"    Job title: {employee.job_title}")
            print(f"    Tasks: {len(employee.tasks)}")
        print()
        print(f"Total employees: {len(employees)}")
        print("=" * 70)
    finally:
        await close_db()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage employees for the task distribution service"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    add_parser = subparsers.add_parser("add", help="Add a new employee")
    add_parser.add_argument("--name", required=True, help="Employee full name")
    add_parser.add_argument("--job-title", help="Employee job title")

    subparsers.add_parser("list", help="List all employees")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "add":
        asyncio.run(add_employee(args.name, args.job_title))
    elif args.command == "list":
        asyncio.run(list_employees())
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
