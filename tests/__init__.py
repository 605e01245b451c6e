"""
Tests for the Task Distribution Service

Tests are organized by functionality:
- test_employee_service.py: Domain service behaviour (validation, ownership, errors)
- test_employees_api.py: HTTP routes and error-to-status translation
- test_repositories.py: SQLAlchemy repositories and Unit of Work
- test_value_objects.py: Enum parsing and DTO mapping
- test_migrations.py: Alembic revision matches the ORM models
- test_config_and_cli.py: Settings and the manage_employees CLI
"""
