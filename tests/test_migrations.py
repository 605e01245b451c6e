"""
Check that the Alembic revision builds the same schema as the ORM models.
"""
import importlib.util
from pathlib import Path

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from task_distribution.db.models import Base

VERSIONS_DIR = Path(__file__).parent.parent / "alembic" / "versions"


def _load_revision(filename: str):
    spec = importlib.util.spec_from_file_location(filename[:-3], VERSIONS_DIR / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _run(migration_fn):
    engine = sa.create_engine("sqlite://")
    with engine.begin() as conn:
        context = MigrationContext.configure(conn)
        with Operations.context(context):
            migration_fn()
        inspector = sa.inspect(conn)
        tables = {
            name: {column["name"] for column in inspector.get_columns(name)}
            for name in inspector.get_table_names()
        }
    engine.dispose()
    return tables


def test_initial_revision_matches_models():
    revision = _load_revision("3b9e1c2d4f70_create_employees_and_tasks.py")

    tables = _run(revision.upgrade)

    for table in Base.metadata.sorted_tables:
        assert table.name in tables
        assert tables[table.name] == {column.name for column in table.columns}


def test_initial_revision_downgrade_drops_tables():
    revision = _load_revision("3b9e1c2d4f70_create_employees_and_tasks.py")

    def round_trip():
        revision.upgrade()
        revision.downgrade()

    assert _run(round_trip) == {}
