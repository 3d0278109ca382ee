"""Tests for the Task ORM model."""

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase, Session

from task_svc.models import Base, Task


class TestBase:
    """Test cases for the declarative base."""

    def test_base_is_declarative_base(self):
        assert issubclass(Base, DeclarativeBase)

    def test_tasks_table_registered(self):
        assert "tasks" in Base.metadata.tables


class TestTaskModel:
    """Test cases for the Task model."""

    def test_table_columns(self, db_engine):
        columns = {column["name"]: column for column in inspect(db_engine).get_columns("tasks")}

        assert set(columns) == {"id", "title", "description"}
        assert columns["title"]["nullable"] is False
        assert columns["description"]["nullable"] is False

    def test_id_assigned_on_insert(self, db_session: Session):
        task = Task(title="Buy milk", description="2%")
        assert task.id is None

        db_session.add(task)
        db_session.commit()

        assert task.id == 1

    def test_description_defaults_to_empty(self, db_session: Session):
        task = Task(title="No description")
        db_session.add(task)
        db_session.commit()
        db_session.refresh(task)

        assert task.description == ""

    def test_repr(self):
        assert repr(Task(id=7, title="Call mom")) == "<Task(id=7, title='Call mom')>"
