# src/taskpal/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..core.errors import TaskStoreError
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The whole list is stored as rows ordered by `position`; `save()` rewrites
    every row in one transaction, so the file always holds a complete snapshot.

    Schema handling follows a create-then-migrate pattern:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (OSError, sqlite3.Error) as e:
            raise TaskStoreError(f"cannot open task store at {self._db_path}: {e}") from e
        logger.info("TaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    position INTEGER PRIMARY KEY,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    is_done INTEGER NOT NULL DEFAULT 0,
                    due_at TEXT,
                    start_at TEXT,
                    end_at TEXT
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("is_done", "INTEGER NOT NULL DEFAULT 0")
            add_col("due_at", "TEXT")
            add_col("start_at", "TEXT")
            add_col("end_at", "TEXT")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _dt_to_str(value: datetime | None) -> str | None:
        return value.isoformat() if value is not None else None

    @staticmethod
    def _str_to_dt(raw: str | None, *, column: str) -> datetime:
        if not raw:
            raise TaskStoreError(f"missing {column} in stored task")
        try:
            return datetime.fromisoformat(raw)
        except ValueError as e:
            raise TaskStoreError(f"bad {column} in stored task: {raw!r}") from e

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        description = str(row["description"] or "")
        is_done = bool(row["is_done"])
        kind = row["kind"]

        if kind == TaskKind.TODO:
            return Todo(description, is_done=is_done)
        if kind == TaskKind.DEADLINE:
            return Deadline(
                description,
                self._str_to_dt(row["due_at"], column="due_at"),
                is_done=is_done,
            )
        if kind == TaskKind.EVENT:
            return Event(
                description,
                self._str_to_dt(row["start_at"], column="start_at"),
                self._str_to_dt(row["end_at"], column="end_at"),
                is_done=is_done,
            )
        raise TaskStoreError(f"unknown task kind in store: {kind!r}")

    @staticmethod
    def _task_to_params(position: int, task: Task) -> tuple:
        due_at = start_at = end_at = None
        if isinstance(task, Deadline):
            due_at = task.due_at
        elif isinstance(task, Event):
            start_at, end_at = task.start_at, task.end_at
        return (
            position,
            task.kind.value,
            task.description,
            1 if task.is_done else 0,
            TaskStore._dt_to_str(due_at),
            TaskStore._dt_to_str(start_at),
            TaskStore._dt_to_str(end_at),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        try:
            conn = self._get_conn()
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
                return int(n)
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise TaskStoreError(f"cannot count tasks: {e}") from e

    def load(self) -> list[Task]:
        """Return every stored task in display order (empty list for a fresh store)."""
        try:
            conn = self._get_conn()
            try:
                rows = conn.execute("SELECT * FROM tasks ORDER BY position ASC").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise TaskStoreError(f"cannot read tasks from {self._db_path}: {e}") from e

        tasks = [self._row_to_task(r) for r in rows]
        logger.info("Loaded %d task(s) from %s", len(tasks), self._db_path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the stored list with `tasks` (single transaction)."""
        params = [self._task_to_params(i, t) for i, t in enumerate(tasks, start=1)]
        try:
            conn = self._get_conn()
            try:
                with conn:
                    conn.execute("DELETE FROM tasks")
                    conn.executemany(
                        """
                        INSERT INTO tasks(position, kind, description, is_done, due_at, start_at, end_at)
                        VALUES (?, ?, ?, ?, ?, ?, ?)
                        """,
                        params,
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise TaskStoreError(f"cannot write tasks to {self._db_path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(params), self._db_path)
