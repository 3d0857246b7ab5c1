"""CLI 单元测试 -- python -m tasklist.core"""

import json
import sys
from pathlib import Path

import aiosqlite
import pytest
from tasklist.core.__main__ import delete_task, import_tasks, main, parse_task_records
from tasklist.core.store.task_store import SqliteTaskStore


class TestParseTaskRecords:
    def test_object_payload_and_field_list_are_encoded(self):
        tasks = parse_task_records(
            [
                {
                    "key": 1,
                    "timestamp": 1000,
                    "name": "Review",
                    "payload": {"amount": 10},
                    "form_fields": [{"key": "approved", "type": "boolean"}],
                }
            ]
        )
        assert json.loads(tasks[0].payload) == {"amount": 10}
        assert json.loads(tasks[0].form_fields) == [
            {"key": "approved", "type": "boolean"}
        ]

    def test_text_columns_pass_through(self):
        tasks = parse_task_records([{"key": 2, "timestamp": 0, "payload": '{"a": 1}'}])
        assert tasks[0].payload == '{"a": 1}'


class TestCommands:
    async def test_import_then_delete(self, tmp_path: Path, monkeypatch):
        db_path = tmp_path / "sqlite" / "cli.db"
        monkeypatch.setenv("TASKLIST_DB_PATH", str(db_path))

        source = tmp_path / "tasks.json"
        source.write_text(
            json.dumps(
                [
                    {"key": 1, "timestamp": 0, "name": "a", "payload": {"x": 1}},
                    {"key": 2, "timestamp": 0, "name": "b"},
                ]
            ),
            encoding="utf-8",
        )

        await import_tasks(source)
        await delete_task(1)

        async with aiosqlite.connect(str(db_path)) as conn:
            store = SqliteTaskStore(conn)
            assert await store.count() == 1
            assert await store.find_by_id(1) is None
            remaining = await store.find_by_id(2)
            assert remaining is not None
            assert remaining.name == "b"

    def test_missing_command_exits(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["tasklist.core"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_unknown_command_exits(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["tasklist.core", "rebuild-everything"])
        with pytest.raises(SystemExit):
            main()
