"""配置模块单元测试 -- 环境变量映射、默认值"""

from tasklist.core.config import get_db_path, get_default_task_form


class TestConfig:
    def test_db_path_default(self, monkeypatch):
        monkeypatch.delenv("TASKLIST_DB_PATH", raising=False)
        monkeypatch.delenv("TASKLIST_DATA_DIR", raising=False)
        assert get_db_path() == "data/sqlite/tasklist.db"

    def test_db_path_follows_data_dir(self, monkeypatch):
        monkeypatch.delenv("TASKLIST_DB_PATH", raising=False)
        monkeypatch.setenv("TASKLIST_DATA_DIR", "/var/lib/tasklist")
        assert get_db_path() == "/var/lib/tasklist/sqlite/tasklist.db"

    def test_db_path_override(self, monkeypatch):
        monkeypatch.setenv("TASKLIST_DB_PATH", "/tmp/x.db")
        assert get_db_path() == "/tmp/x.db"

    def test_default_task_form(self, monkeypatch):
        monkeypatch.delenv("TASKLIST_DEFAULT_TASK_FORM", raising=False)
        assert get_default_task_form() == "templates/default-task-form.html"

    def test_default_task_form_override(self, monkeypatch):
        monkeypatch.setenv("TASKLIST_DEFAULT_TASK_FORM", "/etc/tasklist/form.html")
        assert get_default_task_form() == "/etc/tasklist/form.html"
