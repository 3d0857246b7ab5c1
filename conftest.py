"""全局 pytest 配置 -- 隔离 TASKLIST_* 环境变量"""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_tasklist_env(monkeypatch):
    """清除外部环境中的 TASKLIST_* 变量，避免测试读到真实数据库/模板配置"""
    for key in list(os.environ):
        if key.startswith("TASKLIST_"):
            monkeypatch.delenv(key)
