"""示例数据脚本测试"""
import importlib.util
from pathlib import Path

import pytest

from news_daily.digest import build_sample_document
from news_daily.services import NewsDataSource

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "create_sample_data.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("create_sample_data", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_written_sample_loads_back(tmp_path, script):
    path = script.write_sample_data(tmp_path, "2025-12-19")

    assert path == tmp_path / "2025-12-19.json"
    assert NewsDataSource(tmp_path).load("2025-12-19") == build_sample_document("2025-12-19")


def test_existing_file_kept_without_force(tmp_path, script):
    target = tmp_path / "2025-12-19.json"
    target.write_text("{}", encoding="utf-8")

    assert script.write_sample_data(tmp_path, "2025-12-19") is None
    assert target.read_text(encoding="utf-8") == "{}"

    assert script.write_sample_data(tmp_path, "2025-12-19", force=True) == target
    assert "Karpathy" in target.read_text(encoding="utf-8")
