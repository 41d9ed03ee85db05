"""站点配置测试"""
import json
from pathlib import Path

import pytest

import news_daily
from news_daily.config_loader import ENV_PREFIX, SiteConfig, load_site_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("BASE_URL", "TEMPLATE_PATH", "DATA_DIR", "OUTPUT_DIR", "DISPLAY_TIME", "LOCALE", "LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(ENV_PREFIX + key, raising=False)


def write_config(tmp_path, data) -> Path:
    path = tmp_path / "site.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadSiteConfig:
    def test_defaults_when_file_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_site_config(tmp_path / "missing.json")

        assert config == SiteConfig()
        assert config.display_time == "17:25"
        assert config.locale == "zh-CN"

    def test_default_dirs_follow_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = SiteConfig()

        assert config.data_dir == Path.cwd() / "data"
        assert config.output_dir == Path.cwd() / "out"
        assert config.log_dir == Path.cwd() / "logs"

    def test_default_template_is_bundled_with_package(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        template_path = SiteConfig().template_path

        assert template_path.is_file()
        assert template_path.resolve().parent.parent == Path(news_daily.__file__).resolve().parent
        assert "{INSIGHTS_HTML}" in template_path.read_text(encoding="utf-8")

    def test_file_values(self, tmp_path):
        path = write_config(
            tmp_path,
            {"base_url": "https://news.example.com", "output_dir": str(tmp_path / "site"), "locale": "en-US"},
        )
        config = load_site_config(path)

        assert config.base_url == "https://news.example.com"
        assert config.output_dir == tmp_path / "site"
        assert config.locale == "en-US"

    def test_relative_paths_resolve_against_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_site_config(write_config(tmp_path, {"data_dir": "archive/data"}))
        assert config.data_dir == Path.cwd() / "archive" / "data"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, {"display_time": "08:00"})
        monkeypatch.setenv(ENV_PREFIX + "DISPLAY_TIME", "09:30")

        assert load_site_config(path).display_time == "09:30"

    def test_invalid_values_ignored(self, tmp_path):
        path = write_config(tmp_path, {"locale": "fr-FR", "display_time": 17, "unknown": True})
        config = load_site_config(path)

        assert config.locale == "zh-CN"
        assert config.display_time == "17:25"

    def test_broken_json_uses_defaults(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text("{broken", encoding="utf-8")

        assert load_site_config(path) == SiteConfig()

    def test_log_dir_can_be_disabled(self, tmp_path):
        assert load_site_config(write_config(tmp_path, {"log_dir": None})).log_dir is None


def test_page_url():
    assert SiteConfig(base_url="https://e.com/").page_url("2025-12-19.html") == "https://e.com/2025-12-19.html"
