import json
import os
from dataclasses import dataclass, field, replace
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

SUPPORTED_LOCALES = ("zh-CN", "en-US")

ENV_PREFIX = "NEWS_DAILY_"


def _working_dir() -> Path:
    # 数据、输出、日志目录都相对于运行命令时的当前目录
    return Path.cwd()


def _bundled_template() -> Path:
    return Path(str(resources.files("news_daily").joinpath("templates").joinpath("page.html")))


@dataclass(frozen=True)
class SiteConfig:
    """
    日报站点配置。

    生成流程只读取传入的配置对象，不依赖任何模块级可变状态。
    """

    base_url: str = "https://ai-news-daily.vercel.app"
    template_path: Path = field(default_factory=_bundled_template)
    data_dir: Path = field(default_factory=lambda: _working_dir() / "data")
    output_dir: Path = field(default_factory=lambda: _working_dir() / "out")
    display_time: str = "17:25"
    locale: str = "zh-CN"
    log_dir: Optional[Path] = field(default_factory=lambda: _working_dir() / "logs")
    log_level: str = "INFO"

    def page_url(self, filename: str) -> str:
        return f"{self.base_url.rstrip('/')}/{filename}"


def _site_config_path() -> Path:
    return _working_dir() / "config" / "site.json"


_PATH_KEYS = ("template_path", "data_dir", "output_dir", "log_dir")
_STR_KEYS = ("base_url", "display_time", "locale", "log_level")


def _coerce(raw: Dict[str, Any], source: str) -> Dict[str, Any]:
    """把原始配置项转换成 SiteConfig 字段，非法值跳过"""
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in _PATH_KEYS:
            if value is None and key == "log_dir":
                values[key] = None
            elif isinstance(value, str) and value.strip():
                path = Path(value.strip()).expanduser()
                values[key] = path if path.is_absolute() else _working_dir() / path
            else:
                logger.warning(f"Ignoring invalid {source} value for {key}: {value!r}")
        elif key in _STR_KEYS:
            if isinstance(value, str) and value.strip():
                values[key] = value.strip()
            else:
                logger.warning(f"Ignoring invalid {source} value for {key}: {value!r}")
        else:
            logger.warning(f"Unknown {source} key {key!r}, ignored.")

    locale = values.get("locale")
    if locale is not None and locale not in SUPPORTED_LOCALES:
        logger.warning(f"Unsupported locale {locale!r}, expected one of {SUPPORTED_LOCALES}.")
        values.pop("locale")
    return values


def _load_file_values(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug(f"Site config not found at {path}, using defaults.")
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as exc:  # noqa: BLE001
        logger.error(f"Failed to load site config {path}: {exc}, using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Site config {path} must be a JSON object, using defaults.")
        return {}
    return _coerce(data, "site config")


def _load_env_values() -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for key in _PATH_KEYS + _STR_KEYS:
        value = os.getenv(ENV_PREFIX + key.upper())
        if value is not None:
            raw[key] = value
    return _coerce(raw, "environment")


def load_site_config(path: Optional[Path] = None) -> SiteConfig:
    """
    Load site config: defaults, then config/site.json, then NEWS_DAILY_* env vars.

    config/site.json 示例：
    {
      "base_url": "https://ai-news-daily.vercel.app",
      "output_dir": "out",
      "display_time": "17:25",
      "locale": "zh-CN"
    }

    相对路径以当前目录为基准；模板默认使用包内自带的 templates/page.html。
    """
    config = SiteConfig()
    config = replace(config, **_load_file_values(path or _site_config_path()))
    config = replace(config, **_load_env_values())
    return config
