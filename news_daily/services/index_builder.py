"""首页：最新日报入口 + 历史归档列表"""

import html as html_lib
from datetime import date
from pathlib import Path
from typing import List, Sequence

from loguru import logger

from ..presentation.templates import ARCHIVE_ITEM_HTML, EMPTY_LATEST_HTML, INDEX_TEMPLATE, LATEST_HTML
from .page_assembler import format_display_date
from .template_loader import substitute_placeholders


def _parse_key(stem: str):
    try:
        return date.fromisoformat(stem)
    except ValueError:
        return None


def list_archive_keys(output_dir: Path) -> List[str]:
    """
    列出输出目录里已生成的日报（YYYY-MM-DD.html），最新的在前

    其他文件（index.html 等）忽略。
    """
    if not output_dir.is_dir():
        return []

    keys = []
    for page in output_dir.glob("*.html"):
        day = _parse_key(page.stem)
        if day is not None and page.stem == day.isoformat():
            keys.append(page.stem)
    return sorted(keys, reverse=True)


def _short_date(key: str, locale: str) -> str:
    day = date.fromisoformat(key)
    if locale == "en-US":
        # 去掉星期
        return format_display_date(day, locale).split(", ", 1)[1]
    return f"{day.year}年{day.month}月{day.day}日"


def build_index_html(keys: Sequence[str], locale: str = "zh-CN") -> str:
    """
    生成首页 HTML

    Args:
        keys: 日报日期，最新的在前
        locale: 日期展示语言
    """
    if keys:
        latest = keys[0]
        latest_html = substitute_placeholders(
            LATEST_HTML,
            {"HREF": html_lib.escape(f"/{latest}.html"), "LABEL": _short_date(latest, locale)},
        )
    else:
        latest_html = EMPTY_LATEST_HTML

    archive_html = "".join(
        substitute_placeholders(
            ARCHIVE_ITEM_HTML,
            {"HREF": html_lib.escape(f"/{key}.html"), "LABEL": _short_date(key, locale)},
        )
        for key in keys
    )
    logger.debug(f"[索引页] 共 {len(keys)} 期日报")
    return substitute_placeholders(
        INDEX_TEMPLATE,
        {"LATEST_HTML": latest_html, "ARCHIVE_HTML": archive_html, "ARCHIVE_COUNT": len(keys)},
    )
