"""日报页面组装：数据 + 模板 -> 最终 HTML"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from loguru import logger

from ..config_loader import SiteConfig
from ..digest.categories import CATEGORIES
from ..digest.models import NewsDocument
from ..digest.sample import build_sample_document
from .data_loader import NewsDataSource
from .template_loader import load_template, substitute_placeholders

WEEKDAYS_ZH = ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日")
WEEKDAYS_EN = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

PLACEHOLDER_NAMES = (
    ("DATE", "TIME")
    + tuple(c.count_token for c in CATEGORIES)
    + tuple(c.html_token for c in CATEGORIES)
    + ("SCREENSHOTS_LINK",)
)

_TOKEN_PATTERN = re.compile(r"\{([A-Z][A-Z0-9_]*)\}")


def unrecognized_placeholders(template: str) -> List[str]:
    """模板里形如 {NAME} 但不在 PLACEHOLDER_NAMES 中的占位符，按出现顺序去重"""
    unknown: List[str] = []
    for name in _TOKEN_PATTERN.findall(template):
        if name not in PLACEHOLDER_NAMES and name not in unknown:
            unknown.append(name)
    return unknown


def date_key(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def format_display_date(day: date, locale: str = "zh-CN") -> str:
    """
    日期的长格式展示，带星期

    zh-CN: 2025年12月19日星期五
    en-US: Friday, December 19, 2025
    """
    if locale == "en-US":
        return f"{WEEKDAYS_EN[day.weekday()]}, {MONTHS_EN[day.month - 1]} {day.day}, {day.year}"
    return f"{day.year}年{day.month}月{day.day}日{WEEKDAYS_ZH[day.weekday()]}"


@dataclass(frozen=True)
class RenderedPage:
    date_key: str
    html: str
    used_sample: bool = False

    @property
    def filename(self) -> str:
        return f"{self.date_key}.html"


class PageAssembler:
    """
    生成某一天的日报页面。

    只负责计算：读取数据和模板，返回 HTML 与文件名，写文件交给 PageWriter。
    """

    def __init__(self, config: SiteConfig, data_source: Optional[NewsDataSource] = None):
        self.config = config
        self.data_source = data_source or NewsDataSource(config.data_dir)

    def screenshots_link(self, key: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/screenshots/{key}/"

    def placeholder_values(self, day: date, document: NewsDocument) -> Dict[str, str]:
        key = date_key(day)
        values: Dict[str, str] = {
            "DATE": format_display_date(day, self.config.locale),
            "TIME": self.config.display_time,
        }
        for category in CATEGORIES:
            items = category.items(document)
            values[category.count_token] = str(len(items))
            values[category.html_token] = category.renderer.render(items)
        values["SCREENSHOTS_LINK"] = self.screenshots_link(key)
        return values

    def assemble_document(self, day: date, document: NewsDocument, template: str) -> str:
        """用给定的数据和模板生成页面 HTML，不做任何 I/O"""
        return substitute_placeholders(template, self.placeholder_values(day, document))

    def load_document(self, key: str) -> Optional[NewsDocument]:
        return self.data_source.load(key)

    def assemble(self, day: date) -> RenderedPage:
        """
        生成指定日期的页面

        Raises:
            MissingTemplateError: 模板不可用
        """
        key = date_key(day)
        logger.info(f"[页面生成] 开始生成 {key} 的日报页面")

        template = load_template(self.config.template_path)
        unknown = unrecognized_placeholders(template)
        if unknown:
            logger.warning(f"[页面生成] 模板中有无法识别的占位符，将原样保留: {', '.join(unknown)}")

        document = self.load_document(key)
        used_sample = document is None
        if used_sample:
            logger.warning(f"[页面生成] {key} 没有可用数据，使用示例数据")
            document = build_sample_document(key)

        html = self.assemble_document(day, document, template)
        counts = ", ".join(f"{c.key}={len(c.items(document))}" for c in CATEGORIES if c.items(document))
        logger.debug(f"[页面生成] {key} 各分类条目数: {counts or '无'}")
        return RenderedPage(date_key=key, html=html, used_sample=used_sample)
