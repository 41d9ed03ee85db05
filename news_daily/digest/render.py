"""
分类渲染器：把某一分类的条目列表渲染成 HTML 片段。

渲染是纯函数：不做 I/O，不修改输入，同样的输入总是得到同样的输出。
每个条目单独包裹成一个完整的块，片段就是这些块按输入顺序拼接的结果，
编号从 1 开始并且各分类独立计数。
"""

import html as html_lib
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models import GenericItem, NewsletterItem, PaperItem, PriorityItem, ProjectCard

DEFAULT_LINK_TEXT = "🔗 原文链接"


def _text(value) -> str:
    return html_lib.escape("" if value is None else str(value), quote=False)


def _attr(value) -> str:
    return html_lib.escape("" if value is None else str(value), quote=True)


def _link(href: Optional[str], text: str) -> str:
    if not href:
        return ""
    return f'<a class="link" href="{_attr(href)}" target="_blank">{_text(text)}</a>'


def _block(css_class: str, parts: List[str]) -> str:
    inner = "\n".join(f"  {part}" for part in parts if part)
    return f'<div class="{css_class}">\n{inner}\n</div>\n'


class CategoryRenderer(ABC):
    """分类渲染器基类：子类只需实现单个条目的渲染"""

    def render(self, items: Sequence) -> str:
        return "".join(self.render_item(item, idx) for idx, item in enumerate(items, start=1))

    @abstractmethod
    def render_item(self, item, idx: int) -> str:
        """渲染单个条目，idx 从 1 开始"""


class PriorityRenderer(CategoryRenderer):
    """核心洞察和 X 推文：带优先级标记，可附截图"""

    def __init__(self, link_text: str = DEFAULT_LINK_TEXT):
        self.link_text = link_text

    def render_item(self, item: PriorityItem, idx: int) -> str:
        screenshot = ""
        if item.screenshot:
            screenshot = f'<img class="screenshot" src="{_attr(item.screenshot)}" alt="{_attr(item.title)}">'
        return _block(
            "item priority",
            [
                f"<h3>{idx}. {_text(item.title)}</h3>",
                f'<div class="meta">👤 {_text(item.author)} - {_text(item.date)}</div>',
                f"<p>{_text(item.summary)}</p>",
                screenshot,
                _link(item.link, self.link_text),
            ],
        )


class NewsletterRenderer(CategoryRenderer):
    def render_item(self, item: NewsletterItem, idx: int) -> str:
        return _block(
            "item",
            [
                f"<h3>{idx}. {_text(item.title)}</h3>",
                f'<div class="meta">📰 来源: {_text(item.source)}</div>',
                f"<p>{_text(item.summary)}</p>",
                _link(item.link, DEFAULT_LINK_TEXT),
            ],
        )


class PaperRenderer(CategoryRenderer):
    def render_item(self, item: PaperItem, idx: int) -> str:
        return _block(
            "item",
            [
                f"<h3>{idx}. {_text(item.title)}</h3>",
                f'<div class="meta">👤 {_text(item.authors)}</div>',
                f"<p>{_text(item.summary)}</p>",
                _link(item.link, "📄 论文链接"),
            ],
        )


class CardRenderer(CategoryRenderer):
    """GitHub 项目和工具的卡片，每张卡片自成一个完整的 div"""

    def __init__(self, link_text: str, show_stars: bool = False):
        self.link_text = link_text
        self.show_stars = show_stars

    def render_item(self, item: ProjectCard, idx: int) -> str:
        stars = ""
        if self.show_stars and item.stars is not None and str(item.stars) != "":
            stars = f"<p>⭐ {_text(item.stars)} Stars</p>"
        return _block(
            "card",
            [
                f"<h4>{idx}. {_text(item.name)}</h4>",
                f"<p>{_text(item.description)}</p>",
                stars,
                _link(item.link, self.link_text),
            ],
        )


class GenericRenderer(CategoryRenderer):
    """
    通用条目渲染器。

    只有配置了 source_label 且条目带有 source 或 author 时才输出 meta 行，
    否则整行省略。
    """

    def __init__(self, source_label: Optional[str] = None, link_text: Optional[str] = None):
        self.source_label = source_label
        self.link_text = link_text or DEFAULT_LINK_TEXT

    def render_item(self, item: GenericItem, idx: int) -> str:
        meta = ""
        label_value = item.source or item.author
        if self.source_label and label_value:
            meta = f'<div class="meta">{_text(self.source_label)}: {_text(label_value)}</div>'
        return _block(
            "item",
            [
                f"<h3>{idx}. {_text(item.title)}</h3>",
                meta,
                f"<p>{_text(item.summary)}</p>",
                _link(item.link, self.link_text),
            ],
        )
