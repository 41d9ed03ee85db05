"""日报分类表：文档字段、模板占位符与渲染器的对应关系"""

from dataclasses import dataclass
from typing import Tuple

from .models import NewsDocument
from .render import (
    CardRenderer,
    CategoryRenderer,
    GenericRenderer,
    NewsletterRenderer,
    PaperRenderer,
    PriorityRenderer,
)


@dataclass(frozen=True)
class Category:
    key: str  # NewsDocument 上的属性名
    count_token: str
    html_token: str
    renderer: CategoryRenderer

    def items(self, document: NewsDocument) -> list:
        return getattr(document, self.key)


CATEGORIES: Tuple[Category, ...] = (
    Category("insights", "INSIGHT_COUNT", "INSIGHTS_HTML", PriorityRenderer()),
    Category("newsletters", "NEWSLETTER_COUNT", "NEWSLETTER_HTML", NewsletterRenderer()),
    Category("papers", "PAPER_COUNT", "PAPERS_HTML", PaperRenderer()),
    Category("x_posts", "X_COUNT", "X_POSTS_HTML", PriorityRenderer()),
    Category("discord", "DISCORD_COUNT", "DISCORD_HTML", GenericRenderer(source_label="👤 来源")),
    Category("github", "GITHUB_COUNT", "GITHUB_HTML", CardRenderer("🔗 GitHub 链接", show_stars=True)),
    Category("hn", "HN_COUNT", "HN_HTML", GenericRenderer()),
    Category(
        "reddit",
        "REDDIT_COUNT",
        "REDDIT_HTML",
        GenericRenderer(source_label="👤 Posted by", link_text="🔗 Reddit 链接"),
    ),
    Category("tools", "TOOL_COUNT", "TOOLS_HTML", CardRenderer("🔗 官网链接")),
    Category("agent", "AGENT_COUNT", "AGENT_HTML", GenericRenderer()),
    Category("valley", "VALLEY_COUNT", "VALLEY_HTML", GenericRenderer()),
    Category("china", "CHINA_COUNT", "CHINA_HTML", GenericRenderer()),
)

