"""日报数据模型"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _null_as_default(cls, value, info: ValidationInfo):
    # 可选字段的 null 退回默认值；必填字段保留 None，交给校验报错
    if value is None:
        field = cls.model_fields[info.field_name]
        if not field.is_required():
            return field.get_default()
    return value


class NewsItem(BaseModel):
    """带标题的资讯条目，各分类共用的字段"""

    model_config = ConfigDict(extra="ignore")

    title: str
    summary: str = ""
    link: Optional[str] = None

    _optional_nulls = field_validator("*", mode="before")(classmethod(_null_as_default))


class PriorityItem(NewsItem):
    """核心洞察 / X 推文"""

    author: str = ""
    date: str = ""  # 展示用的日期文本，例如 "2025年12月19日"
    screenshot: Optional[str] = None


class NewsletterItem(NewsItem):
    source: str = ""


class PaperItem(NewsItem):
    authors: str = ""


class GenericItem(NewsItem):
    """Discord / HN / Reddit / Agent / 硅谷 / 国内 等通用条目"""

    source: Optional[str] = None
    author: Optional[str] = None


class ProjectCard(BaseModel):
    """GitHub 项目 / 工具卡片"""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    stars: Optional[Union[int, str]] = None  # 既可能是数字，也可能是 "78,000+" 这样的文本
    link: Optional[str] = None

    _optional_nulls = field_validator("*", mode="before")(classmethod(_null_as_default))


class NewsDocument(BaseModel):
    """某一天的全部日报数据，所有分类都可缺省"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date: Optional[str] = None
    insights: List[PriorityItem] = Field(default_factory=list)
    newsletters: List[NewsletterItem] = Field(default_factory=list)
    papers: List[PaperItem] = Field(default_factory=list)
    x_posts: List[PriorityItem] = Field(default_factory=list, alias="xPosts")
    discord: List[GenericItem] = Field(default_factory=list)
    github: List[ProjectCard] = Field(default_factory=list)
    hn: List[GenericItem] = Field(default_factory=list)
    reddit: List[GenericItem] = Field(default_factory=list)
    tools: List[ProjectCard] = Field(default_factory=list)
    agent: List[GenericItem] = Field(default_factory=list)
    valley: List[GenericItem] = Field(default_factory=list)
    china: List[GenericItem] = Field(default_factory=list)

    @field_validator(
        "insights", "newsletters", "papers", "x_posts", "discord", "github",
        "hn", "reddit", "tools", "agent", "valley", "china",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        # JSON 里的 null 视同缺省
        return [] if value is None else value
