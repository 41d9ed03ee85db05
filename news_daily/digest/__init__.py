"""日报领域模型与渲染"""
from .categories import CATEGORIES, Category
from .models import (
    GenericItem,
    NewsDocument,
    NewsItem,
    NewsletterItem,
    PaperItem,
    PriorityItem,
    ProjectCard,
)
from .render import (
    CardRenderer,
    CategoryRenderer,
    GenericRenderer,
    NewsletterRenderer,
    PaperRenderer,
    PriorityRenderer,
)
from .sample import build_sample_document

__all__ = [
    "CATEGORIES",
    "Category",
    "GenericItem",
    "NewsDocument",
    "NewsItem",
    "NewsletterItem",
    "PaperItem",
    "PriorityItem",
    "ProjectCard",
    "CardRenderer",
    "CategoryRenderer",
    "GenericRenderer",
    "NewsletterRenderer",
    "PaperRenderer",
    "PriorityRenderer",
    "build_sample_document",
]
