"""服务层：数据加载、页面组装与输出"""

from .data_loader import NewsDataSource
from .index_builder import build_index_html, list_archive_keys
from .page_assembler import PageAssembler, RenderedPage, date_key, format_display_date
from .page_writer import PageWriter
from .template_loader import MissingTemplateError, load_template, substitute_placeholders

__all__ = [
    "NewsDataSource",
    "build_index_html",
    "list_archive_keys",
    "PageAssembler",
    "RenderedPage",
    "date_key",
    "format_display_date",
    "PageWriter",
    "MissingTemplateError",
    "load_template",
    "substitute_placeholders",
]
