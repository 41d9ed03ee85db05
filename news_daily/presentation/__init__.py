"""展示层：首页 HTML 模板"""

from .templates import INDEX_TEMPLATE

__all__ = ["INDEX_TEMPLATE"]
