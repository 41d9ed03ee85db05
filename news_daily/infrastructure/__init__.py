"""基础设施层：日志等底层组件"""

from .logging import setup_logging

__all__ = ["setup_logging"]
