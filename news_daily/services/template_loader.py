"""页面模板的读取与占位符替换"""

import re
from pathlib import Path
from typing import Mapping

from loguru import logger


class MissingTemplateError(FileNotFoundError):
    """模板文件不存在或无法读取，本次生成无法继续"""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        message = f"无法读取页面模板 {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def load_template(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"[页面生成] 读取模板失败 {path}: {exc}")
        raise MissingTemplateError(path, str(exc)) from exc


def substitute_placeholders(template: str, values: Mapping[str, object]) -> str:
    """
    把模板中所有 {NAME} 形式的占位符替换为对应的值

    只识别 values 中给出的名字，其余花括号（如 CSS）原样保留。
    一次扫描完成替换，替换进去的内容不会被再次解析。

    Args:
        template: 模板文本
        values: 占位符名 -> 值（会被转换为字符串）
    """
    if not values:
        return template
    names = sorted(values, key=len, reverse=True)
    pattern = re.compile(r"\{(" + "|".join(re.escape(name) for name in names) + r")\}")
    return pattern.sub(lambda m: str(values[m.group(1)]), template)
