"""日报数据加载：按日期读取 data/YYYY-MM-DD.json"""

import json
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from ..digest.models import NewsDocument


class NewsDataSource:
    """从数据目录读取某天的日报数据"""

    def __init__(self, data_dir: Path):
        self.data_dir = data_dir

    def path_for(self, date_key: str) -> Path:
        return self.data_dir / f"{date_key}.json"

    def load(self, date_key: str) -> Optional[NewsDocument]:
        """
        加载指定日期的日报

        Args:
            date_key: YYYY-MM-DD

        Returns:
            NewsDocument；文件不存在、无法解析或格式不符时返回 None
        """
        file_path = self.path_for(date_key)
        if not file_path.exists():
            logger.info(f"[数据加载] 未找到数据文件 {file_path}")
            return None

        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"[数据加载] 读取数据文件失败 {file_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"[数据加载] 数据文件 {file_path} 不是 JSON 对象")
            return None

        try:
            document = NewsDocument.model_validate(data)
        except ValidationError as e:
            logger.error(f"[数据加载] 数据文件 {file_path} 格式不正确: {e.error_count()} 处错误\n{e}")
            return None

        logger.debug(f"[数据加载] 已加载 {file_path}")
        return document
