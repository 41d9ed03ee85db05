"""
生成示例日报数据文件

用法：
    python scripts/create_sample_data.py [YYYY-MM-DD] [--force]

把固定的示例日报写到数据目录下的 YYYY-MM-DD.json，方便本地预览页面样式。
文件已存在时默认跳过，加 --force 覆盖。
"""
import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from loguru import logger

from news_daily.config_loader import load_site_config
from news_daily.digest import build_sample_document
from news_daily.services import date_key


def write_sample_data(data_dir: Path, key: str, force: bool = False) -> Optional[Path]:
    """
    写入示例数据

    Returns:
        写入的文件路径；文件已存在且未指定 force 时返回 None
    """
    file_path = data_dir / f"{key}.json"
    if file_path.exists() and not force:
        logger.warning(f"文件已存在，跳过: {file_path}（使用 --force 覆盖）")
        return None

    document = build_sample_document(key)
    data_dir.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8") as f:
        json.dump(document.model_dump(by_alias=True, exclude_none=True), f, ensure_ascii=False, indent=2)
    logger.success(f"✓ 已写入示例数据: {file_path}")
    return file_path


def main():
    """主函数"""
    force = "--force" in sys.argv or "-f" in sys.argv
    positional = [arg for arg in sys.argv[1:] if not arg.startswith("-")]

    if positional:
        try:
            key = date_key(date.fromisoformat(positional[0]))
        except ValueError:
            logger.error(f"日期格式应为 YYYY-MM-DD: {positional[0]!r}")
            sys.exit(1)
    else:
        key = date_key(date.today())

    config = load_site_config()
    write_sample_data(config.data_dir, key, force=force)


if __name__ == "__main__":
    main()
