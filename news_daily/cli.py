"""命令行入口：news-daily [DATE ...]"""

import argparse
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from .config_loader import SiteConfig, load_site_config
from .infrastructure import setup_logging
from .services import (
    MissingTemplateError,
    PageAssembler,
    PageWriter,
    build_index_html,
    list_archive_keys,
)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"日期格式应为 YYYY-MM-DD: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="news-daily",
        description="生成 AI 资讯日报静态页面",
    )
    parser.add_argument(
        "dates",
        nargs="*",
        type=_parse_date,
        metavar="DATE",
        help="要生成的日期（YYYY-MM-DD），不传则生成今天的日报和首页",
    )
    parser.add_argument(
        "--index",
        dest="index",
        action="store_true",
        default=None,
        help="生成指定日期后也重新生成首页",
    )
    parser.add_argument(
        "--no-index",
        dest="index",
        action="store_false",
        help="不生成首页",
    )
    parser.add_argument("--config", type=Path, default=None, help="站点配置文件（JSON）")
    return parser


def generate_pages(config: SiteConfig, days: Sequence[date], with_index: bool) -> List[Path]:
    """逐个生成日报页面，最后按需重建首页"""
    assembler = PageAssembler(config)
    writer = PageWriter(config.output_dir)

    written: List[Path] = []
    for day in days:
        page = assembler.assemble(day)
        written.append(writer.write(page))
        logger.info(f"🌐 URL: {config.page_url(page.filename)}")

    if with_index:
        keys = list_archive_keys(config.output_dir)
        written.append(writer.write_index(build_index_html(keys, config.locale)))
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        load_dotenv()
    except Exception as e:  # noqa: BLE001
        print(f"Warning: Failed to load .env file: {e}. Continuing with environment variables...")

    args = build_parser().parse_args(argv)
    config = load_site_config(args.config)
    setup_logging(config.log_dir, config.log_level)

    days = args.dates or [date.today()]
    with_index = args.index if args.index is not None else not args.dates

    try:
        generate_pages(config, days, with_index)
    except MissingTemplateError as e:
        logger.error(f"[页面生成] 生成失败: {e}")
        return 1

    logger.info("🎉 全部页面生成完成")
    return 0
