"""页面输出"""

from pathlib import Path

from loguru import logger

from .page_assembler import RenderedPage

INDEX_FILENAME = "index.html"


class PageWriter:
    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def _write(self, filename: str, html: str) -> Path:
        output_path = self.output_dir / filename
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def write(self, page: RenderedPage) -> Path:
        output_path = self._write(page.filename, page.html)
        logger.success(f"[页面生成] ✓ 已生成: {output_path}")
        return output_path

    def write_index(self, html: str) -> Path:
        output_path = self._write(INDEX_FILENAME, html)
        logger.success(f"[索引页] ✓ 已生成: {output_path}")
        return output_path
