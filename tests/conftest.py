"""测试公共夹具"""
import pytest

from news_daily.config_loader import SiteConfig


@pytest.fixture
def site_config(tmp_path) -> SiteConfig:
    """使用包内自带模板、临时数据目录和输出目录的配置"""
    return SiteConfig(
        base_url="https://example.com",
        data_dir=tmp_path / "data",
        output_dir=tmp_path / "out",
        log_dir=None,
    )
