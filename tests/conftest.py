"""
Pytest 配置文件

提供测试fixtures和配置。
"""

import io

import pytest
from loguru import logger
from rich.console import Console

from suitey_fixtures.config import ENV_LOG_LEVEL, ENV_OVERFLOW_POLICY, reset_config
from suitey_fixtures.printer import Printer


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """每个测试使用默认配置, 不受环境变量影响"""
    monkeypatch.delenv(ENV_OVERFLOW_POLICY, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    reset_config()
    yield
    reset_config()
    # the cli may have attached a sink bound to a captured stream
    logger.remove()


@pytest.fixture
def captured_printer():
    """Printer writing to an in-memory buffer, returns (printer, buffer)"""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return Printer(console=console), buffer
