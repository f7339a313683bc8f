"""Pytest configuration and shared fixtures for glasscut tests."""

from __future__ import annotations

import pytest

from glasscut.domain.value_objects import Panel, StockSize
from glasscut.infrastructure.bin_packing import PackingConfig, SheetFillingDriver


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def packing_config() -> PackingConfig:
    """Default packing configuration (1/8\" allowance)."""
    return PackingConfig()


@pytest.fixture
def driver(packing_config: PackingConfig) -> SheetFillingDriver:
    """Sheet-filling driver with default configuration."""
    return SheetFillingDriver(packing_config)


@pytest.fixture
def small_stock() -> StockSize:
    """Smallest general stock sheet, 48\"x72\"."""
    return StockSize(48, 72)


@pytest.fixture
def three_panels() -> list[Panel]:
    """Three 20\"x30\" panels from three windows."""
    return [Panel(20, 30, i, f"W{i}") for i in range(1, 4)]
