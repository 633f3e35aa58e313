from __future__ import annotations

from pathlib import Path

import pytest

from carshop.shared.config import AppConfig


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key="test-secret",
        database_url=f"sqlite:///{tmp_path / 'carshop.db'}",
        log_file=tmp_path / "app.log",
        log_level="DEBUG",
    )
