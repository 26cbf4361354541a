"""Shared pytest fixtures for kube_inventory tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with a configured cluster."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
version: "1"
plugins:
  kubernetes:
    cluster:
      cluster_name: test-cluster
      api_server_url: https://10.0.0.1:6443
      token: secret-token
    output_format: json
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("KUBE_INVENTORY_"):
            monkeypatch.delenv(key, raising=False)
