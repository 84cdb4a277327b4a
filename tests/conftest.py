"""Shared test fixtures for the helloharness test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from helloharness.config import Config
from helloharness.models import MyRequest


@pytest.fixture
def write_request(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes request text to a file under tmp_path and returns its path."""

    def factory(content: str | bytes, name: str = "request.json") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return factory


@pytest.fixture
def world_request_file(write_request: Callable[..., Path]) -> Path:
    """Request file containing the canonical {"input": "World"} document."""
    return write_request('{"input": "World"}')


@pytest.fixture
def world_request() -> MyRequest:
    return MyRequest(input="World")


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    """Write a sample config YAML file and return its path."""
    content = """
request:
  path: ./fixtures/request.json
logging:
  level: debug
"""
    yaml_file = tmp_path / "harness.yaml"
    yaml_file.write_text(content)
    return yaml_file


@pytest.fixture
def default_config() -> Config:
    return Config()
