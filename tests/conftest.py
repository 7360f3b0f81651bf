"""
Shared fixtures.
"""

from pathlib import Path

import pytest


CONFIG_YAML = """\
defaults:
  duration_minutes: 60
  period: today
  in_period: earliest
team:
  - name: alice
    city: New York
    work_day_start: "09:00"
  - name: bob
    city: London
    work_day_start: "09:00"
  - name: nino
    city: Tbilisi
    work_day_start: "10:00"
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path
