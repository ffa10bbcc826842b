"""Pytest fixtures for zexasim tests."""

import os
import sys
from datetime import date

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zexasim.application.services.planner import DecisionPlanner
from zexasim.core.settings import AppSettings
from zexasim.domain.models.decision import Decision, DecisionAction
from zexasim.domain.models.projection import ProjectionInputs


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def planner(settings):
    return DecisionPlanner(settings)


@pytest.fixture
def start_date():
    return date(2024, 4, 1)


@pytest.fixture
def make_inputs(start_date):
    """Factory for projection inputs starting 2024/04 with TYPE-D x1."""

    def _make(**overrides):
        params = {
            "start_date": start_date,
            "start_tier": "TYPE-D",
            "quantity": 1,
            "decisions": (),
        }
        params.update(overrides)
        return ProjectionInputs(**params)

    return _make


@pytest.fixture
def upgrade_d_to_v_at_4():
    return Decision(month=4, from_tier="TYPE-D", action=DecisionAction.UPGRADE, to_tier="TYPE-V")


@pytest.fixture
def resale_d_at_4():
    return Decision(month=4, from_tier="TYPE-D", action=DecisionAction.RESALE)
