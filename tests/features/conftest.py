"""Pytest-bdd configuration and shared fixtures for argument guard features."""

from unittest.mock import MagicMock

import grpc
import pytest


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {"error": None}


@pytest.fixture
def servicer_context():
    """Mock gRPC servicer context whose abort raises like the real one."""
    ctx = MagicMock(spec=grpc.ServicerContext)
    ctx.abort.side_effect = grpc.RpcError()
    return ctx
