"""Pytest fixtures for testing"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sales_summarizer.api.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """Fresh FastAPI application per test"""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def sample_text() -> str:
    """Three rows over two days, two rows share a date"""
    return "2023-01-01\t1000\t300\n2023-01-01\t1500\t450\n2023-01-02\t800\t200"
