import pytest

from app import create_app
from config import Config
from observability import metrics


@pytest.fixture
def valid_config():
    return Config(
        storage_account_name="testaccount",
        storage_account_key="testkey",
        container_name="testcontainer",
        api_key="testapikey",
        base_url="https://test.com",
    )


@pytest.fixture
def app(valid_config):
    app = create_app(valid_config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def _reset_metrics():
    metrics.reset()
    yield
    metrics.reset()
