"""
Test configuration and fixtures for Sportmonks API SDK tests.
"""

import pytest
import httpx


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock settings for testing."""
    from sportmonks.config import Settings

    # Set mock environment variables using monkeypatch
    monkeypatch.setenv("SPORTMONKS_API_TOKEN", "test_token")
    monkeypatch.setenv("SPORTMONKS_BASE_URL", "https://api.sportmonks.com/v3")
    monkeypatch.setenv("SPORTMONKS_USER_AGENT", "test-sportmonks/0.1")

    # Create settings instance directly (will read from environment)
    return Settings()


@pytest.fixture
def recorded_requests():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_http(mock_settings, recorded_requests):
    """Build a SportmonksHTTP whose transport answers with ``handler``."""
    from sportmonks.http import SportmonksHTTP

    def factory(handler):
        def recording_handler(request):
            recorded_requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        return SportmonksHTTP(mock_settings, client)

    return factory


@pytest.fixture
def respond_with():
    """Handler factory returning a fixed status and JSON body."""

    def factory(status_code, body):
        def handler(request):
            return httpx.Response(status_code, json=body)

        return handler

    return factory


@pytest.fixture
def sample_rate_limit_data():
    return {"resets_in_seconds": 3540, "remaining": 2999, "requested_entity": "Fixture"}


@pytest.fixture
def sample_subscription_data():
    return [
        {
            "meta": {"trial_ends_at": None, "ends_at": "2024-01-01 00:00:00"},
            "plans": [{"plan": "Football Advanced", "sport": "Football", "category": "Advanced"}],
            "add_ons": [],
            "widgets": [],
        }
    ]


@pytest.fixture
def sample_fixture_data():
    """Sample fixture data for testing."""
    return {
        "id": 18535517,
        "sport_id": 1,
        "league_id": 501,
        "season_id": 19735,
        "stage_id": 77457866,
        "group_id": None,
        "aggregate_id": None,
        "round_id": 274719,
        "state_id": 5,
        "venue_id": 8909,
        "name": "Celtic vs Rangers",
        "starting_at": "2022-09-03 11:30:00",
        "result_info": "Celtic won after full-time.",
        "leg": "1/1",
        "details": None,
        "length": 90,
        "placeholder": False,
        "has_odds": True,
        "has_premium_odds": False,
        "starting_at_timestamp": 1662204600,
    }


@pytest.fixture
def sample_pagination_data():
    return {
        "count": 2,
        "per_page": 25,
        "current_page": 1,
        "next_page": None,
        "has_more": False,
    }


@pytest.fixture
def single_envelope(sample_fixture_data, sample_subscription_data, sample_rate_limit_data):
    """Single-entity envelope around the sample fixture."""
    return {
        "data": sample_fixture_data,
        "subscription": sample_subscription_data,
        "rate_limit": sample_rate_limit_data,
        "timezone": "UTC",
    }


@pytest.fixture
def list_envelope(
    sample_fixture_data,
    sample_subscription_data,
    sample_rate_limit_data,
    sample_pagination_data,
):
    """List envelope with two fixtures."""
    second = dict(sample_fixture_data, id=18535518, name="Aberdeen vs Hibernian")
    return {
        "data": [sample_fixture_data, second],
        "pagination": sample_pagination_data,
        "subscription": sample_subscription_data,
        "rate_limit": sample_rate_limit_data,
        "timezone": "UTC",
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring network access"
    )
