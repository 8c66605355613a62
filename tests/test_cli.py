"""
Tests for the command-line interface.
"""

from unittest.mock import patch

import httpx
import pytest
import typer
from typer.testing import CliRunner

from sportmonks.cli import app, parse_filters
from sportmonks.client import SportmonksClient

runner = CliRunner()


@pytest.fixture
def cli_client(mock_settings, recorded_requests):
    """Patch the CLI to use a client backed by ``handler``."""

    def factory(handler):
        def recording_handler(request):
            recorded_requests.append(request)
            return handler(request)

        transport_client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        client = SportmonksClient(mock_settings, http_client=transport_client)
        return patch("sportmonks.cli.get_client", return_value=client)

    return factory


class TestParseFilters:
    def test_parses_values(self):
        assert parse_filters(["leagues=8,82", "fixtureStates=5"]) == {
            "leagues": [8, 82],
            "fixtureStates": [5],
        }

    def test_empty_values(self):
        assert parse_filters(["leagues="]) == {"leagues": []}

    def test_none(self):
        assert parse_filters(None) == {}

    def test_rejects_missing_separator(self):
        with pytest.raises(typer.BadParameter):
            parse_filters(["leagues"])

    def test_rejects_non_integers(self):
        with pytest.raises(typer.BadParameter):
            parse_filters(["leagues=premiership"])


class TestCommands:
    def test_fixture(self, cli_client, respond_with, single_envelope, recorded_requests):
        with cli_client(respond_with(200, single_envelope)):
            result = runner.invoke(app, ["fixture", "18535517", "-i", "participants", "-i", "scores", "-f", "leagues=501"])

        assert result.exit_code == 0
        assert "Celtic vs Rangers" in result.output
        assert "2999 calls remaining" in result.output
        params = recorded_requests[0].url.params
        assert params["include"] == "participants;scores"
        assert params["leagues"] == "501"

    def test_fixture_json(self, cli_client, respond_with, single_envelope):
        with cli_client(respond_with(200, single_envelope)):
            result = runner.invoke(app, ["fixture", "18535517", "--json"])

        assert result.exit_code == 0
        assert '"id": 18535517' in result.output

    def test_fixtures_date(self, cli_client, respond_with, list_envelope, recorded_requests):
        with cli_client(respond_with(200, list_envelope)):
            result = runner.invoke(app, ["fixtures-date", "2023-01-01"])

        assert result.exit_code == 0
        assert "Aberdeen" in result.output
        assert recorded_requests[0].url.path == "/v3/football/fixtures/date/2023-01-01"

    def test_fixtures_between_for_team(self, cli_client, respond_with, list_envelope, recorded_requests):
        with cli_client(respond_with(200, list_envelope)):
            result = runner.invoke(app, ["fixtures-between", "2023-01-01", "2023-01-31", "--team", "53"])

        assert result.exit_code == 0
        assert recorded_requests[0].url.path == "/v3/football/fixtures/between/2023-01-01/2023-01-31/53"

    def test_head_to_head(self, cli_client, respond_with, list_envelope, recorded_requests):
        with cli_client(respond_with(200, list_envelope)):
            result = runner.invoke(app, ["head-to-head", "53", "62"])

        assert result.exit_code == 0
        assert recorded_requests[0].url.path == "/v3/football/fixtures/head-to-head/53/62"

    def test_rate_limited(self, cli_client, respond_with):
        body = {
            "message": "Too Many Attempts.",
            "rate_limit": {"resets_in_seconds": 60, "remaining": 0, "requested_entity": "Fixture"},
        }
        with cli_client(respond_with(429, body)):
            result = runner.invoke(app, ["fixture", "1"])

        assert result.exit_code == 1
        assert "Rate limit reached" in result.output
        assert "60s" in result.output

    def test_bad_status(self, cli_client, respond_with):
        with cli_client(respond_with(500, {"message": "Whoops"})):
            result = runner.invoke(app, ["league", "501"])

        assert result.exit_code == 1
        assert "status 500" in result.output

    def test_invalid_date(self):
        result = runner.invoke(app, ["fixtures-date", "01/01/2023"])

        assert result.exit_code != 0
