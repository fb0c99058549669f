import json

import pytest

from azinews.feed.model import SourceResult
from azinews.news.errors import FetchError
from azinews.news.model import NewsItem
from azinews.news.source.registry import DIGI24, MEDIAFAX
from azinews_exec import cli


class FakeAggregator:
    requested_sources = None

    def __init__(self, timeout_seconds=None):
        self.timeout_seconds = timeout_seconds

    async def collect(self, sources):
        FakeAggregator.requested_sources = [source.name for source in sources]
        results = []
        for source in sources:
            if source.name == "Mediafax":
                results.append(SourceResult(source=source, error=FetchError("Mediafax", "HTTP 500")))
            else:
                results.append(SourceResult(source=source, items=[
                    NewsItem(
                        title="Guvernul a aprobat bugetul",
                        description="Bugetul pe 2026",
                        link="https://www.digi24.ro/stiri/buget",
                        source=source.name,
                        image_url="https://cdn.digi24.ro/buget.jpg",
                    )
                ]))
        return results


class TestCli:

    @pytest.fixture(autouse=True)
    def fake_aggregator(self, monkeypatch):
        FakeAggregator.requested_sources = None
        monkeypatch.setattr(cli, "FeedAggregator", FakeAggregator)

    def test_no_command_prints_help_and_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])

        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out

    def test_list_sources(self, capsys):
        cli.main(["list-sources"])

        out = capsys.readouterr().out
        assert f"{DIGI24.name}: {DIGI24.endpoint}" in out
        assert f"{MEDIAFAX.name}: {MEDIAFAX.endpoint}" in out

    def test_refresh_prints_items_and_failures(self, capsys):
        cli.main(["refresh"])

        out = capsys.readouterr().out
        assert FakeAggregator.requested_sources == ["Digi24", "Mediafax"]
        assert "[Digi24] Guvernul a aprobat bugetul" in out
        assert "Mediafax - Error: Mediafax: HTTP 500" in out

    def test_refresh_json(self, capsys):
        cli.main(["refresh", "--json"])

        result = json.loads(capsys.readouterr().out)
        assert result["items"] == [{
            "title": "Guvernul a aprobat bugetul",
            "description": "Bugetul pe 2026",
            "link": "https://www.digi24.ro/stiri/buget",
            "source": "Digi24",
            "image_url": "https://cdn.digi24.ro/buget.jpg",
        }]
        assert result["successful_sources"] == [{"source": "Digi24", "items": 1}]
        assert result["failed_sources"] == [{"source": "Mediafax", "error": "Mediafax: HTTP 500"}]

    def test_refresh_selected_source(self, capsys):
        cli.main(["refresh", "--source", "Digi24"])

        assert FakeAggregator.requested_sources == ["Digi24"]
        assert "Failed sources" not in capsys.readouterr().out

    def test_refresh_unknown_source_is_argument_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["refresh", "--source", "Unknown"])

        assert exc_info.value.code == 2
        assert "Unknown news source" in capsys.readouterr().err
