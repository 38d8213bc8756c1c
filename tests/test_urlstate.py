"""Tests for URL state — query-string round trip and the debounced writer."""

from __future__ import annotations

import asyncio
from urllib.parse import parse_qs, urlsplit

from metacraft.form import FormState
from metacraft.model import MetaConfig
from metacraft.urlstate import UrlSynchronizer, location_for, parse, serialize

FULL = MetaConfig(
    title="Título — com acentos & símbolos",
    description="Desc + more",
    site_name="Site",
    canonical="https://example.com/a?b=c",
    type="article",
    twitter_card="summary",
    author="Ana",
    og_image_text="OG text",
    og_bg="#abc",
    og_fg="#010203",
    jsonld_type="Person",
)


class TestSerialize:
    def test_round_trip_full_config(self) -> None:
        assert parse(serialize(FULL)) == FULL

    def test_round_trip_non_empty_fields(self) -> None:
        config = MetaConfig(title="Only", author="", og_image_text="")
        parsed = parse(serialize(config))
        for key, value in config.to_query().items():
            assert parsed.get(key) == value

    def test_empty_fields_are_omitted(self) -> None:
        qs = parse_qs(serialize(MetaConfig(author="")))
        assert "author" not in qs

    def test_leading_question_mark_is_accepted(self) -> None:
        assert parse("?title=Hi").title == "Hi"

    def test_location_for(self) -> None:
        url = location_for(MetaConfig(title="Hi"), "/gen")
        parts = urlsplit(url)
        assert parts.path == "/gen"
        assert parse_qs(parts.query)["title"] == ["Hi"]


class TestUrlSynchronizer:
    def test_only_latest_value_is_written(self) -> None:
        writes: list[str] = []

        async def scenario() -> None:
            sync = UrlSynchronizer(writes.append, delay=0.01)
            sync.notify(MetaConfig(title="first"))
            sync.notify(MetaConfig(title="second"))
            assert sync.pending
            await asyncio.sleep(0.05)
            assert not sync.pending

        asyncio.run(scenario())
        assert writes == [location_for(MetaConfig(title="second"))]

    def test_nothing_written_before_delay(self) -> None:
        writes: list[str] = []

        async def scenario() -> None:
            sync = UrlSynchronizer(writes.append, delay=10)
            sync.notify(MetaConfig())
            await asyncio.sleep(0)
            assert writes == []
            sync.cancel()

        asyncio.run(scenario())
        assert writes == []

    def test_flush_writes_immediately(self) -> None:
        writes: list[str] = []

        async def scenario() -> None:
            sync = UrlSynchronizer(writes.append, delay=10)
            sync.notify(MetaConfig(title="now"))
            sync.flush()
            assert not sync.pending

        asyncio.run(scenario())
        assert writes == [location_for(MetaConfig(title="now"))]

    def test_flush_without_pending_is_noop(self) -> None:
        writes: list[str] = []
        UrlSynchronizer(writes.append).flush()
        assert writes == []

    def test_write_failure_is_swallowed(self) -> None:
        def broken(_: str) -> None:
            raise RuntimeError("history unavailable")

        async def scenario() -> bool:
            sync = UrlSynchronizer(broken, delay=0.01)
            sync.notify(MetaConfig())
            await asyncio.sleep(0.05)
            return sync.pending

        assert asyncio.run(scenario()) is False

    def test_driven_by_form_edits(self) -> None:
        writes: list[str] = []

        async def scenario() -> None:
            sync = UrlSynchronizer(writes.append, delay=0.01)
            form = FormState()
            form.subscribe(sync.notify)
            for ch in ("H", "He", "Hel"):
                form.set_field("title", ch)
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert len(writes) == 1
        assert parse(urlsplit(writes[0]).query).title == "Hel"
