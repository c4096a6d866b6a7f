from __future__ import annotations

import logging

import pytest

from logwright import (
    FormatError,
    Log,
    LogBuilder,
    LogRegistry,
    MemoryListener,
    MemorySink,
    TagFilter,
    TemplatedMessage,
)
from logwright.plugins.filters import DelegatedFilter


class TestLogNaming:
    def test_explicit_name(self) -> None:
        assert Log("app").name == "app"

    @pytest.mark.parametrize("blank", [None, "", "   ", "\t\n"])
    def test_blank_name_uses_sequential_default(self, blank) -> None:
        first = Log(blank)
        second = Log(blank)
        assert first.name == "Log1"
        assert second.name == "Log2"

    def test_default_names_are_per_registry(self) -> None:
        registry = LogRegistry(name_prefix="Worker")
        assert Log(registry=registry).name == "Worker1"
        assert Log().name == "Log1"

    def test_name_is_read_only(self) -> None:
        log = Log("app")
        with pytest.raises(AttributeError):
            log.name = "other"  # type: ignore[misc]


class TestLogAttachment:
    def test_add_listener_and_sink_append(self) -> None:
        log = Log("app")
        l1, l2 = MemoryListener(), MemoryListener()
        sink = MemorySink()

        log.add_listener(l1)
        log.add_listener(l2)
        log.add_sink(sink)

        assert log.listeners == (l1, l2)
        assert log.sinks == (sink,)

    def test_collections_are_snapshots(self) -> None:
        log = Log("app")
        listeners = log.listeners
        log.add_listener(MemoryListener())
        assert listeners == ()


class TestLogWrite:
    def test_write_reaches_listeners_in_order(self) -> None:
        order: list[str] = []

        class Recording(MemoryListener):
            def write(self, message: str, tag: str) -> None:
                order.append(self.name)
                super().write(message, tag)

        log = Log("app")
        log.add_listener(Recording("a"))
        log.add_listener(Recording("b"))

        log.write("hello")

        assert order == ["a", "b"]

    def test_log_filter_blocks_all_listeners(self) -> None:
        listener = MemoryListener()
        log = Log("app")
        log.add_listener(listener)
        log.filter.filters.append(TagFilter(deny=["debug"]))

        log.write("hidden", tag="debug")
        log.write("shown", tag="info")

        assert listener.messages == ["shown"]

    def test_listener_filter_blocks_only_that_listener(self) -> None:
        quiet, loud = MemoryListener(), MemoryListener()
        quiet.filter.filters.append(TagFilter(allow=["error"]))
        log = Log("app")
        log.add_listener(quiet)
        log.add_listener(loud)

        log.write("m", tag="info")

        assert quiet.records == []
        assert loud.records == [("m", "info")]

    def test_listener_filter_sees_formatted_text(self) -> None:
        seen: list[str] = []
        listener = MemoryListener()
        listener.filter.filters.append(
            DelegatedFilter(lambda m, t: seen.append(m) or True)
        )
        log = Log("app")
        log.formatter.format = "<{message}>"
        log.add_listener(listener)

        log.write("x")

        assert seen == ["<x>"]

    def test_format_error_propagates(self) -> None:
        log = Log("app")
        log.formatter.format = "{nope}"
        log.add_listener(MemoryListener())
        with pytest.raises(FormatError):
            log.write("x")


class TestLogWriteTemplated:
    def test_sinks_receive_structured_message(self) -> None:
        sink = MemorySink()
        listener = MemoryListener()
        log = Log("app")
        log.add_sink(sink)
        log.add_listener(listener)

        log.write_templated("user {0} did {1}", "alice", "login", tag="audit")

        assert sink.messages == [
            TemplatedMessage("user {0} did {1}", ("alice", "login"), "audit")
        ]
        assert listener.records == [("user alice did login", "audit")]

    def test_log_templated_filter_blocks_everything(self) -> None:
        sink = MemorySink()
        listener = MemoryListener()
        log = Log("app")
        log.add_sink(sink)
        log.add_listener(listener)
        log.filter.templated_filters.append(DelegatedFilter(lambda m: False))

        log.write_templated("x {0}", 1)

        assert sink.messages == []
        assert listener.records == []

    def test_sink_templated_filter_is_per_sink(self) -> None:
        audit, other = MemorySink("audit"), MemorySink("other")
        audit.filter.templated_filters.append(TagFilter(allow=["audit"]))
        log = Log("app")
        log.add_sink(audit)
        log.add_sink(other)

        log.write_templated("x", tag="info")

        assert audit.messages == []
        assert len(other.messages) == 1

    def test_bad_message_template_raises(self) -> None:
        log = Log("app")
        with pytest.raises(FormatError):
            log.write_templated("{0} {1}", "only-one")


class _FailingListener(MemoryListener):
    def write(self, message: str, tag: str) -> None:
        raise RuntimeError("listener down")


class _FailingSink(MemorySink):
    def process_message(self, message: TemplatedMessage) -> None:
        raise RuntimeError("sink down")


class TestLogErrorContainment:
    """A failing listener or sink does not stop delivery to the others."""

    def test_failing_listener_does_not_block_later_listeners(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        good = MemoryListener()
        log = (
            LogBuilder()
            .with_listener(_FailingListener(), "broken")
            .with_listener(good)
            .build()
        )

        with caplog.at_level(logging.WARNING, logger="logwright"):
            log.write("hello")

        assert good.records == [("hello", "")]
        (record,) = caplog.records
        assert record.name == "logwright.listener"
        assert "listener down" in record.getMessage()
        assert "'broken'" in record.getMessage()

    def test_failing_sink_does_not_block_listeners_or_sinks(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        good_listener = MemoryListener()
        good_sink = MemorySink()
        log = (
            LogBuilder()
            .with_sink(_FailingSink(), "broken")
            .with_sink(good_sink)
            .with_listener(good_listener)
            .build()
        )

        with caplog.at_level(logging.WARNING, logger="logwright"):
            log.write_templated("x {0}", 1)

        assert good_sink.messages == [TemplatedMessage("x {0}", (1,), "")]
        assert good_listener.records == [("x 1", "")]
        (record,) = caplog.records
        assert record.name == "logwright.sink"
        assert "sink down" in record.getMessage()

    def test_failing_listener_filter_is_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        def broken(message: str, tag: str) -> bool:
            raise ValueError("bad filter")

        listener = MemoryListener()
        listener.filter.filters.append(DelegatedFilter(broken))
        log = Log("app")
        log.add_listener(listener)

        with caplog.at_level(logging.WARNING, logger="logwright"):
            log.write("m")

        assert listener.records == [("m", "")]
        assert [r.name for r in caplog.records] == ["logwright.filter"]
