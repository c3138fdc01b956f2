"""Tests for the resource loop in syntax/parser/core.py.

Covers error-sink recovery, propagation without a sink, the placeable
limit bypassing the sink, size limits, simple mode and logging.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given

from l20nlexengine import parse_l20n
from l20nlexengine.diagnostics import (
    ErrorCollector,
    ErrorSink,
    L20nError,
    L20nLimitError,
    L20nSyntaxError,
)
from l20nlexengine.enums import ErrorEvent
from l20nlexengine.syntax.ast import ComplexString, Entity, Resource, VariableReference
from l20nlexengine.syntax.parser import L20nParser
from tests.strategies import l20n_chaos_source, l20n_identifiers, l20n_safe_text


class RecordingSink:
    """Minimal duck-typed sink."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, L20nError]] = []

    def emit(self, event: str, error: L20nError) -> None:
        self.calls.append((event, error))


# ============================================================================
# WELL-FORMED RESOURCES
# ============================================================================


class TestParseResource:
    """Test parsing of well-formed resources."""

    def test_empty_source(self) -> None:
        """Empty and whitespace-only sources yield an empty Resource."""
        assert L20nParser().parse("") == Resource(entries=())
        assert L20nParser().parse(" \n\t\r\n ") == Resource(entries=())

    def test_entities_in_order(self) -> None:
        """Entities appear in source order."""
        resource = L20nParser().parse('<a "1">\n<b "2">\n<c "3">')

        assert [e.id for e in resource.entries] == ["a", "b", "c"]

    def test_comment_contributes_nothing(self) -> None:
        """A comment produces no entry, not even a placeholder."""
        resource = L20nParser().parse('/* ignored */<id "v">')

        assert resource.entries == (Entity(id="id", value="v"),)

    def test_resource_get_returns_last_definition(self) -> None:
        """Resource.get() returns the last entity with an id."""
        resource = L20nParser().parse('<a "1"> <a "2">')

        entity = resource.get("a")
        assert entity is not None
        assert entity.value == "2"
        assert resource.get("missing") is None

    def test_mixed_resource(self) -> None:
        """A realistic resource with every construct."""
        source = """
/* Download manager */
<downloads "Downloads"
  title: "Downloads ({{ $count }})">
<items[@cldr.plural($n)] {
  one: "{{ $n }} item",
  other: "{{ $n }} items",
}>
<save title: 'Save' accesskey: "S">
"""
        resource = parse_l20n(source)

        assert len(resource) == 3
        downloads, items, save = resource.entries
        assert downloads.attributes is not None
        assert downloads.attributes["title"] == ComplexString(
            ("Downloads (", VariableReference("count"), ")")
        )
        assert items.index is not None
        assert items.index.operand == "n"
        assert save.value is None

    @given(l20n_identifiers(), l20n_safe_text())
    def test_minimal_entity_property(self, entity_id: str, text: str) -> None:
        """<id "value"> yields exactly one entity with only id and value."""
        resource = L20nParser().parse(f'<{entity_id} "{text}">')

        assert resource.entries == (Entity(id=entity_id, value=text),)


# ============================================================================
# ERROR RECOVERY
# ============================================================================


class TestErrorRecovery:
    """Test error sink recovery."""

    SOURCE = '<bad "x"<one "1">\n<two "2">'

    def test_one_bad_entry_then_two_good_with_sink(self) -> None:
        """The two well-formed entities survive; the sink sees one error."""
        collector = ErrorCollector()
        resource = L20nParser().parse(self.SOURCE, collector)

        assert [e.id for e in resource.entries] == ["one", "two"]
        assert len(collector) == 1
        error = collector.errors[0]
        assert isinstance(error, L20nSyntaxError)
        assert error.message == 'expected ">"'
        assert error.position == 8

    def test_same_input_without_sink_raises(self) -> None:
        """Without a sink the first error propagates."""
        with pytest.raises(L20nSyntaxError) as exc_info:
            L20nParser().parse(self.SOURCE)

        assert exc_info.value.position == 8

    def test_event_name(self) -> None:
        """Errors are emitted under the 'parseerror' event."""
        sink = RecordingSink()
        L20nParser().parse(self.SOURCE, sink)

        assert [name for name, _ in sink.calls] == [ErrorEvent.PARSE_ERROR]
        assert sink.calls[0][0] == "parseerror"

    def test_duck_typed_sink_satisfies_protocol(self) -> None:
        """Any object with emit(event, error) is an ErrorSink."""
        assert isinstance(RecordingSink(), ErrorSink)
        assert isinstance(ErrorCollector(), ErrorSink)

    def test_unterminated_entity_before_next(self) -> None:
        """An entity missing its value resumes at the next '<'."""
        collector = ErrorCollector()
        resource = L20nParser().parse('<bad\n<ok "y">', collector)

        assert [e.id for e in resource.entries] == ["ok"]
        assert len(collector) == 1
        assert collector.errors[0].position == 5  # type: ignore[attr-defined]

    def test_stray_characters_skip_one_at_a_time(self) -> None:
        """An error that consumed nothing skips a single character."""
        collector = ErrorCollector()
        resource = L20nParser().parse('xy <a "1">', collector)

        assert [e.id for e in resource.entries] == ["a"]
        assert [e.position for e in collector.errors] == [0, 1]  # type: ignore[attr-defined]
        assert all(e.message == "invalid entry" for e in collector.errors)  # type: ignore[attr-defined]

    def test_error_string_format(self) -> None:
        """str(error) is '<message> at pos <n>: "<context>"'."""
        with pytest.raises(L20nSyntaxError) as exc_info:
            L20nParser().parse('<ok "x">\n<hello"x">')

        assert str(exc_info.value) == 'expected whitespace at pos 15: "<hello"x">"'

    def test_unterminated_comment_at_end(self) -> None:
        """An unterminated comment is reported and parsing finishes."""
        collector = ErrorCollector()
        resource = L20nParser().parse('<a "1"> /* open', collector)

        assert len(resource) == 1
        assert len(collector) >= 1
        assert collector.errors[0].message == "unterminated comment"  # type: ignore[attr-defined]

    @given(l20n_chaos_source())
    def test_recovery_always_terminates(self, source: str) -> None:
        """With a sink, any input parses without raising syntax errors."""
        collector = ErrorCollector()
        resource = L20nParser().parse(source, collector)

        event(f"outcome={'errors' if len(collector) else 'clean'}")
        for error in collector.errors:
            assert isinstance(error, L20nSyntaxError)
            assert 0 <= error.position <= len(source)
        for entity in resource.entries:
            assert entity.value is not None or entity.attributes


# ============================================================================
# LIMITS
# ============================================================================


class TestLimits:
    """Test placeable and size limits."""

    def test_hundred_placeables_accepted(self) -> None:
        """A string with exactly 100 placeables parses."""
        source = '<a "' + "{{ $x }}" * 100 + '">'
        resource = L20nParser().parse(source)

        value = resource.entries[0].value
        assert isinstance(value, ComplexString)
        assert len(value.references) == 100

    def test_limit_error_bypasses_sink(self) -> None:
        """101 placeables raise even when a sink is supplied."""
        collector = ErrorCollector()
        source = '<ok "1">\n<a "' + "{{ $x }}" * 101 + '">'

        with pytest.raises(L20nLimitError) as exc_info:
            L20nParser().parse(source, collector)

        assert "101" in str(exc_info.value)
        assert "100" in str(exc_info.value)
        assert len(collector) == 0

    def test_configured_placeable_limit(self) -> None:
        """max_placeables overrides the default cap."""
        parser = L20nParser(max_placeables=2)

        assert parser.max_placeables == 2
        parser.parse('<a "{{a}}{{b}}">')
        with pytest.raises(L20nLimitError):
            parser.parse('<a "{{a}}{{b}}{{c}}">')

    def test_source_size_limit(self) -> None:
        """Sources over max_source_size are rejected with ValueError."""
        parser = L20nParser(max_source_size=5)

        with pytest.raises(ValueError, match="exceeds maximum"):
            parser.parse('<a "xx">')

    def test_size_limit_disabled(self) -> None:
        """max_source_size=0 disables the check."""
        parser = L20nParser(max_source_size=0)

        assert len(parser.parse('<a "xx">')) == 1

    def test_default_limits(self) -> None:
        """Defaults: 10 MiB source, 100 placeables, full mode."""
        parser = L20nParser()

        assert parser.max_source_size == 10 * 1024 * 1024
        assert parser.max_placeables == 100
        assert parser.simple_mode is False


# ============================================================================
# SIMPLE MODE AND LOGGING
# ============================================================================


class TestSimpleMode:
    """Test simple mode parsing."""

    def test_strings_kept_verbatim(self) -> None:
        """Escapes and placeables are left untouched."""
        resource = L20nParser(simple_mode=True).parse('<a "x {{ $y }} \\n">')

        assert resource.entries[0].value == "x {{ $y }} \\n"

    def test_convenience_flag(self) -> None:
        """parse_l20n(simple=True) enables simple mode."""
        resource = parse_l20n('<a "{{ $y }}">', simple=True)

        assert resource.entries[0].value == "{{ $y }}"

    def test_simple_mode_still_checks_structure(self) -> None:
        """Structural errors are still reported in simple mode."""
        with pytest.raises(L20nSyntaxError):
            L20nParser(simple_mode=True).parse("<a >")


class TestLogging:
    """Test parser debug logging."""

    def test_recovered_errors_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each recovered error and the summary are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="l20nlexengine.syntax.parser.core"):
            L20nParser().parse('x <a "1">', ErrorCollector())

        messages = [record.getMessage() for record in caplog.records]
        assert any("Skipping malformed entry at 0" in m for m in messages)
        assert any("1 entities, 1 errors" in m for m in messages)
