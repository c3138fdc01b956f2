"""Parser-Only Example - L20n Parsing Without Babel.

PARSER-ONLY: This example works WITHOUT Babel. Install with:
    pip install l20nlexengine  (no [babel] extra needed)

Demonstrates:

1. Parse L20n source to AST
2. Recover from malformed entries with an error sink
3. Extract variables from entities
4. Serialize AST back to L20n

Python 3.13+.
"""

from __future__ import annotations

SOURCE = """
/* Download manager */
<downloads "Downloads"
  title: "Downloads ({{ $count }})">
<items[@cldr.plural($n)] {
  one: "{{ $n }} item",
  other: "{{ $n }} items",
}>
<save title: 'Save' accesskey: "S">
"""


def example_1_basic_parsing() -> None:
    """Parse L20n source and inspect the AST."""
    from l20nlexengine import parse_l20n
    from l20nlexengine.syntax.ast import Hash

    print("=" * 60)
    print("Example 1: Basic Parsing")
    print("=" * 60)

    resource = parse_l20n(SOURCE)

    print(f"Parsed {len(resource)} entities:")
    for entity in resource.entries:
        kind = "hash" if isinstance(entity.value, Hash) else type(entity.value).__name__
        attrs = f" ({len(entity.attributes)} attributes)" if entity.attributes else ""
        print(f"  {entity.id}: {kind}{attrs}")

    print()


def example_2_error_recovery() -> None:
    """Collect errors instead of stopping at the first one."""
    from l20nlexengine import ErrorCollector, L20nSyntaxError, parse_l20n
    from l20nlexengine.diagnostics import DiagnosticFormatter

    print("=" * 60)
    print("Example 2: Error Recovery")
    print("=" * 60)

    broken = '<ok "fine">\n<bad "x"<next "y">\n<empty >'

    try:
        parse_l20n(broken)
    except L20nSyntaxError as e:
        print(f"Strict parse failed: {e}")

    collector = ErrorCollector()
    resource = parse_l20n(broken, collector)
    print(f"Recovered {len(resource)} entities, {len(collector)} errors:")
    print(DiagnosticFormatter().format_all(collector.errors))

    print()


def example_3_variables() -> None:
    """List the variables each entity needs at runtime."""
    from l20nlexengine import parse_l20n
    from l20nlexengine.introspection import extract_variables

    print("=" * 60)
    print("Example 3: Variable Extraction")
    print("=" * 60)

    for entity in parse_l20n(SOURCE).entries:
        names = ", ".join(sorted(extract_variables(entity))) or "(none)"
        print(f"  {entity.id}: {names}")

    print()


def example_4_serialization() -> None:
    """Serialize the AST back to L20n."""
    from l20nlexengine import parse_l20n, serialize_l20n

    print("=" * 60)
    print("Example 4: Serialization")
    print("=" * 60)

    resource = parse_l20n(SOURCE)
    text = serialize_l20n(resource)
    print(text)
    print(f"Roundtrip stable: {parse_l20n(text) == resource}")

    print()


if __name__ == "__main__":
    example_1_basic_parsing()
    example_2_error_recovery()
    example_3_variables()
    example_4_serialization()
