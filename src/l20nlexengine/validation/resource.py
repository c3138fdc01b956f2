"""L20n resource validation.

Provides standalone validation for L20n resources. Useful for CI/CD
pipelines, linters, and tooling that needs to check resource files
without a runtime.

Architecture:
    - validate_resource(): Main entry point, orchestrates validation passes
    - _convert_syntax_errors(): Pass 1 - Sink-collected errors to ValidationError
    - _check_duplicates(): Pass 2 - Repeated entity IDs
    - _check_indexes(): Pass 3 - Index-selected values and plural categories

Python 3.13+.
"""

import logging

from l20nlexengine.diagnostics import (
    ErrorCollector,
    L20nLimitError,
    L20nSyntaxError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from l20nlexengine.locale_utils import BabelImportError, get_plural_categories
from l20nlexengine.syntax import Entity, Hash, Index, IndexedValue, Resource, Value
from l20nlexengine.syntax.cursor import LineOffsetCache
from l20nlexengine.syntax.parser import L20nParser

__all__ = ["validate_resource"]

logger = logging.getLogger(__name__)


def _convert_syntax_errors(
    collector: ErrorCollector,
    source: str,
) -> list[ValidationError]:
    """Convert sink-collected syntax errors to ValidationError objects.

    Uses LineOffsetCache so that M errors cost O(n + M log n) rather
    than O(M*n).
    """
    errors: list[ValidationError] = []
    line_cache: LineOffsetCache | None = None

    for error in collector.errors:
        if not isinstance(error, L20nSyntaxError):
            continue
        if line_cache is None:
            line_cache = LineOffsetCache(source)
        line, column = line_cache.get_line_col(error.position)
        errors.append(
            ValidationError(
                code="parse-error",
                message=error.message,
                content=error.context,
                line=line,
                column=column,
            )
        )

    return errors


def _check_duplicates(resource: Resource) -> list[ValidationWarning]:
    """Warn about entity IDs defined more than once."""
    warnings: list[ValidationWarning] = []
    seen_ids: set[str] = set()

    for entity in resource.entries:
        if entity.id in seen_ids:
            warnings.append(
                ValidationWarning(
                    code="duplicate-id",
                    message=(
                        f"Duplicate entity ID '{entity.id}' "
                        f"(later definition will overwrite earlier)"
                    ),
                    context=entity.id,
                )
            )
        seen_ids.add(entity.id)

    return warnings


def _indexed_values(entity: Entity) -> list[tuple[str, Index, Value]]:
    """Collect (location, index, selected value) triples for an entity."""
    found: list[tuple[str, Index, Value]] = []
    if entity.index is not None and entity.value is not None:
        found.append((entity.id, entity.index, entity.value))
    for name, value in (entity.attributes or {}).items():
        if isinstance(value, IndexedValue):
            found.append((f"{entity.id}.{name}", value.index, value.value))
    return found


def _check_indexes(
    resource: Resource,
    categories: frozenset[str] | None,
) -> list[ValidationWarning]:
    """Check index-selected values.

    An index selects a hash key at runtime, so the selected value should be
    a Hash. With locale categories available, every key of a plural-indexed
    hash should be one of them.
    """
    warnings: list[ValidationWarning] = []

    for entity in resource.entries:
        for location, index, value in _indexed_values(entity):
            if not isinstance(value, Hash):
                warnings.append(
                    ValidationWarning(
                        code="index-without-hash",
                        message=(
                            f"Index on '{location}' selects from a "
                            f"{type(value).__name__}, not a hash"
                        ),
                        context=location,
                    )
                )
                continue

            if categories is None:
                continue
            unknown = [key for key in value.keys() if key not in categories]
            if unknown:
                warnings.append(
                    ValidationWarning(
                        code="unknown-plural-category",
                        message=(
                            f"Hash keys {', '.join(unknown)} of '{location}' are not "
                            f"plural categories for {index.macro.value}() "
                            f"(expected: {', '.join(sorted(categories))})"
                        ),
                        context=location,
                    )
                )

    return warnings


def _load_plural_categories(locale: str) -> frozenset[str] | None:
    """Resolve CLDR plural categories, or None for an unknown locale."""
    try:
        from babel.core import UnknownLocaleError  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e

    try:
        return get_plural_categories(locale)
    except (UnknownLocaleError, ValueError):
        logger.warning("Unknown locale %r; plural category check skipped", locale)
        return None


def validate_resource(
    source: str,
    *,
    locale: str | None = None,
    parser: L20nParser | None = None,
) -> ValidationResult:
    """Validate an L20n resource.

    Standalone validation function for CI/CD pipelines and tooling.
    Performs syntax validation (errors) and semantic validation (warnings).

    Validation passes:
    1. Syntax errors: Every malformed entry, collected through an error sink
    2. Structural: Duplicate entity IDs
    3. Indexes: Index on a non-hash value; with ``locale``, hash keys
       that are not CLDR plural categories of that locale

    Args:
        source: L20n resource text
        locale: Locale code for the plural category check (requires Babel)
        parser: Optional parser instance (creates default if not provided)

    Returns:
        ValidationResult with parse errors and semantic warnings

    Raises:
        BabelImportError: If ``locale`` is given and Babel is not installed

    Example:
        >>> from l20nlexengine.validation import validate_resource
        >>> result = validate_resource(source, locale="en")
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(f"Error [{error.code}]: {error.message}")

    Thread Safety:
        Thread-safe. Creates isolated parser if not provided.
    """
    if parser is None:
        parser = L20nParser()

    categories = _load_plural_categories(locale) if locale is not None else None
    collector = ErrorCollector()

    try:
        resource = parser.parse(source, collector)
    except L20nLimitError as e:
        logger.error("Critical validation error: %s", e)
        error = ValidationError(
            code="critical-parse-error",
            message=str(e),
            content=str(e),
        )
        return ValidationResult(errors=(error,), warnings=())

    errors = _convert_syntax_errors(collector, source)
    warnings = _check_duplicates(resource) + _check_indexes(resource, categories)

    logger.debug(
        "Validated resource: %d errors, %d warnings",
        len(errors),
        len(warnings),
    )

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
