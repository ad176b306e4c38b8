"""Name derivation for generated Go code.

Turns a raw module/entity name into every identifier the templates need.
Derivation is deliberately shallow: names are case-adjusted, never
sanitised, so a name with characters that are invalid in Go identifiers
yields equally invalid (but plausible-looking) identifiers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .models import Strategy


class DerivedNames(BaseModel):
    """Identifiers derived once per request and shared by every generated file."""
    model_config = ConfigDict(frozen=True)

    raw_name: str
    class_name: str
    package_name: str
    variable_name: str
    table_name: str
    route_segment: str
    entity_name: str


def title_words(value: str) -> str:
    """Upper-case the first character of every space-delimited word.

    The rest of each word is left untouched: ``userProfile`` -> ``UserProfile``.
    """
    return " ".join(word[:1].upper() + word[1:] for word in value.split(" "))


def lower_first(value: str) -> str:
    """Lower-case only the first character: ``UserProfile`` -> ``userProfile``."""
    return value[:1].lower() + value[1:]


def route_segment(raw_name: str, strategy: Strategy) -> str:
    """Route path segment for the controller's swagger annotations.

    Legacy controllers pluralise naively (lower-case + ``s``, always); module
    controllers use the raw module name verbatim.
    """
    if strategy is Strategy.LEGACY_FLAT:
        return raw_name.lower() + "s"
    return raw_name


def derive_names(raw_name: str, strategy: Strategy = Strategy.FLAT_MODULE) -> DerivedNames:
    """Compute the :class:`DerivedNames` for *raw_name*. Never fails."""
    lowered = raw_name.lower()
    return DerivedNames(
        raw_name=raw_name,
        class_name=title_words(raw_name),
        package_name=lowered,
        variable_name=lower_first(raw_name),
        table_name=lowered,
        route_segment=route_segment(raw_name, strategy),
        entity_name=lowered,
    )
