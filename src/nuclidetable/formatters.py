"""
Text renderings of the whole catalog.

- :func:`format_fixed_width` lists nuclides, isotopes, translation counts
  and the long-form periodic table in narrow columns.
- :func:`format_json` emits the catalog and its localized side tables as
  JSON, or with ``javascript=True`` as a JavaScript object body.
- :func:`format_html_cells` emits one ``<td>`` cell per element for a
  periodic table web page.

Example:
    >>> from nuclidetable import get_catalog
    >>> from nuclidetable.formatters import format_json
    >>> import json
    >>> data = json.loads(format_json(get_catalog()))
    >>> data["nuclides"][26]["symbol"]
    'Fe'
"""

from __future__ import annotations

import html
import json
from typing import Iterator, Mapping, Sequence

from .catalog import Catalog
from .config import Config, get_logger
from .decay import DECAY_CODES, DECAY_SYMBOLS
from .terms import (
    CATEGORY_GROUP_NAMES,
    CATEGORY_NAMES,
    LIFE_CODES,
    LIFE_DESCRIPTIONS,
    OCCURRENCE_CODES,
    OCCURRENCE_NAMES,
    STABILITY_DESCRIPTIONS,
    STATE_CODES,
    STATE_NAMES,
    THEME_NAMES,
)

logger = get_logger("formatters")

__all__ = [
    "iter_fixed_width",
    "format_fixed_width",
    "format_json",
    "iter_html_cells",
    "format_html_cells",
    "HTML_CATEGORY_CLASSES",
]

NUCLIDE_COLUMNS = (
    "; Z,symbol,name,period,group,category,discoveryYear,discoveryIndex,stableCount,"
    "stabilityIndex,block,occurrenceCode,lifeCode,atm0StateCode,melt,boil,weight"
)
ISOTOPE_COLUMNS = "; Z,symbol,A,abundance,occurrenceCode,decayCodes,halflife"
TRANSLATION_COLUMNS = "; language,totalTranslations"

# CSS class of a cell, indexed by Category
HTML_CATEGORY_CLASSES: tuple[str, ...] = (
    "AlkCat", "AEaCat", "LanCat", "ActCat", "TMeCat",
    "PtMCat", "MetCat", "NMeCat", "HalCat", "NobCat",
)


def iter_fixed_width(catalog: Catalog, lang: str | None = None) -> Iterator[str]:
    """
    Yield the lines of the fixed-width listing.

    Args:
        catalog: Catalog to list.
        lang: Language for names and numbers, matched ignoring case.
            Codes without a cached name width fall back to
            Config.DEFAULT_LANGUAGE.
    """
    cached = {code.casefold(): code for code in catalog.max_name_lengths}
    lang = cached.get((lang or "").casefold(), Config.DEFAULT_LANGUAGE)
    width = catalog.max_name_length(lang)

    yield NUCLIDE_COLUMNS
    for nuclide in catalog:
        yield nuclide.to_fixed_width_string(lang, name_width=width)

    yield ""
    yield ISOTOPE_COLUMNS
    for nuclide in catalog:
        for iso in nuclide.isotopes:
            yield f"{nuclide.z:>3} {nuclide.symbol:<3} {iso.to_fixed_width_string(lang)}"

    yield ""
    yield TRANSLATION_COLUMNS
    for code, count in catalog.translation_counts().items():
        yield f"{code:<5}{count:>4}"

    yield ""
    yield from catalog.get_long_table()


def format_fixed_width(catalog: Catalog, lang: str | None = None) -> str:
    """Return the fixed-width listing as one string."""
    return "\n".join(iter_fixed_width(catalog, lang))


def _text(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def format_json(catalog: Catalog, javascript: bool = False) -> str:
    """
    Render the catalog and its side tables.

    Args:
        catalog: Catalog to render.
        javascript: Leave property names unquoted and assign with " ="
            instead of ":".

    Returns:
        The document text. Without ``javascript`` it is valid JSON.
    """
    quote = "" if javascript else '"'
    binop = " =" if javascript else ":"

    def prop(name: str) -> str:
        return f"  {quote}{name}{quote}{binop}"

    def string_list(name: str, values: Sequence[str]) -> str:
        return f"{prop(name)} [ " + ", ".join(_text(v) for v in values) + " ]"

    def language_table(name: str, table: Mapping[str, Sequence[str]]) -> str:
        rows = [
            f"    {_text(lang)}: [" + ", ".join(_text(v) for v in values) + " ]"
            for lang, values in table.items()
        ]
        return f"{prop(name)} {{\n" + ",\n".join(rows) + "\n  }"

    blocks = [
        language_table("categoryGroupNames", CATEGORY_GROUP_NAMES),
        language_table("categoryNames", CATEGORY_NAMES),
        f"{prop('decayCodes')} {_text(DECAY_CODES)}",
        string_list("decaySymbols", DECAY_SYMBOLS),
        string_list("biologyCodes", LIFE_CODES),
        language_table("biologyDescriptions", LIFE_DESCRIPTIONS),
        f"{prop('occurrenceCodes')} {_text(OCCURRENCE_CODES)}",
        language_table("occurrenceNames", OCCURRENCE_NAMES),
        language_table("stabilityDescriptions", STABILITY_DESCRIPTIONS),
        f"{prop('stateCodes')} {_text(STATE_CODES)}",
        language_table("stateNames", STATE_NAMES),
        language_table("themeNames", THEME_NAMES),
        _nuclide_names(catalog, prop("nuclideNames")),
    ]

    nuclides = ",\n".join(
        f"    {{ {nuclide.to_json_string(quote)} }}" for nuclide in catalog
    )
    lines = ["{"]
    for block in blocks:
        lines.append(block + ",")
        lines.append("")
    lines += [prop("nuclides"), "  [", nuclides, "  ]", "}"]

    logger.debug(f"Rendered {len(catalog)} nuclides ({'JavaScript' if javascript else 'JSON'})")
    return "\n".join(lines)


def _nuclide_names(catalog: Catalog, heading: str) -> str:
    # Names are padded so each nuclide's column lines up across languages
    languages = list(catalog.max_name_lengths)
    widths = [max(len(n.get_name(lang)) for lang in languages) for n in catalog]

    rows = []
    for lang in languages:
        key = lang.replace("-", "")
        cells = []
        for ix, nuclide in enumerate(catalog):
            name = nuclide.get_name(lang)
            comma = "," if ix + 1 < len(catalog) else ""
            cells.append(f"{_text(name)}{comma}" + " " * (widths[ix] - len(name) + 1))
        rows.append(f"    {_text(key)}" + " " * (4 - len(key)) + ": [ " + "".join(cells) + "]")
    return f"{heading} {{\n" + ",\n".join(rows) + "\n  }"


def iter_html_cells(catalog: Catalog) -> Iterator[str]:
    """
    Yield one table cell per element.

    The canonical name is visible; localized names follow in hidden spans
    tagged with their ``lang`` so a page script can switch languages.
    """
    for nuclide in catalog.get_elements():
        spans = "".join(
            f'<span style="display:none" lang="{html.escape(lang)}">{html.escape(name)}</span>'
            for lang, name in nuclide.names.items()
        )
        yield (
            '<td onclick="cellClick()">'
            f'<div class="{HTML_CATEGORY_CLASSES[nuclide.category_index]}">'
            f'<div class="Nm"><span>{html.escape(nuclide.name)}</span>{spans}</div>'
            f'<a><div class="Sb">{html.escape(nuclide.symbol)}</div></a>'
            f'<div class="An">{nuclide.z}</div>'
            "</div></td>"
        )


def format_html_cells(catalog: Catalog) -> str:
    """Return all element cells, one per line."""
    return "\n".join(iter_html_cells(catalog))
