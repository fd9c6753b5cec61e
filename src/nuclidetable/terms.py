"""
Localized terms and number formatting.

Every table maps a two-letter base language to a list that is positionally
aligned with the enumeration it describes, so ``CATEGORY_NAMES["fr"][3]`` is
the French name of ``Category(3)``. Region codes such as "en-GB" share the
table of their base language; unknown languages use English.
"""

from __future__ import annotations

__all__ = [
    "base_language",
    "localize",
    "decimal_separator",
    "format_fixed",
    "format_general",
    "CATEGORY_ABBREVIATIONS",
    "CATEGORY_GROUP_NAMES",
    "CATEGORY_NAMES",
    "DECAY_MODE_NAMES",
    "ERA_NAMES",
    "ISOTOPE_HEADINGS",
    "LIFE_CODES",
    "LIFE_DESCRIPTIONS",
    "OCCURRENCE_CODES",
    "OCCURRENCE_NAMES",
    "STABILITY_DESCRIPTIONS",
    "STATE_CODES",
    "STATE_NAMES",
    "THEME_NAMES",
    "TIME_UNIT_SUFFIXES",
]

# Languages that write 12,32 rather than 12.32
_COMMA_LANGUAGES = frozenset({"de", "es", "fr", "it", "ru"})

CATEGORY_ABBREVIATIONS: tuple[str, ...] = (
    "AlMetal", "AlEMetal", "Lanthan", "Actin", "TMetal",
    "PtMetal", "Metaloid", "Nonmetal", "Halogen", "NobleGas",
)

LIFE_CODES: tuple[str, ...] = ("", "EB", "ET", "BT", "A")
OCCURRENCE_CODES: str = "SCDP"
STATE_CODES: str = " SLG"

CATEGORY_GROUP_NAMES: dict[str, list[str]] = {
    "de": ["Metalle", "Halbmetall", "Nichtmetalle"],
    "en": ["Metal", "Metalloid", "Nonmetal"],
    "es": ["Metales", "Metaloide", "No metales"],
    "fr": ["Métaux", "Métalloïde", "Non-métaux"],
    "it": ["Metalli", "Metalloide", "Nonmetalli"],
    "ru": ["Металлы", "Металлоид", "Неметаллы"],
}

# Singular form, sentence casing, IUPAC wording where it exists
CATEGORY_NAMES: dict[str, list[str]] = {
    "de": [
        "Alkalimetall", "Erdalkalimetall", "Lanthanoid", "Actinoid",
        "Übergangsmetall", "Metall",
        "Halbmetall", "Nichtmetall", "Halogen", "Edelgas",
    ],
    "en": [
        "Alkali metal", "Alkaline earth metal", "Lanthanoid", "Actinoid",
        "Transition metal", "Post-transition metal",
        "Metalloid", "Other nonmetal", "Halogen", "Noble gas",
    ],
    "es": [
        "Metal alcalino", "Metal alcalinotérreo", "Lantánido", "Actínido",
        "Metal de transición", "Otro metal",
        "Metaloide", "Otros no metal", "Halógeno", "Gas noble",
    ],
    "fr": [
        "Métal alcalin", "Métal alcalino-terreux", "Lanthanide", "Actinide",
        "Métal de transition", "Métal pauvre",
        "Métalloïde", "Autres non-métal", "Halogène", "Gaz noble",
    ],
    "it": [
        "Metallo alcalino", "Metallo alcalino terroso", "Lantanide", "Attinide",
        "Metallo di transizione", "metallo post-transizione",
        "Metalloide", "Poliatomici", "Alogena", "Gas nobile",
    ],
    "ru": [
        "Щелочные металлы", "Щёлочноземельные металлы", "Лантаноид", "Актинид",
        "Переходный металл", "Постпе-реходные",
        "Металлоид", "Другие неметаллы", "Галогены", "Благородные газы",
    ],
}

# Column headings of an isotope chart
ISOTOPE_HEADINGS: dict[str, list[str]] = {
    "de": ["Isotop", "NH", ",5t", "ZA", "Zerfallsprodukt"],
    "en": ["Isotope", "Natural Abundance", "Half-life", "Decay Mode", "Product"],
    "es": ["Isótopo", "Abundancia natural", "Periodo", "MD", "Producto"],
    "fr": ["Isotope", "Abondance naturelle", "Période", "MD", "Produit"],
    "it": ["Isotopo", "Abbondanza in natura", "TD", "DM", "Prodotto"],
    "ru": ["Изотоп", "Распространенность", "Период полураспада", "Режим распада", "Продукт"],
}

# Aligned with decay.DECAY_ORDER
DECAY_MODE_NAMES: dict[str, list[str]] = {
    "de": [
        "Alpha-Zerfall", "Beta-Plus-Zerfall", "Beta-Minus-Zerfall", "Doppelter Beta-Minus-Zerfall",
        "Elektroneneinfang", "Doppelter Elektroneneinfang", "Neutronenemission", "Gamma-Zerfall",
        "Isomerie-Übergang", "Innere Konversion", "Spontane Spaltung",
    ],
    "en": [
        "Alpha decay", "Beta plus decay", "Beta minus decay", "Double beta minus decay",
        "Electron capture", "Double electron capture", "Neutron emission", "Gamma decay",
        "Isomeric transition", "Internal Conversion", "Spontaneous fission",
    ],
    "es": [
        "Desintegración alfa", "Emisión de positrones", "Desintegración beta", "Doble desintegración beta",
        "Captura electrónica", "Captura de doble electrón", "Emisión de neutrones", "Transición isomérica",
        "Transición isomérica", "Conversión interna", "Fisión espontánea",
    ],
    "fr": [
        "Radioactivité α", "Émission de positron", "Rayonnement β-", "Double désintégration bêta",
        "Capture électronique", "Double capture électronique", "Émission de neutron", "Rayonnement γ",
        "Isomérie nucléaire", "Conversion interne", "Fission spontanée",
    ],
    "it": [
        "Decadimento alfa", "Emissione di positroni", "Decadimento beta", "Doppio decadimento beta",
        "Cattura elettronica", "Doppia cattura elettronica", "Emissione di neutroni", "Transizione isomerica",
        "Transizione isomerica", "Conversione interna", "Fissione spontanea",
    ],
    "ru": [
        "Альфа распад", "Бета плюс распад", "Бета минус распад", "Двойной бета минус распад",
        "Электронный захват", "Двойной электронный захват", "Нейтронная эмиссия", "Гамма-распад",
        "Изомерия атомных ядер", "Внутренняя конверсия", "Спонтанное деление",
    ],
}

# Aligned with nuclide.Nutrition
LIFE_DESCRIPTIONS: dict[str, list[str]] = {
    "de": [
        "Nicht absorbiert",
        "Wesentliches Element (> ,1 Massenprozent)",
        "Wesentliches Element (< ,1 Massenprozent)",
        "Nützliches Spurenelement",
        "Element absorbiert, aber nicht verwendet",
    ],
    "en": [
        "Not absorbed",
        "Essential element (> .1% by mass)",
        "Essential element (< .1% by mass)",
        "Beneficial trace element",
        "Nonbeneficial trace element",
    ],
    "es": [
        "No absorbido",
        "Elemento esencial (> ,1% en masa)",
        "Elemento esencial (< ,1% en masa)",
        "Oligoelemento beneficioso",
        "Oligoelemento no beneficioso",
    ],
    "fr": [
        "Non absorbé",
        "Élément essentiel (> ,1% en masse)",
        "Élément essentiel (< ,1% en masse)",
        "Oligo-élément bénéfique",
        "Oligo-élément non bénéfique",
    ],
    "it": [
        "Non assorbito",
        "Elemento essenziale (> ,1% in massa)",
        "Elemento essenziale (< ,1% in massa)",
        "Benefico oligoelemento",
        "Oligoelemento non benefico",
    ],
    "ru": [
        "Не впитывается",
        "Существенный элемент (> ,1% по массе)",
        "Существенный элемент (< ,1% по массе)",
        "Полезный микроэлемент",
        "Неблагоприятный микроэлемент",
    ],
}

OCCURRENCE_NAMES: dict[str, list[str]] = {
    "de": ["Künstlichen", "Kosmogen", "Zerfall", "Primordial"],
    "en": ["Synthetic", "Cosmogenic", "Decay", "Primordial"],
    "es": ["Sintético", "Cosmogénicos", "Decadencia", "Primordial"],
    "fr": ["Synthétique", "Cosmogénique", "Désintégration", "Primordial"],
    "it": ["Sintetico", "Cosmogenico", "Decadimento", "Primordiali"],
    "ru": ["Синтезированные", "Космогенный", "Распад", "Изначальный"],
}

# Indexed by stability index 0..5
STABILITY_DESCRIPTIONS: dict[str, list[str]] = {
    "de": ["Stabil", "Leicht radioaktiv", "Etwas radioaktiv", "Deutlich radioaktiv",
           "Hochradioaktiv", "Extrem radioaktiv"],
    "en": ["Stable", "Slightly radioactive", "Somewhat radioactive", "Significantly radioactive",
           "Highly radioactive", "Extremely radioactive"],
    "es": ["Estable", "Ligeramente radiactivo", "Algo radiactivo", "Significativamente radiactivo",
           "Altamente radiactivo", "Extremadamente radiactivo"],
    "fr": ["Stable", "Légèrement radioactif", "Un peu radioactif", "Significativement radioactif",
           "Très radioactif", "Extrêmement radioactif"],
    "it": ["Stabile", "Leggermente radioattivo", "Un po 'radioattivo", "Significativamente radioattivo",
           "Altamente radioattivo", "Estremamente radioattivo"],
    "ru": ["Стабильный", "Слабо радиоактивный", "Немного радиоактивный", "Значительно радиоактивный",
           "Очень радиоактивный", "Чрезвычайно радиоактивный"],
}

STATE_NAMES: dict[str, list[str]] = {
    "de": ["Unbekannt", "Solide", "Flüssigkeit", "Gas"],
    "en": ["Unknown", "Solid", "Liquid", "Gas"],
    "es": ["Desconocido", "Sólido", "Líquida", "Gas"],
    "fr": ["Inconnue", "Solide", "Liquide", "Gaz"],
    "it": ["Sconosciuto", "Solido", "Liquido", "Gas"],
    "ru": ["Неизвестно", "Твердый", "жидкость", "Газ"],
}

# Discovery eras, indexed by nuclide.known_era
ERA_NAMES: dict[str, list[str]] = {
    "de": ["Altertum", "bis 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "nach 2012"],
    "en": ["Antiquity", "to 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "after 2012"],
    "es": ["Antigüedad", "hasta 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "después de 2012"],
    "fr": ["Antiquité", "jusqu'en 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "après 2012"],
    "it": ["Antichità", "fino al 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "dopo il 2012"],
    "ru": ["Древность", "до 1789", "1790-1869", "1870-1923",
           "1924-1945", "1946-2000", "2001-2012", "после 2012"],
}

# ns, μs, ms, s, min, h, d, y
TIME_UNIT_SUFFIXES: dict[str, list[str]] = {
    "de": ["ns", "μs", "ms", "s", "min", "h", "d", "a"],
    "en": ["ns", "μs", "ms", "s", "m", "h", "d", "y"],
    "es": ["ns", "μs", "ms", "s", "min", "h", "días", "años"],
    "fr": ["ns", "μs", "ms", "ans", "min", "h", "j", "años"],
    "it": ["ns", "μs", "ms", "s", "minuti", "ore", "giorni", "anni"],
    "ru": ["нс", "μс", "мс", "с", "м", "час", "д", "год"],
}

THEME_NAMES: dict[str, list[str]] = {
    "de": ["Thema", "Elementkategorien", "Blöcke", "Geschichte", "Unterschiede", "Biologie",
           "Vorkommen", "Stabilität", "Aggregatzustände", "Einfarbig"],
    "en": ["Theme", "Categories", "Blocks", "History", "Differences", "Biology",
           "Occurrence", "Stability", "States", "Monochrome"],
    "es": ["Tema", "Categorías", "Bloques", "Historia", "Diferencias", "Biología",
           "Aparición", "Estabilidad", "Estados", "Monocromo"],
    "fr": ["Thème", "Familles", "Blocs", "Historique", "Différences", "La biologie",
           "Désintégration", "La stabilité", "États", "Monocromo"],
    "it": ["Teme", "Categorie", "Blocchi", "Storia", "Differenze", "Biologia",
           "Presenza", "Stabilità", "Stati", "Monocromo"],
    "ru": ["Тема", "Категории", "блоки", "История", "Отличия", "Биология",
           "Появление", "Стабильность", "Состояния", "Монохромный"],
}


def base_language(lang: str | None) -> str:
    """
    Reduce a language code to its lowercase two-letter base.

    Example:
        >>> base_language("en-GB")
        'en'
        >>> base_language("FR")
        'fr'
    """
    if not lang:
        return "en"
    return lang.replace("_", "-").split("-")[0].lower()


def localize(table: dict[str, list[str]], lang: str | None) -> list[str]:
    """Return the row of a localized table for a language, English if absent."""
    return table.get(base_language(lang), table["en"])


def decimal_separator(lang: str | None) -> str:
    return "," if base_language(lang) in _COMMA_LANGUAGES else "."


def format_fixed(value: float, places: int, lang: str | None = None) -> str:
    """
    Format a number with a fixed count of decimals and the language's separator.

    Example:
        >>> format_fixed(1234.5, 3, "de")
        '1234,500'
    """
    text = f"{value:.{places}f}"
    sep = decimal_separator(lang)
    return text if sep == "." else text.replace(".", sep)


def format_general(value: float) -> str:
    """
    Shortest round-trip text for a number, without a trailing ".0".

    Example:
        >>> format_general(100.0)
        '100'
        >>> format_general(99.985)
        '99.985'
    """
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text
