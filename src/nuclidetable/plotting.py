"""
Plotting utilities for the nuclide catalog.

All functions return matplotlib Figure objects for further customization.

Example:
    >>> from nuclidetable import get_catalog
    >>> from nuclidetable.plotting import plot_periodic_table, plot_isotope_chart
    >>>
    >>> fig = plot_periodic_table(get_catalog(), theme="stability", lang="de")
    >>> fig.savefig('stability.png')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Literal, Optional

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Patch, Rectangle

from .catalog import Catalog, get_catalog
from .terms import (
    CATEGORY_NAMES,
    ERA_NAMES,
    LIFE_DESCRIPTIONS,
    OCCURRENCE_NAMES,
    STABILITY_DESCRIPTIONS,
    STATE_NAMES,
    THEME_NAMES,
    localize,
)

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from .nuclide import Nuclide

__all__ = [
    "THEMES",
    "plot_periodic_table",
    "plot_isotope_chart",
]

# Set default font for better Unicode support
plt.rcParams["font.family"] = "DejaVu Sans"

_BLOCKS = "spdf"

# theme -> (index into THEME_NAMES, value of a nuclide, legend labels for a language)
THEMES: dict[str, tuple[int, Callable[["Nuclide"], int], Callable[[str | None], list[str]]]] = {
    "categories": (1, lambda n: n.category_index, lambda lang: localize(CATEGORY_NAMES, lang)),
    "blocks": (2, lambda n: _BLOCKS.index(n.block), lambda lang: list(_BLOCKS)),
    "history": (3, lambda n: n.known_index, lambda lang: localize(ERA_NAMES, lang)),
    "biology": (5, lambda n: n.life_index, lambda lang: localize(LIFE_DESCRIPTIONS, lang)),
    "occurrence": (6, lambda n: n.occurrence_index, lambda lang: localize(OCCURRENCE_NAMES, lang)),
    "stability": (7, lambda n: n.stability_index, lambda lang: localize(STABILITY_DESCRIPTIONS, lang)),
    "states": (8, lambda n: n.state_at_0c_index, lambda lang: localize(STATE_NAMES, lang)),
}


def _palette(cmap: str, count: int) -> np.ndarray:
    return matplotlib.colormaps[cmap](np.linspace(0.0, 1.0, count))


def plot_periodic_table(
    catalog: Optional[Catalog] = None,
    theme: Literal[
        "categories", "blocks", "history", "biology", "occurrence", "stability", "states"
    ] = "categories",
    lang: str | None = None,
    cmap: str = "tab10",
    figsize: tuple[float, float] = (16, 5),
    title: str | None = None,
    ax: Optional["Axes"] = None,
) -> "Figure":
    """
    Draw the 32-column long-form periodic table colored by a theme.

    Args:
        catalog: Catalog to draw. Defaults to the shared catalog.
        theme: Property to color by. Options:
            - "categories": Element category (default)
            - "blocks": s, p, d or f block
            - "history": Era of discovery
            - "biology": Biological role
            - "occurrence": Natural origin
            - "stability": Radioactivity of the longest-lived isotope
            - "states": Phase at 0 °C
        lang: Language for the title and legend.
        cmap: Matplotlib colormap name.
        figsize: Figure size in inches.
        title: Plot title. Defaults to the localized theme name.
        ax: Optional existing axes to plot on.

    Returns:
        matplotlib Figure object.

    Raises:
        ValueError: If the theme is unknown.

    Example:
        >>> fig = plot_periodic_table(theme="blocks")
        >>> fig.savefig('blocks.png', dpi=150)
    """
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme}")
    catalog = catalog or get_catalog()
    theme_ix, value_of, labels_for = THEMES[theme]
    labels = labels_for(lang)
    colors = _palette(cmap, len(labels))

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    for nuclide in catalog.get_elements():
        x = nuclide.long_column - 1
        y = -nuclide.period
        ax.add_patch(Rectangle(
            (x, y), 0.94, 0.94,
            facecolor=colors[value_of(nuclide)],
            edgecolor="white",
            linewidth=0.5,
        ))
        ax.text(x + 0.47, y + 0.42, nuclide.symbol, ha="center", va="center",
                fontsize=8, fontweight="bold")
        ax.text(x + 0.08, y + 0.82, str(nuclide.z), ha="left", va="center", fontsize=4.5)

    handles = [Patch(facecolor=colors[ix], label=label) for ix, label in enumerate(labels)]
    ax.legend(handles=handles, loc="upper center", bbox_to_anchor=(0.5, -0.02),
              ncol=min(len(handles), 5), fontsize=8, frameon=False)

    ax.set_xlim(0, 32)
    ax.set_ylim(-7.1, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(title or localize(THEME_NAMES, lang)[theme_ix])

    plt.tight_layout()
    return fig


def plot_isotope_chart(
    catalog: Optional[Catalog] = None,
    color_by: Literal["stability", "occurrence"] = "stability",
    lang: str | None = None,
    cmap: str = "viridis",
    figsize: tuple[float, float] = (12, 9),
    title: str | None = None,
    marker_size: float = 10,
    ax: Optional["Axes"] = None,
) -> "Figure":
    """
    Plot every catalogued isotope on the N-Z plane.

    Args:
        catalog: Catalog to draw. Defaults to the shared catalog.
        color_by: "stability" (0 stable .. 5 extremely radioactive) or
            "occurrence" (synthetic, cosmogenic, decay, primordial).
        lang: Language for the legend.
        cmap: Matplotlib colormap name.
        figsize: Figure size in inches.
        title: Plot title. Auto-generated if None.
        marker_size: Size of the markers.
        ax: Optional existing axes to plot on.

    Returns:
        matplotlib Figure object.

    Raises:
        ValueError: If ``color_by`` is unknown.
    """
    catalog = catalog or get_catalog()
    isotopes = list(catalog.get_isotopes())

    if color_by == "stability":
        values = np.array([iso.stability_index for iso in isotopes])
        labels = localize(STABILITY_DESCRIPTIONS, lang)
        default_title = "Isotopes by Stability"
    elif color_by == "occurrence":
        values = np.array([iso.occurrence_index for iso in isotopes])
        labels = localize(OCCURRENCE_NAMES, lang)
        default_title = "Isotopes by Natural Occurrence"
    else:
        raise ValueError(f"Unknown color_by: {color_by}")

    n = np.array([iso.n for iso in isotopes])
    z = np.array([iso.z for iso in isotopes])
    colors = _palette(cmap, len(labels))

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    for ix, label in enumerate(labels):
        mask = values == ix
        if not mask.any():
            continue
        ax.scatter(
            n[mask], z[mask],
            s=marker_size,
            marker="s",
            color=colors[ix],
            edgecolors="none",
            label=label,
        )

    ax.set_xlabel("Neutron Number N")
    ax.set_ylabel("Proton Number Z")
    ax.set_title(title or default_title)
    ax.legend(loc="upper left", fontsize=8)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
