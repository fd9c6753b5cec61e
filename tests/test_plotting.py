"""Tests for plotting functions."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nuclidetable import get_catalog
from nuclidetable.plotting import THEMES, plot_isotope_chart, plot_periodic_table


@pytest.fixture
def catalog():
    return get_catalog()


class TestPeriodicTable:
    """Tests for the themed long-form periodic table."""

    @pytest.mark.parametrize("theme", sorted(THEMES))
    def test_themes(self, catalog, theme):
        """Test every theme draws one cell per element."""
        fig = plot_periodic_table(catalog, theme=theme)
        ax = fig.axes[0]
        assert len(ax.patches) == 118
        plt.close(fig)

    def test_default_title(self, catalog):
        """Test the localized theme name becomes the title."""
        fig = plot_periodic_table(catalog, theme="stability", lang="de")
        assert fig.axes[0].get_title() == "Stabilität"
        plt.close(fig)

    def test_custom_title(self, catalog):
        """Test an explicit title."""
        fig = plot_periodic_table(catalog, title="Elements")
        assert fig.axes[0].get_title() == "Elements"
        plt.close(fig)

    def test_legend(self, catalog):
        """Test the legend lists the localized categories."""
        fig = plot_periodic_table(catalog, theme="categories", lang="en")
        labels = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
        assert labels[0] == "Alkali metal"
        assert len(labels) == 10
        plt.close(fig)

    def test_history_legend_localized(self, catalog):
        """Test the discovery era legend follows the language."""
        fig = plot_periodic_table(catalog, theme="history", lang="de")
        labels = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
        assert labels[0] == "Altertum"
        assert len(labels) == 8
        plt.close(fig)

    def test_existing_axes(self, catalog):
        """Test drawing into an existing axes."""
        fig, ax = plt.subplots()
        result = plot_periodic_table(catalog, theme="blocks", ax=ax)
        assert result is fig
        plt.close(fig)

    def test_default_catalog(self):
        """Test the shared catalog is used when none is given."""
        fig = plot_periodic_table()
        assert len(fig.axes[0].patches) == 118
        plt.close(fig)

    def test_invalid_theme(self, catalog):
        """Test an unknown theme raises ValueError."""
        with pytest.raises(ValueError, match="Unknown theme"):
            plot_periodic_table(catalog, theme="rainbow")


class TestIsotopeChart:
    """Tests for the N-Z isotope chart."""

    def test_stability(self, catalog):
        """Test coloring by stability."""
        fig = plot_isotope_chart(catalog, color_by="stability")
        ax = fig.axes[0]
        assert ax.get_xlabel() == "Neutron Number N"
        assert ax.get_ylabel() == "Proton Number Z"
        points = sum(len(c.get_offsets()) for c in ax.collections)
        assert points == len(list(catalog.get_isotopes()))
        plt.close(fig)

    def test_occurrence(self, catalog):
        """Test coloring by occurrence with localized labels."""
        fig = plot_isotope_chart(catalog, color_by="occurrence", lang="fr")
        labels = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
        assert "Primordial" in labels
        assert "Synthétique" in labels
        plt.close(fig)

    def test_invalid_color_by(self, catalog):
        """Test that an invalid color_by raises ValueError."""
        with pytest.raises(ValueError):
            plot_isotope_chart(catalog, color_by="mass")
