import pytest

from geantcad.preferences import (
    Preferences,
    PreferencesStore,
    default_settings_path,
    default_thread_count,
)
from geantcad.theme import Theme, ThemeManager


def test_defaults_match_restore_defaults():
    prefs = Preferences()
    assert prefs.theme_index == 0
    assert prefs.font_family == "Segoe UI"
    assert prefs.font_size == 13
    assert prefs.antialiasing == 4
    assert prefs.background == "gradient_dark"
    assert prefs.grid_spacing == 10.0
    assert prefs.grid_subdivisions == 5
    assert prefs.num_threads == default_thread_count()


def test_default_thread_count_positive():
    assert default_thread_count() >= 1


def test_default_settings_path_name():
    path = default_settings_path()
    assert path.name == "GeantCAD.conf"
    assert path.is_absolute()


@pytest.mark.parametrize("index,theme", [(0, Theme.DARK), (1, Theme.LIGHT), (2, Theme.SYSTEM)])
def test_selected_theme(index, theme):
    assert Preferences(theme_index=index).selected_theme() is theme


def test_values_are_clamped():
    prefs = Preferences(font_size=100, grid_subdivisions=0, camera_speed=50.0, num_threads=0)
    assert prefs.font_size == 24
    assert prefs.grid_subdivisions == 1
    assert prefs.camera_speed == 10.0
    assert prefs.num_threads == 1


@pytest.mark.parametrize(
    "kwargs", [{"antialiasing": 3}, {"background": "plaid"}, {"theme_index": 7}]
)
def test_invalid_choices_raise(kwargs):
    with pytest.raises(ValueError):
        Preferences(**kwargs)


def test_load_missing_file_gives_defaults(tmp_path):
    store = PreferencesStore(tmp_path / "missing.conf")
    assert store.load() == Preferences()


def test_round_trip(tmp_path):
    store = PreferencesStore(tmp_path / "sub" / "prefs.conf")
    prefs = Preferences(
        theme_index=1,
        font_family="Mono",
        font_size=15,
        animations=False,
        antialiasing=8,
        background="solid_gray",
        show_axes=False,
        camera_speed=2.5,
        grid_enabled=True,
        grid_spacing=25.0,
        snap_to_grid=True,
        geant4_path="/opt/geant4",
        auto_compile=True,
        num_threads=1,
    )
    store.save(prefs)
    assert store.load() == prefs


def test_save_applies_theme_and_notifies(tmp_path):
    store = PreferencesStore(tmp_path / "prefs.conf")
    seen = []
    store.settings_changed.append(seen.append)
    manager = ThemeManager()
    prefs = Preferences(theme_index=1)
    store.save(prefs, manager)
    assert manager.current_theme is Theme.LIGHT
    assert seen == [prefs]


def test_load_ignores_unusable_values(tmp_path):
    path = tmp_path / "prefs.conf"
    path.write_text(
        "[appearance]\nfontSize = big\ntheme = 9\n"
        "[viewport]\nantialiasing = 3\nbackground = plaid\nshowAxes = false\n",
        encoding="utf-8",
    )
    loaded = PreferencesStore(path).load()
    assert loaded.font_size == Preferences().font_size
    assert loaded.theme_index == 0
    assert loaded.antialiasing == 4
    assert loaded.background == "gradient_dark"
    assert loaded.show_axes is False


def test_load_clamps_out_of_range(tmp_path):
    path = tmp_path / "prefs.conf"
    path.write_text("[grid]\nspacing = 5000\nsubdivisions = 50\n", encoding="utf-8")
    loaded = PreferencesStore(path).load()
    assert loaded.grid_spacing == 1000.0
    assert loaded.grid_subdivisions == 10