# geantcad

These are the parts of a Geant4 detector-geometry editor that do not need a GUI toolkit. The package is a library. It has no command-line program.

## Modules

### `geantcad.theme`

This module holds the dark and light colour themes.

- `Theme` is an enum with the members `DARK`, `LIGHT` and `SYSTEM`.
- `ThemeColors` is a frozen dataclass of named colours, such as `background`, `text`, `accent`, `border`, `success` and `error`.
- `get_colors(theme)` returns a theme's colour set. Any theme that is not `DARK` uses the light colours.
- `get_palette(theme)` returns a dictionary `{group: {role: colour}}` for the groups `active`, `inactive` and `disabled`. Under the dark theme, text roles in the `disabled` group are greyed out.
- `get_style_sheet(theme)` returns the style sheet text for the theme.
- `ThemeManager` keeps track of the current theme.
  - `apply_theme(theme)` sets `current_theme`, `style` (`"Fusion"`), `palette` and `style_sheet`, then calls every callable in `listeners` with the manager.
  - `current_colors()` returns the colours of the current theme.

### `geantcad.measurement`

This module takes distance, angle and point measurements from picked 3D points.

- `calculate_distance(p1, p2)` returns the distance between two points.
- `calculate_angle(p1, p2, p3)` returns the angle in degrees at the vertex `p2`.
- `MeasureMode` lists the measurement kinds. Only `DISTANCE` (2 points), `ANGLE` (3 points) and `POINT_POSITION` (1 point) complete a measurement.
- `Measurement` is a dataclass of one completed measurement. It has the fields `id`, `mode`, `points`, `value`, `unit`, `description` and `visible`. `list_text()` returns the text shown for it in a list.
- `MeasurementTool` does the following:
  - `set_mode(mode)` switches to a mode. Choosing the active mode again switches the tool back to `NONE`.
  - `add_point(point)` adds a picked point. It returns the `Measurement` that the point completes, or `None`.
  - `cancel_current_measurement()` drops the pending points.
  - `remove_measurement(id)` removes one measurement.
  - `clear_all_measurements()` removes all measurements.
  - `toggle_measurement_visibility(id)` shows a hidden measurement or hides a shown one.
  - `list_entries()` returns `(id, text)` pairs.
  - The attributes `instruction` and `status` hold the user-facing hints.
  - The callback lists `mode_changed`, `measurement_added`, `measurement_removed` and `measurements_cleared` are called when the matching event happens.

### `geantcad.shortcuts`

This module holds the keyboard and mouse shortcut reference.

- `Shortcut` is a frozen dataclass with the fields `category`, `action`, `shortcut` and `description`. `matches(text)` checks the text against every field, ignoring case.
- `default_shortcuts()` returns the full reference, in display order.
- `filter_shortcuts(shortcuts, text)` keeps only the entries that match. An empty text keeps them all.

### `geantcad.preferences`

This module holds the application preferences.

- `Preferences` is a dataclass of the appearance, viewport, grid and Geant4 settings, with their defaults.
  - Numeric values are clamped to their allowed ranges.
  - An unknown theme index, anti-aliasing level (allowed: 0, 2, 4, 8) or background raises `ValueError`.
  - `selected_theme()` returns the chosen `Theme`.
- `PreferencesStore(path=None)` reads and writes an INI-style file.
  - When no path is given, it uses `default_settings_path()`, which is a per-user config location found through `platformdirs`.
  - `load()` returns the stored preferences. Missing or unusable values keep their defaults.
  - `save(preferences, theme_manager=None)` writes the file. If a `ThemeManager` is given, it also applies the chosen theme to it. Then it calls each listener in `settings_changed`.
- `default_thread_count()` returns the machine's CPU count. This is the default for the build threads setting.

### `geantcad.material_catalog`

This module holds the data behind the material editor form.

- `NIST_MATERIALS` is the tuple of NIST material names offered.
- `ELEMENTS` is a tuple of `ElementInfo` records, each with `name`, `symbol`, `z` and `a`. `label()` returns text such as `"Carbon (C) - Z=6"`.
- `find_element(symbol)` looks up an element. It raises `KeyError` if the symbol is unknown.
- `nist_material_info(name)` returns a short note about a NIST material, or `""`.
- `color_style(red, green, blue)` returns the style that paints a colour swatch. It raises `ValueError` if a channel is outside 0–255.
- `validate_custom_material(name, is_compound, element_count)` returns the trimmed name. It raises `ValueError` with a user-facing message if the name is empty, or if a compound has no elements.
- The module also holds the form's default values and ranges as constants, such as `DEFAULT_DENSITY` and `DENSITY_RANGE`.

## What the package does not do

- It draws no windows, dialogs, widgets or 3D viewport. Measurements are not rendered, and applying a theme only records the style, palette and style sheet on the `ThemeManager`.
- It has no scene graph and no volume or material objects.
- It does not build a material from the editor's input or produce Geant4 code from one.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Measure the distance between two points:

```python
from geantcad.measurement import MeasurementTool, MeasureMode

tool = MeasurementTool()
tool.set_mode(MeasureMode.DISTANCE)
tool.add_point((0.0, 0.0, 0.0))
measurement = tool.add_point((3.0, 4.0, 0.0))
print(measurement.description)   # Distance: 5.00 mm
```

Search the shortcut reference:

```python
from geantcad.shortcuts import default_shortcuts, filter_shortcuts

for shortcut in filter_shortcuts(default_shortcuts(), "undo"):
    print(shortcut.shortcut, shortcut.action)   # Ctrl+Z Undo
```

Apply a theme:

```python
from geantcad.theme import Theme, ThemeManager

manager = ThemeManager()
manager.apply_theme(Theme.LIGHT)
print(manager.current_colors().accent)   # #0066cc
```

Save and load preferences:

```python
from geantcad.preferences import Preferences, PreferencesStore

store = PreferencesStore("settings.conf")
store.save(Preferences(font_size=16))
print(store.load().font_size)   # 16
```