"""Application colour themes: colour sets, palettes and style sheets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

BASE_STYLE = "Fusion"

PALETTE_GROUPS = ("active", "inactive", "disabled")

Palette = Dict[str, Dict[str, str]]

_Rule = Tuple[str, Dict[str, str]]
_Entry = Union[str, _Rule]


class Theme(IntEnum):
    """Available application themes."""

    DARK = 0
    LIGHT = 1
    SYSTEM = 2  # follows the system preference


@dataclass(frozen=True)
class ThemeColors:
    """Named colours of a theme, for use by custom widgets."""

    # Backgrounds
    background: str
    background_alt: str
    background_hover: str
    background_selected: str
    # Foregrounds
    text: str
    text_secondary: str
    text_disabled: str
    # Accents
    accent: str
    accent_hover: str
    accent_pressed: str
    # Borders
    border: str
    border_light: str
    border_focus: str
    # Status colours
    success: str
    warning: str
    error: str
    info: str
    # Special
    shadow: str
    highlight: str


_DARK_COLORS = ThemeColors(
    background="#1e1e1e",
    background_alt="#252526",
    background_hover="#2a2d2e",
    background_selected="#094771",
    text="#d4d4d4",
    text_secondary="#858585",
    text_disabled="#5a5a5a",
    accent="#0078d4",
    accent_hover="#1a8cff",
    accent_pressed="#005a9e",
    border="#3c3c3c",
    border_light="#454545",
    border_focus="#0078d4",
    success="#4ec9b0",
    warning="#dcdcaa",
    error="#f14c4c",
    info="#3794ff",
    shadow="#000000",
    highlight="#264f78",
)

_LIGHT_COLORS = ThemeColors(
    background="#f3f3f3",
    background_alt="#ffffff",
    background_hover="#e8e8e8",
    background_selected="#cce5ff",
    text="#1e1e1e",
    text_secondary="#6e6e6e",
    text_disabled="#a0a0a0",
    accent="#0066cc",
    accent_hover="#0078d4",
    accent_pressed="#004c99",
    border="#d4d4d4",
    border_light="#e0e0e0",
    border_focus="#0066cc",
    success="#28a745",
    warning="#ffc107",
    error="#dc3545",
    info="#17a2b8",
    shadow="#00000020",
    highlight="#e6f2ff",
)


def get_colors(theme: Theme | int) -> ThemeColors:
    """Return the colour set of a theme; every non-dark theme uses the light colours."""
    return _DARK_COLORS if Theme(theme) is Theme.DARK else _LIGHT_COLORS


def get_palette(theme: Theme | int) -> Palette:
    """Return the palette of a theme as ``{group: {role: colour}}``."""
    theme = Theme(theme)
    colors = get_colors(theme)
    dark = theme is Theme.DARK

    roles = {
        "Window": colors.background,
        "WindowText": colors.text,
        "Base": colors.background_alt,
        "AlternateBase": colors.background,
        "ToolTipBase": "#3d3d3d" if dark else "#ffffff",
        "ToolTipText": colors.text,
        "Text": colors.text,
        "Button": colors.background,
        "ButtonText": colors.text,
        "BrightText": "#ffffff" if dark else "#000000",
        "Link": colors.accent,
        "Highlight": colors.accent,
        "HighlightedText": "#ffffff",
    }
    palette = {group: dict(roles) for group in PALETTE_GROUPS}

    if dark:
        palette["disabled"].update(
            WindowText=colors.text_disabled,
            Text=colors.text_disabled,
            ButtonText=colors.text_disabled,
        )
    return palette


def get_style_sheet(theme: Theme | int) -> str:
    """Return the style sheet of a theme; every non-dark theme uses the light sheet."""
    return _DARK_STYLE_SHEET if Theme(theme) is Theme.DARK else _LIGHT_STYLE_SHEET


class ThemeManager:
    """Keeps track of the applied theme and the look derived from it."""

    def __init__(self, theme: Theme | int = Theme.DARK) -> None:
        self.current_theme = Theme(theme)
        self.style: Optional[str] = None
        self.palette: Optional[Palette] = None
        self.style_sheet: Optional[str] = None
        self.listeners: List[Callable[["ThemeManager"], None]] = []

    def apply_theme(self, theme: Theme | int) -> None:
        """Make ``theme`` current and derive style, palette and style sheet from it."""
        self.current_theme = Theme(theme)
        self.style = BASE_STYLE
        self.palette = get_palette(self.current_theme)
        self.style_sheet = get_style_sheet(self.current_theme)
        for listener in self.listeners:
            listener(self)

    def current_colors(self) -> ThemeColors:
        """Return the colour set of the current theme."""
        return get_colors(self.current_theme)


# --- style sheet construction ------------------------------------------------

_FONT_STACK = '"Segoe UI", "SF Pro Display", -apple-system, sans-serif'
_PANEL = "#2d2d2d"
_PANEL_HOVER = "#3a3d3e"
_WHITE = "#ffffff"


def _rule(selector: str, **properties: str) -> _Rule:
    """Build a rule; underscores in property names become hyphens."""
    return selector, {name.replace("_", "-"): value for name, value in properties.items()}


def _section(title: str) -> str:
    return f"/* === {title} === */"


def _solid(color: str, width: str = "1px") -> str:
    return f"{width} solid {color}"


def _render(entries: Iterable[_Entry]) -> str:
    blocks = []
    for entry in entries:
        if isinstance(entry, str):
            blocks.append(entry + "\n")
            continue
        selector, properties = entry
        body = "".join(f"    {name}: {value};\n" for name, value in properties.items())
        blocks.append(f"{selector} {{\n{body}}}\n")
    return "\n" + "\n".join(blocks) + "\n"


def _scroll_bar_rules(c: ThemeColors) -> Iterator[_Rule]:
    for orientation, extent in (("vertical", "width"), ("horizontal", "height")):
        yield _rule(
            f"QScrollBar:{orientation}",
            background_color=c.background,
            **{extent: "12px"},
            margin="0",
            border_radius="6px",
        )
        length = "min-height" if orientation == "vertical" else "min-width"
        yield (
            f"QScrollBar::handle:{orientation}",
            {
                "background-color": c.text_disabled,
                length: "30px",
                "border-radius": "5px",
                "margin": "2px",
            },
        )
        yield _rule(f"QScrollBar::handle:{orientation}:hover", background_color="#787878")
        size = "height" if orientation == "vertical" else "width"
        yield (
            f"QScrollBar::add-line:{orientation}, QScrollBar::sub-line:{orientation}",
            {size: "0"},
        )


def _dark_entries(c: ThemeColors) -> Iterator[_Entry]:
    edge = _solid(c.border)
    edge_light = _solid(c.border_light)
    spin_parts = ("QSpinBox", "QDoubleSpinBox")

    yield _section("GEANTCAD DARK THEME")
    yield "/* Global */"
    yield _rule("*", font_family=_FONT_STACK, font_size="13px")
    yield _rule("QMainWindow", background_color=c.background)

    yield _section("MENUS")
    yield _rule("QMenuBar", background_color=_PANEL, color=c.text, border_bottom=edge, padding="2px 0")
    yield _rule("QMenuBar::item", padding="5px 10px", border_radius="4px", margin="2px")
    yield _rule("QMenuBar::item:selected", background_color=_PANEL_HOVER)
    yield _rule("QMenuBar::item:pressed", background_color=c.background_selected)
    yield _rule("QMenu", background_color=_PANEL, border=edge_light, border_radius="6px", padding="4px")
    yield _rule("QMenu::item", padding="6px 30px 6px 20px", border_radius="4px", margin="2px 4px")
    yield _rule("QMenu::item:selected", background_color=c.background_selected)
    yield _rule("QMenu::separator", height="1px", background_color=c.border, margin="4px 10px")
    yield _rule("QMenu::indicator", width="16px", height="16px", margin_left="4px")

    yield _section("TOOLBAR")
    yield _rule(
        "QToolBar",
        background_color=_PANEL,
        border="none",
        border_bottom=edge,
        spacing="4px",
        padding="4px",
    )
    yield _rule("QToolBar::separator", width="1px", background_color=c.border_light, margin="4px 8px")
    yield _rule(
        "QToolButton",
        background_color="transparent",
        border=_solid("transparent"),
        border_radius="4px",
        padding="6px",
        margin="1px",
    )
    yield _rule("QToolButton:hover", background_color=_PANEL_HOVER, border_color=c.border_light)
    yield _rule(
        "QToolButton:pressed, QToolButton:checked",
        background_color=c.background_selected,
        border_color=c.accent,
    )

    yield _section("DOCK WIDGETS")
    yield _rule(
        "QDockWidget",
        color=c.text,
        titlebar_close_icon="url(close.png)",
        titlebar_normal_icon="url(float.png)",
    )
    yield _rule(
        "QDockWidget::title",
        background_color=_PANEL,
        border=edge,
        border_bottom="none",
        padding="8px 10px",
        text_align="left",
        font_weight="600",
    )
    dock_buttons = ("QDockWidget::close-button", "QDockWidget::float-button")
    yield _rule(", ".join(dock_buttons), background_color="transparent", border="none", padding="2px")
    yield _rule(
        ", ".join(f"{b}:hover" for b in dock_buttons),
        background_color=_PANEL_HOVER,
        border_radius="3px",
    )

    yield _section("GROUP BOX")
    yield _rule(
        "QGroupBox",
        font_weight="600",
        border=edge,
        border_radius="6px",
        margin_top="12px",
        padding_top="10px",
        background_color=c.background_alt,
    )
    yield _rule(
        "QGroupBox::title",
        subcontrol_origin="margin",
        subcontrol_position="top left",
        padding="2px 8px",
        background_color=_PANEL,
        border=edge,
        border_radius="4px",
        left="10px",
    )

    yield _section("BUTTONS")
    yield _rule(
        "QPushButton",
        background_color=c.border,
        color=c.text,
        border=edge_light,
        border_radius="4px",
        padding="6px 16px",
        min_width="70px",
        font_weight="500",
    )
    yield _rule("QPushButton:hover", background_color=c.border_light, border_color=c.text_disabled)
    yield _rule("QPushButton:pressed", background_color=c.background_selected, border_color=c.accent)
    yield _rule(
        "QPushButton:disabled",
        background_color=_PANEL,
        color=c.text_disabled,
        border_color=c.border,
    )
    yield _rule("QPushButton:default", background_color=c.accent, border_color=c.accent, color=_WHITE)
    yield _rule("QPushButton:default:hover", background_color=c.accent_hover)

    yield _section("INPUT FIELDS")
    inputs = ("QLineEdit", "QTextEdit", "QPlainTextEdit") + spin_parts
    yield _rule(
        ", ".join(inputs),
        background_color=c.background,
        color=c.text,
        border=edge,
        border_radius="4px",
        padding="5px 8px",
        selection_background_color=c.background_selected,
    )
    yield _rule(", ".join(f"{w}:focus" for w in inputs), border_color=c.accent)
    yield _rule(
        ", ".join(f"{w}:disabled" for w in ("QLineEdit",) + spin_parts),
        background_color=c.background_alt,
        color=c.text_disabled,
    )
    yield _rule(
        ", ".join(f"{w}::up-button" for w in spin_parts),
        subcontrol_origin="border",
        subcontrol_position="top right",
        border_left=edge,
        border_bottom=edge,
        border_top_right_radius="3px",
        width="18px",
        background_color=c.border,
    )
    yield _rule(
        ", ".join(f"{w}::down-button" for w in spin_parts),
        subcontrol_origin="border",
        subcontrol_position="bottom right",
        border_left=edge,
        border_bottom_right_radius="3px",
        width="18px",
        background_color=c.border,
    )
    yield _rule(
        ", ".join(f"{w}::{b}-button:hover" for b in ("up", "down") for w in spin_parts),
        background_color=c.border_light,
    )

    yield _section("COMBO BOX")
    yield _rule(
        "QComboBox",
        background_color=c.background,
        color=c.text,
        border=edge,
        border_radius="4px",
        padding="5px 8px",
        min_width="100px",
    )
    yield _rule("QComboBox:hover", border_color=c.border_light)
    yield _rule("QComboBox:focus", border_color=c.accent)
    yield _rule(
        "QComboBox::drop-down",
        subcontrol_origin="padding",
        subcontrol_position="center right",
        width="20px",
        border="none",
    )
    yield _rule(
        "QComboBox::down-arrow",
        image="none",
        border_left=_solid("transparent", "4px"),
        border_right=_solid("transparent", "4px"),
        border_top=_solid(c.text_secondary, "5px"),
        margin_right="8px",
    )
    yield _rule(
        "QComboBox QAbstractItemView",
        background_color=_PANEL,
        border=edge_light,
        border_radius="4px",
        selection_background_color=c.background_selected,
        outline="none",
    )
    yield _rule("QComboBox QAbstractItemView::item", padding="5px 10px", min_height="24px")

    yield _section("CHECK BOX")
    yield _rule("QCheckBox", color=c.text, spacing="8px")
    yield _rule(
        "QCheckBox::indicator",
        width="18px",
        height="18px",
        border=_solid(c.text_disabled),
        border_radius="3px",
        background_color=c.background,
    )
    yield _rule("QCheckBox::indicator:hover", border_color=c.accent)
    yield _rule(
        "QCheckBox::indicator:checked",
        background_color=c.accent,
        border_color=c.accent,
        image="url(check.png)",
    )
    yield _rule("QCheckBox::indicator:disabled", background_color=_PANEL, border_color=c.border)

    yield _section("TREE VIEW / LIST VIEW")
    yield _rule(
        "QTreeView, QListView, QTableView",
        background_color=c.background,
        alternate_background_color=c.background_alt,
        color=c.text,
        border=edge,
        border_radius="4px",
        outline="none",
    )
    items = ("QTreeView::item", "QListView::item")
    yield _rule(", ".join(items), padding="4px 8px", border_radius="3px", margin="1px 2px")
    yield _rule(", ".join(f"{i}:hover" for i in items), background_color=c.background_hover)
    yield _rule(", ".join(f"{i}:selected" for i in items), background_color=c.background_selected)
    for state, image in (
        ("has-siblings:!adjoins-item", "vline.png"),
        ("has-siblings:adjoins-item", "branch-more.png"),
        ("!has-children:!has-siblings:adjoins-item", "branch-end.png"),
    ):
        yield _rule(f"QTreeView::branch:{state}", border_image=f"url({image}) 0")
    yield _rule(
        "QHeaderView::section",
        background_color=_PANEL,
        color=c.text,
        padding="6px 10px",
        border="none",
        border_right=edge,
        border_bottom=edge,
        font_weight="600",
    )
    yield _rule("QHeaderView::section:hover", background_color=_PANEL_HOVER)

    yield _section("SCROLL BARS")
    yield from _scroll_bar_rules(c)

    yield _section("TAB WIDGET")
    yield _rule("QTabWidget::pane", border=edge, border_radius="4px", background_color=c.background_alt)
    yield _rule(
        "QTabBar::tab",
        background_color=_PANEL,
        color=c.text_secondary,
        padding="8px 16px",
        border=edge,
        border_bottom="none",
        border_top_left_radius="4px",
        border_top_right_radius="4px",
        margin_right="2px",
    )
    yield _rule("QTabBar::tab:hover", background_color=_PANEL_HOVER, color=c.text)
    yield _rule(
        "QTabBar::tab:selected",
        background_color=c.background_alt,
        color=c.text,
        border_bottom=_solid(c.accent, "2px"),
    )

    yield _section("SLIDER")
    yield _rule(
        "QSlider::groove:horizontal",
        border=edge,
        height="6px",
        background_color=c.background,
        border_radius="3px",
    )
    yield _rule(
        "QSlider::handle:horizontal",
        background_color=c.accent,
        border="none",
        width="16px",
        height="16px",
        margin="-5px 0",
        border_radius="8px",
    )
    yield _rule("QSlider::handle:horizontal:hover", background_color=c.accent_hover)
    yield _rule("QSlider::sub-page:horizontal", background_color=c.accent, border_radius="3px")

    yield _section("PROGRESS BAR")
    yield _rule(
        "QProgressBar",
        background_color=c.background,
        border=edge,
        border_radius="4px",
        height="8px",
        text_align="center",
    )
    yield _rule("QProgressBar::chunk", background_color=c.accent, border_radius="3px")

    yield _section("TOOLTIP")
    yield _rule(
        "QToolTip",
        background_color="#3d3d3d",
        color=c.text,
        border=_solid(c.text_disabled),
        border_radius="4px",
        padding="6px 10px",
    )

    yield _section("STATUS BAR")
    yield _rule("QStatusBar", background_color="#007acc", color=_WHITE, border_top=_solid("#006bb3"))
    yield _rule("QStatusBar::item", border="none")

    yield _section("SPLITTER")
    yield _rule("QSplitter::handle", background_color=c.border)
    yield _rule("QSplitter::handle:horizontal", width="2px")
    yield _rule("QSplitter::handle:vertical", height="2px")
    yield _rule("QSplitter::handle:hover", background_color=c.accent)

    yield _section("DIALOG")
    yield _rule("QDialog", background_color=_PANEL)
    yield _rule("QDialogButtonBox", button_layout="2")

    yield _section("LABEL")
    yield _rule("QLabel", color=c.text)
    yield _rule("QLabel:disabled", color=c.text_disabled)


def _light_entries(c: ThemeColors) -> Iterator[_Entry]:
    edge = _solid(c.border)

    yield _section("GEANTCAD LIGHT THEME")
    yield _rule("*", font_family=_FONT_STACK, font_size="13px")
    yield _rule("QMainWindow", background_color=c.background)
    yield _rule("QMenuBar", background_color=c.background_alt, border_bottom=edge)
    yield _rule("QMenuBar::item:selected", background_color=c.background_hover)
    yield _rule("QMenu", background_color=c.background_alt, border=edge)
    yield _rule("QMenu::item:selected", background_color=c.background_selected)
    yield _rule("QToolBar", background_color=c.background_alt, border_bottom=edge)
    yield _rule("QToolButton:hover", background_color=c.background_hover)
    yield _rule("QToolButton:pressed, QToolButton:checked", background_color=c.background_selected)
    yield _rule("QGroupBox", border=edge, background_color=c.background_alt)
    yield _rule("QPushButton", background_color=c.background_hover, border=edge)
    yield _rule("QPushButton:hover", background_color=c.border)
    yield _rule("QPushButton:default", background_color=c.accent, color=_WHITE)
    yield _rule(
        "QLineEdit, QTextEdit, QSpinBox, QDoubleSpinBox, QComboBox",
        background_color=c.background_alt,
        border=edge,
    )
    yield _rule("QTreeView, QListView", background_color=c.background_alt, border=edge)
    yield _rule("QTreeView::item:selected", background_color=c.background_selected)
    yield _rule("QStatusBar", background_color=c.accent, color=_WHITE)


_DARK_STYLE_SHEET = _render(_dark_entries(_DARK_COLORS))
_LIGHT_STYLE_SHEET = _render(_light_entries(_LIGHT_COLORS))