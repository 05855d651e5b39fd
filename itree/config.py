"""
Configuration parser for the interval tree inspector.

Handles TOML file parsing into plain dataclasses.
"""

import tomllib
import os
import sys
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LayoutConfig:
    """Configuration for UI layout and fonts."""
    interface_font: str = "Sans"
    interface_font_size: int = 12
    text_font: str = "Monospace"
    text_font_size: int = 11


@dataclass
class ColorsConfig:
    """Configuration for UI colors."""
    red_node: str = "#d32f2f"
    black_node: str = "#000000"
    highlight_background: str = "#fff3cd"  # Nodes matched by the last query
    error_text: str = "#dc3545"


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    window_title: str = "Interval Tree Inspector"
    field_start: str = "Start:"
    field_end: str = "End:"
    field_point: str = "Point:"
    button_insert: str = "Insert"
    button_delete: str = "Delete"
    button_overlapping: str = "Overlapping"
    button_containing: str = "Containing"
    button_max_overlap: str = "Max Overlap"
    button_clear: str = "Clear"
    button_quit: str = "Quit"


@dataclass
class PrinterConfig:
    """Configuration for the text dump of the tree."""
    indent: int = 4  # Spaces per tree level


@dataclass
class Config:
    """Main configuration container for the inspector."""

    debug: bool = False
    verify_integrity: bool = False  # Check all tree invariants after each mutation
    seed_intervals: list[tuple[int, int]] = field(default_factory=list)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'itree-inspector' / 'itree-inspector.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        An explicitly given path must exist. Without a path the default
        location is tried, and plain defaults are used when nothing is there.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        # Parse General section
        general = data.get('General', {})
        seed_intervals = []
        for pair in general.get('seed_intervals', []):
            if len(pair) != 2:
                raise ValueError(f"seed_intervals entries must be [start, end] pairs, got {pair!r}")
            seed_intervals.append((int(pair[0]), int(pair[1])))
        print(f"DEBUG: {len(seed_intervals)} seed intervals in {config_path}", file=sys.stderr)

        # Parse Layout section
        layout_data = data.get('Layout', {})
        layout = LayoutConfig(
            interface_font=layout_data.get('interface_font', LayoutConfig.interface_font),
            interface_font_size=layout_data.get('interface_font_size', LayoutConfig.interface_font_size),
            text_font=layout_data.get('text_font', LayoutConfig.text_font),
            text_font_size=layout_data.get('text_font_size', LayoutConfig.text_font_size),
        )

        # Parse Colors section
        colors_data = data.get('Colors', {})
        colors = ColorsConfig(
            red_node=colors_data.get('red_node', ColorsConfig.red_node),
            black_node=colors_data.get('black_node', ColorsConfig.black_node),
            highlight_background=colors_data.get('highlight_background', ColorsConfig.highlight_background),
            error_text=colors_data.get('error_text', ColorsConfig.error_text),
        )

        # Parse Labels section
        labels_data = data.get('Labels', {})
        labels = LabelsConfig(
            window_title=labels_data.get('window_title', LabelsConfig.window_title),
            field_start=labels_data.get('field_start', LabelsConfig.field_start),
            field_end=labels_data.get('field_end', LabelsConfig.field_end),
            field_point=labels_data.get('field_point', LabelsConfig.field_point),
            button_insert=labels_data.get('button_insert', LabelsConfig.button_insert),
            button_delete=labels_data.get('button_delete', LabelsConfig.button_delete),
            button_overlapping=labels_data.get('button_overlapping', LabelsConfig.button_overlapping),
            button_containing=labels_data.get('button_containing', LabelsConfig.button_containing),
            button_max_overlap=labels_data.get('button_max_overlap', LabelsConfig.button_max_overlap),
            button_clear=labels_data.get('button_clear', LabelsConfig.button_clear),
            button_quit=labels_data.get('button_quit', LabelsConfig.button_quit),
        )

        # Parse Printer section
        printer_data = data.get('Printer', {})
        printer = PrinterConfig(
            indent=printer_data.get('indent', PrinterConfig.indent),
        )

        return cls(
            debug=general.get('debug', False),
            verify_integrity=general.get('verify_integrity', False),
            seed_intervals=seed_intervals,
            layout=layout,
            colors=colors,
            labels=labels,
            printer=printer,
        )
