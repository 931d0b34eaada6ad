"""Building a complete theme from options and colour definition strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .default_theme import default_theme
from .filecolours import (
    ChainedFileColours,
    ExtensionMappings,
    FileColours,
    NoFileColours,
    apply_overlay,
)
from .lsc import LSColors
from .style import Style
from .ui_styles import ColourScale, UiStyles

logger = logging.getLogger(__name__)


class UseColours(Enum):
    """When coloured output should be produced."""

    ALWAYS = "always"
    """Even when output is not going to a terminal."""

    AUTOMATIC = "automatic"
    """Only when output is going to a terminal."""

    NEVER = "never"
    """Never, even on a terminal."""


class SizePrefix(Enum):
    """Decimal and binary magnitude prefixes of a file size."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"


_KILO = frozenset({SizePrefix.KILO, SizePrefix.KIBI})
_MEGA = frozenset({SizePrefix.MEGA, SizePrefix.MEBI})
_GIGA = frozenset({SizePrefix.GIGA, SizePrefix.GIBI})


@dataclass(frozen=True)
class Definitions:
    """The raw LS_COLORS and EXA_COLORS strings, when they are set."""

    ls: Optional[str] = None
    exa: Optional[str] = None

    def _add_glob(self, exts: ExtensionMappings, key: str, style: Style) -> None:
        try:
            exts.add(key, style)
        except ValueError as error:
            logger.warning("Couldn't parse glob pattern %r: %s", key, error)

    def parse_color_vars(self, colours: UiStyles) -> Tuple[ExtensionMappings, bool]:
        """Apply both definition strings to the given styles.

        Keys naming parts of the interface modify ``colours`` in place; all
        other keys are treated as file name globs and returned as mappings.
        The flag returned is False when EXA_COLORS begins with ``reset``,
        meaning the default file type colours should not be used.
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in LSColors(self.ls).pairs():
                if not colours.set_ls(pair):
                    self._add_glob(exts, pair.key, pair.to_style())

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in LSColors(self.exa).pairs():
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    self._add_glob(exts, pair.key, pair.to_style())

        return exts, use_default_filetypes


@dataclass
class Theme:
    """Interface styles together with the colouriser for file names."""

    ui: UiStyles
    exts: FileColours

    def size(self, prefix: Optional[SizePrefix]) -> Style:
        """The style of the number part of a size with this prefix."""
        sizes = self.ui.size
        if prefix is None:
            return sizes.number_byte
        if prefix in _KILO:
            return sizes.number_kilo
        if prefix in _MEGA:
            return sizes.number_mega
        if prefix in _GIGA:
            return sizes.number_giga
        return sizes.number_huge

    def unit(self, prefix: Optional[SizePrefix]) -> Style:
        """The style of the unit part of a size with this prefix."""
        sizes = self.ui.size
        if prefix is None:
            return sizes.unit_byte
        if prefix in _KILO:
            return sizes.unit_kilo
        if prefix in _MEGA:
            return sizes.unit_mega
        if prefix in _GIGA:
            return sizes.unit_giga
        return sizes.unit_huge

    def broken_filename(self) -> Style:
        """The style of the target path of a broken symlink."""
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        """The style of a control character inside a broken symlink's path."""
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def colour_file(self, name: str) -> Style:
        """The style of a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal


@dataclass(frozen=True)
class Options:
    """Everything that decides which theme gets built."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(
        self, isatty: bool, default_colours: Optional[FileColours] = None
    ) -> Theme:
        """Build the theme.

        ``default_colours`` is the built-in file type colouriser, used unless
        EXA_COLORS resets it; user globs take priority over it.
        """
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(ui=UiStyles.plain(), exts=NoFileColours())

        ui = default_theme(self.colour_scale)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        defaults = default_colours if use_default_filetypes else None

        chosen: FileColours
        if len(exts) == 0:
            chosen = defaults if defaults is not None else NoFileColours()
        elif defaults is None:
            chosen = exts
        else:
            chosen = ChainedFileColours(exts, defaults)

        return Theme(ui=ui, exts=chosen)