"""The set of styles used to paint every part of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .lsc import Pair
from .style import Style


class ColourScale(Enum):
    """How file sizes are coloured: one colour, or a gradient by magnitude."""

    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass
class FileKinds:
    normal: Style = Style()
    directory: Style = Style()
    symlink: Style = Style()
    pipe: Style = Style()
    block_device: Style = Style()
    char_device: Style = Style()
    socket: Style = Style()
    special: Style = Style()
    executable: Style = Style()


@dataclass
class Permissions:
    user_read: Style = Style()
    user_write: Style = Style()
    user_execute_file: Style = Style()
    user_execute_other: Style = Style()

    group_read: Style = Style()
    group_write: Style = Style()
    group_execute: Style = Style()

    other_read: Style = Style()
    other_write: Style = Style()
    other_execute: Style = Style()

    special_user_file: Style = Style()
    special_other: Style = Style()

    attribute: Style = Style()


@dataclass
class Size:
    major: Style = Style()
    minor: Style = Style()

    number_byte: Style = Style()
    number_kilo: Style = Style()
    number_mega: Style = Style()
    number_giga: Style = Style()
    number_huge: Style = Style()

    unit_byte: Style = Style()
    unit_kilo: Style = Style()
    unit_mega: Style = Style()
    unit_giga: Style = Style()
    unit_huge: Style = Style()


@dataclass
class Users:
    user_you: Style = Style()
    user_someone_else: Style = Style()
    group_yours: Style = Style()
    group_not_yours: Style = Style()


@dataclass
class Links:
    normal: Style = Style()
    multi_link_file: Style = Style()


@dataclass
class Git:
    new: Style = Style()
    modified: Style = Style()
    deleted: Style = Style()
    renamed: Style = Style()
    typechange: Style = Style()
    ignored: Style = Style()
    conflicted: Style = Style()


_Path = Tuple[str, ...]

# Keys understood by LS_COLORS. Codes such as MULTIHARDLINK, DOOR, SETUID,
# SETGID, CAPABILITY, STICKY and MISSING are deliberately not used.
_LS_KEYS: Dict[str, _Path] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": ("broken_symlink",),
}

_EXA_KEYS: Dict[str, _Path] = {
    "ur": ("perms", "user_read"),
    "uw": ("perms", "user_write"),
    "ux": ("perms", "user_execute_file"),
    "ue": ("perms", "user_execute_other"),
    "gr": ("perms", "group_read"),
    "gw": ("perms", "group_write"),
    "gx": ("perms", "group_execute"),
    "tr": ("perms", "other_read"),
    "tw": ("perms", "other_write"),
    "tx": ("perms", "other_execute"),
    "su": ("perms", "special_user_file"),
    "sf": ("perms", "special_other"),
    "xa": ("perms", "attribute"),
    "nb": ("size", "number_byte"),
    "nk": ("size", "number_kilo"),
    "nm": ("size", "number_mega"),
    "ng": ("size", "number_giga"),
    "nh": ("size", "number_huge"),
    "ub": ("size", "unit_byte"),
    "uk": ("size", "unit_kilo"),
    "um": ("size", "unit_mega"),
    "ug": ("size", "unit_giga"),
    "uh": ("size", "unit_huge"),
    "df": ("size", "major"),
    "ds": ("size", "minor"),
    "uu": ("users", "user_you"),
    "un": ("users", "user_someone_else"),
    "gu": ("users", "group_yours"),
    "gn": ("users", "group_not_yours"),
    "lc": ("links", "normal"),
    "lm": ("links", "multi_link_file"),
    "ga": ("git", "new"),
    "gm": ("git", "modified"),
    "gd": ("git", "deleted"),
    "gv": ("git", "renamed"),
    "gt": ("git", "typechange"),
    "xx": ("punctuation",),
    "da": ("date",),
    "in": ("inode",),
    "bl": ("blocks",),
    "hd": ("header",),
    "lp": ("symlink_path",),
    "cc": ("control_char",),
    "bO": ("broken_path_overlay",),
}


@dataclass
class UiStyles:
    """One style for each part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = Style()
    date: Style = Style()
    inode: Style = Style()
    blocks: Style = Style()
    header: Style = Style()
    octal: Style = Style()

    symlink_path: Style = Style()
    control_char: Style = Style()
    broken_symlink: Style = Style()
    broken_path_overlay: Style = Style()

    @classmethod
    def plain(cls) -> UiStyles:
        """A set of styles that paints nothing."""
        return cls()

    def _assign(self, path: _Path, style: Style) -> None:
        *parents, name = path
        target: object = self
        for parent in parents:
            target = getattr(target, parent)
        setattr(target, name, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair using an LS_COLORS key; return whether the key was known."""
        path = _LS_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_exa(self, pair: Pair) -> bool:
        """Apply a pair using an EXA_COLORS-only key; return whether it was known.

        LS_COLORS keys are not considered here, so set_ls should be tried first.
        """
        if pair.key == "sn":
            self.set_number_style(pair.to_style())
            return True
        if pair.key == "sb":
            self.set_unit_style(pair.to_style())
            return True
        path = _EXA_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_number_style(self, style: Style) -> None:
        """Use one style for the number part of every size magnitude."""
        self.size.number_byte = style
        self.size.number_kilo = style
        self.size.number_mega = style
        self.size.number_giga = style
        self.size.number_huge = style

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the unit part of every size magnitude."""
        self.size.unit_byte = style
        self.size.unit_kilo = style
        self.size.unit_mega = style
        self.size.unit_giga = style
        self.size.unit_huge = style