"""The built-in colourful theme."""

from __future__ import annotations

from .style import Colour, Fixed, Style
from .ui_styles import (
    ColourScale,
    FileKinds,
    Git,
    Links,
    Permissions,
    Size,
    UiStyles,
    Users,
)


def _fixed_size() -> Size:
    return Size(
        major=Colour.GREEN.bold(),
        minor=Colour.GREEN.normal(),
        number_byte=Colour.GREEN.bold(),
        number_kilo=Colour.GREEN.bold(),
        number_mega=Colour.GREEN.bold(),
        number_giga=Colour.GREEN.bold(),
        number_huge=Colour.GREEN.bold(),
        unit_byte=Colour.GREEN.normal(),
        unit_kilo=Colour.GREEN.normal(),
        unit_mega=Colour.GREEN.normal(),
        unit_giga=Colour.GREEN.normal(),
        unit_huge=Colour.GREEN.normal(),
    )


def _gradient_size() -> Size:
    return Size(
        major=Colour.GREEN.bold(),
        minor=Colour.GREEN.normal(),
        number_byte=Fixed(118).normal(),
        number_kilo=Fixed(190).normal(),
        number_mega=Fixed(226).normal(),
        number_giga=Fixed(220).normal(),
        number_huge=Fixed(214).normal(),
        unit_byte=Colour.GREEN.normal(),
        unit_kilo=Colour.GREEN.normal(),
        unit_mega=Colour.GREEN.normal(),
        unit_giga=Colour.GREEN.normal(),
        unit_huge=Colour.GREEN.normal(),
    )


def colourful_size(scale: ColourScale) -> Size:
    """The size styles of the default theme for the given colour scale."""
    if scale is ColourScale.GRADIENT:
        return _gradient_size()
    if scale is ColourScale.FIXED:
        return _fixed_size()
    raise ValueError(f"unknown colour scale: {scale!r}")


def default_theme(scale: ColourScale) -> UiStyles:
    """The default colourful set of interface styles."""
    return UiStyles(
        colourful=True,
        filekinds=FileKinds(
            normal=Style(),
            directory=Colour.BLUE.bold(),
            symlink=Colour.CYAN.normal(),
            pipe=Colour.YELLOW.normal(),
            block_device=Colour.YELLOW.bold(),
            char_device=Colour.YELLOW.bold(),
            socket=Colour.RED.bold(),
            special=Colour.YELLOW.normal(),
            executable=Colour.GREEN.bold(),
        ),
        perms=Permissions(
            user_read=Colour.YELLOW.bold(),
            user_write=Colour.RED.bold(),
            user_execute_file=Colour.GREEN.bold().underline(),
            user_execute_other=Colour.GREEN.bold(),
            group_read=Colour.YELLOW.normal(),
            group_write=Colour.RED.normal(),
            group_execute=Colour.GREEN.normal(),
            other_read=Colour.YELLOW.normal(),
            other_write=Colour.RED.normal(),
            other_execute=Colour.GREEN.normal(),
            special_user_file=Colour.PURPLE.normal(),
            special_other=Colour.PURPLE.normal(),
            attribute=Style(),
        ),
        size=colourful_size(scale),
        users=Users(
            user_you=Colour.YELLOW.bold(),
            user_someone_else=Style(),
            group_yours=Colour.YELLOW.bold(),
            group_not_yours=Style(),
        ),
        links=Links(
            normal=Colour.RED.bold(),
            multi_link_file=Colour.RED.on(Colour.YELLOW),
        ),
        git=Git(
            new=Colour.GREEN.normal(),
            modified=Colour.BLUE.normal(),
            deleted=Colour.RED.normal(),
            renamed=Colour.YELLOW.normal(),
            typechange=Colour.PURPLE.normal(),
            ignored=Style().dimmed(),
            conflicted=Colour.RED.normal(),
        ),
        punctuation=Fixed(244).normal(),
        date=Colour.BLUE.normal(),
        inode=Colour.PURPLE.normal(),
        blocks=Colour.CYAN.normal(),
        octal=Colour.PURPLE.normal(),
        header=Style().underline(),
        symlink_path=Colour.CYAN.normal(),
        control_char=Colour.RED.normal(),
        broken_symlink=Colour.RED.normal(),
        broken_path_overlay=Style().underline(),
    )