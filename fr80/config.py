from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Iterable, Tuple, Union


class OutputOption(enum.Flag):
    """Alias overlays that can be layered over the base decode table.

    Overlays are applied in declaration order, so a later member wins when
    two enabled overlays claim the same words.
    """

    STACK = enum.auto()
    SHIFT = enum.auto()
    DMOV = enum.auto()
    SPECIALS = enum.auto()


NO_OPTIONS = OutputOption(0)
ALL_OPTIONS = (
    OutputOption.STACK | OutputOption.SHIFT | OutputOption.DMOV | OutputOption.SPECIALS
)

# Fixed application order of the overlays.
OPTION_ORDER: Tuple[OutputOption, ...] = (
    OutputOption.STACK,
    OutputOption.SHIFT,
    OutputOption.DMOV,
    OutputOption.SPECIALS,
)


def iter_options(options: OutputOption) -> Iterable[OutputOption]:
    """Yield the single options contained in ``options`` in application order."""

    for option in OPTION_ORDER:
        if option in options:
            yield option


def parse_output_options(raw: Union[str, Iterable[str], None]) -> OutputOption:
    """Build an ``OutputOption`` value from names such as ``"stack,shift"``.

    Names are case-insensitive; ``all`` and ``none`` are accepted.
    """

    if raw is None:
        return NO_OPTIONS
    chunks = raw.split(",") if isinstance(raw, str) else list(raw)
    options = NO_OPTIONS
    for chunk in chunks:
        name = chunk.strip().upper()
        if not name or name == "NONE":
            continue
        if name == "ALL":
            options |= ALL_OPTIONS
            continue
        try:
            options |= OutputOption[name]
        except KeyError:
            valid = ", ".join(option.name.lower() for option in OPTION_ORDER)
            raise ValueError(
                f"Unknown output option '{chunk.strip()}' (expected one of: {valid}, all, none)"
            ) from None
    return options


def format_output_options(options: OutputOption) -> str:
    return ",".join(option.name.lower() for option in iter_options(options)) or "none"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


@dataclass(frozen=True)
class DecodeConfig:
    options: OutputOption


def load_decode_config() -> DecodeConfig:
    raw = os.getenv("FR80_DECODE_OPTIONS")
    if raw is not None:
        return DecodeConfig(options=parse_output_options(raw))

    options = NO_OPTIONS
    for option in OPTION_ORDER:
        if _env_flag(f"FR80_OPT_{option.name}"):
            options |= option
    return DecodeConfig(options=options)


__all__ = [
    "ALL_OPTIONS",
    "DecodeConfig",
    "NO_OPTIONS",
    "OPTION_ORDER",
    "OutputOption",
    "format_output_options",
    "iter_options",
    "load_decode_config",
    "parse_output_options",
]
