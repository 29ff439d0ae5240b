from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..config import NO_OPTIONS, OPTION_ORDER, OutputOption, format_output_options
from .catalogs import (
    BASE_CATALOG,
    CATCH_ALL_CATALOG,
    DMOV_CATALOG,
    SHIFT_CATALOG,
    SPECIALS_CATALOG,
    STACK_CATALOG,
    Catalog,
)
from .opcode import WORD_MASK, WORD_SPACE_SIZE, InstructionDefinition, is_prefix_mask
from .tokens import token_errors

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """A definition catalog breaks one of the authoring invariants."""


OVERLAY_CATALOGS: Dict[OutputOption, Catalog] = {
    OutputOption.STACK: STACK_CATALOG,
    OutputOption.SHIFT: SHIFT_CATALOG,
    OutputOption.DMOV: DMOV_CATALOG,
    OutputOption.SPECIALS: SPECIALS_CATALOG,
}

# Fields an overlay must leave exactly as the base definition has them.
_STRUCTURAL_FIELDS = (
    "instruction_format",
    "extra_word_count_x",
    "extra_word_count_y",
    "flow_type",
    "is_conditional",
    "has_delay_slot",
)


def overlay_catalog(option: OutputOption) -> Catalog:
    try:
        return OVERLAY_CATALOGS[option]
    except KeyError:
        raise ValueError(f"Not a single output option: {option!r}") from None


def iter_overlay_catalogs(
    options: OutputOption,
    overlays: Optional[Mapping[OutputOption, Catalog]] = None,
) -> Iterable[Tuple[OutputOption, Catalog]]:
    """Yield ``(option, catalog)`` for every enabled overlay, in application order."""

    for option in OPTION_ORDER:
        if option not in options:
            continue
        if overlays is None:
            yield option, overlay_catalog(option)
        elif option in overlays:
            yield option, overlays[option]


def catalog_errors(catalog: Sequence[InstructionDefinition], label: str) -> List[str]:
    """Return a description of every invariant violation in ``catalog``."""

    errors: List[str] = []
    owner = np.full(WORD_SPACE_SIZE, -1, dtype=np.int32)
    for pos, definition in enumerate(catalog):
        if not is_prefix_mask(definition.mask):
            errors.append(f"{label}: {definition} has non-prefix mask {definition.mask:#06x}")
            continue
        if definition.encoding & definition.mask != definition.encoding:
            errors.append(
                f"{label}: {definition} sets bits outside mask {definition.mask:#06x}"
            )
            continue
        words = definition.word_range()
        claimed = owner[words.start : words.stop]
        taken = np.flatnonzero(claimed != -1)
        if taken.size:
            other = catalog[int(claimed[taken[0]])]
            errors.append(
                f"{label}: {definition} overlaps {other} at word "
                f"{words.start + int(taken[0]):#06x}"
            )
            continue
        claimed[:] = pos
    errors.extend(f"{label}: {err}" for err in token_errors(catalog))
    return errors


def overlay_errors(
    overlay: Sequence[InstructionDefinition],
    base: Sequence[InstructionDefinition],
    label: str,
) -> List[str]:
    """Check that ``overlay`` only renames words ``base`` already defines."""

    errors: List[str] = []
    by_slot = {(d.encoding, d.mask): d for d in base}
    for definition in overlay:
        original = by_slot.get((definition.encoding, definition.mask))
        if original is None:
            errors.append(
                f"{label}: {definition} (mask {definition.mask:#06x}) has no base counterpart"
            )
            continue
        for field_name in _STRUCTURAL_FIELDS:
            if getattr(definition, field_name) != getattr(original, field_name):
                errors.append(
                    f"{label}: {definition} changes {field_name} of {original}"
                )
    return errors


def validate_catalogs(
    catch_all: Sequence[InstructionDefinition] = CATCH_ALL_CATALOG,
    base: Sequence[InstructionDefinition] = BASE_CATALOG,
    overlays: Optional[Mapping[OutputOption, Catalog]] = None,
) -> None:
    """Reject catalogs that would produce ill-defined decode tables."""

    overlays = OVERLAY_CATALOGS if overlays is None else overlays
    errors: List[str] = []
    if len(catch_all) != 1 or catch_all[0].mask != 0:
        errors.append("catch-all: expected exactly one definition with mask 0x0000")
    errors.extend(catalog_errors(catch_all, "catch-all"))
    errors.extend(catalog_errors(base, "base"))
    for option, catalog in overlays.items():
        label = option.name.lower() if option.name else repr(option)
        errors.extend(catalog_errors(catalog, label))
        errors.extend(overlay_errors(catalog, base, label))

    if errors:
        for err in errors:
            logger.error("Rejected catalog: %s", err)
        raise CatalogError(
            f"{len(errors)} catalog invariant violation(s); first: {errors[0]}"
        )


def _expand(
    slots: np.ndarray,
    catalog: Sequence[InstructionDefinition],
    definitions: List[InstructionDefinition],
) -> None:
    # With a prefix mask the matching words are one contiguous run.
    for definition in catalog:
        index = len(definitions)
        definitions.append(definition)
        words = definition.word_range()
        slots[words.start : words.stop] = index


class DecodeTable:
    """Dense, immutable map from every 16-bit word to its definition.

    Built in one pass by ``DecodeTable.build``; a different configuration
    means building a new table, never patching an existing one.
    """

    __slots__ = ("_options", "_definitions", "_index_map", "_slots")

    def __init__(
        self,
        options: OutputOption,
        definitions: Tuple[InstructionDefinition, ...],
        index_map: np.ndarray,
    ) -> None:
        if index_map.shape != (WORD_SPACE_SIZE,):
            raise ValueError(f"Decode table must have {WORD_SPACE_SIZE} slots")
        frozen = np.array(index_map, dtype=np.uint16, copy=True)
        frozen.flags.writeable = False
        # A view of a read-only base can never be made writeable again.
        published = frozen.view()
        published.flags.writeable = False
        self._options = options
        self._definitions = definitions
        self._index_map = published
        self._slots: Tuple[InstructionDefinition, ...] = tuple(
            definitions[i] for i in frozen.tolist()
        )

    @classmethod
    def build(
        cls,
        options: OutputOption = NO_OPTIONS,
        *,
        catch_all: Sequence[InstructionDefinition] = CATCH_ALL_CATALOG,
        base: Sequence[InstructionDefinition] = BASE_CATALOG,
        overlays: Optional[Mapping[OutputOption, Catalog]] = None,
    ) -> DecodeTable:
        validate_catalogs(catch_all, base, overlays)

        slots = np.zeros(WORD_SPACE_SIZE, dtype=np.uint16)
        definitions: List[InstructionDefinition] = []
        _expand(slots, catch_all, definitions)
        _expand(slots, base, definitions)
        logger.debug("Expanded %d base definitions", len(base))
        for option, catalog in iter_overlay_catalogs(options, overlays):
            _expand(slots, catalog, definitions)
            logger.debug(
                "Applied %s overlay (%d definitions)", option.name, len(catalog)
            )

        table = cls(options, tuple(definitions), slots)
        logger.debug(
            "Built decode table for options=%s (%d unknown words)",
            format_output_options(options),
            table.unknown_count(),
        )
        return table

    @property
    def options(self) -> OutputOption:
        return self._options

    @property
    def definitions(self) -> Tuple[InstructionDefinition, ...]:
        """Every applied definition, indexed by the values of ``index_map``."""
        return self._definitions

    @property
    def index_map(self) -> np.ndarray:
        return self._index_map

    @property
    def catch_all(self) -> InstructionDefinition:
        return self._definitions[0]

    def decode(self, word: int) -> InstructionDefinition:
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"Instruction word out of range: {word:#x}")
        return self._slots[word]

    def __getitem__(self, word: int) -> InstructionDefinition:
        return self.decode(word)

    def __len__(self) -> int:
        return WORD_SPACE_SIZE

    def decode_many(self, words: Iterable[int] | np.ndarray) -> np.ndarray:
        """Map many words at once to indices into ``definitions``."""

        arr = np.asarray(words if isinstance(words, np.ndarray) else list(words))
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Instruction words must be integers, got {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > WORD_MASK):
            raise ValueError("Instruction words must be within 0..0xFFFF")
        return self._index_map[arr.astype(np.intp)]

    def is_unknown(self, word: int) -> bool:
        return self.decode(word) is self.catch_all

    def unknown_count(self) -> int:
        return int(np.count_nonzero(self._index_map == 0))

    def runs(self) -> List[Tuple[int, int, InstructionDefinition]]:
        """Collapse the table into ``(first_word, last_word, definition)`` runs."""

        boundaries = np.flatnonzero(np.diff(self._index_map.astype(np.int32))) + 1
        starts = np.concatenate(([0], boundaries))
        stops = np.concatenate((boundaries, [WORD_SPACE_SIZE]))
        return [
            (int(start), int(stop) - 1, self._definitions[int(self._index_map[start])])
            for start, stop in zip(starts, stops)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeTable):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DecodeTable(options={format_output_options(self._options)})"


def build_decode_table(options: OutputOption = NO_OPTIONS) -> DecodeTable:
    return DecodeTable.build(options)


@lru_cache(maxsize=None)
def cached_decode_table(options: OutputOption = NO_OPTIONS) -> DecodeTable:
    """Return a shared table for ``options``; tables are immutable so sharing is safe."""
    return DecodeTable.build(options)


__all__ = [
    "CatalogError",
    "DecodeTable",
    "OVERLAY_CATALOGS",
    "build_decode_table",
    "cached_decode_table",
    "catalog_errors",
    "iter_overlay_catalogs",
    "overlay_catalog",
    "overlay_errors",
    "validate_catalogs",
]
