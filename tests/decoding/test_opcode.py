import pytest

from fr80.decoding.opcode import (
    FlowType,
    InstructionDefinition,
    InstructionFormat,
    OperandFields,
    is_prefix_mask,
)


def _defn(encoding: int = 0x9700, mask: int = 0xFFF0, **kwargs) -> InstructionDefinition:
    values = dict(
        encoding=encoding,
        mask=mask,
        instruction_format=InstructionFormat.E,
        extra_word_count_x=0,
        extra_word_count_y=0,
        name="JMP",
        display_format="@i;Iu",
        action="!",
        flow_type=FlowType.JMP,
    )
    values.update(kwargs)
    return InstructionDefinition(**values)


@pytest.mark.parametrize(
    "mask", [0x0000, 0x8000, 0xF000, 0xF800, 0xFF00, 0xFFF0, 0xFFFE, 0xFFFF]
)
def test_prefix_masks_accepted(mask: int) -> None:
    assert is_prefix_mask(mask)


@pytest.mark.parametrize("mask", [0x0F00, 0xFF0F, 0x00FF, 0x7FFF, 0x10000, -1])
def test_non_prefix_masks_rejected(mask: int) -> None:
    assert not is_prefix_mask(mask)


def test_word_range_and_covers() -> None:
    d = _defn()
    assert d.free_bits == 0x000F
    assert d.word_range() == range(0x9700, 0x9710)
    assert d.covers(0x970A)
    assert not d.covers(0x9710)


def test_str_matches_name_and_encoding() -> None:
    assert str(_defn()) == "JMP(0x9700)"


def test_definition_is_frozen() -> None:
    d = _defn()
    with pytest.raises(AttributeError):
        d.name = "CALL"  # type: ignore[misc]


def test_definition_range_checks() -> None:
    with pytest.raises(ValueError):
        _defn(encoding=0x10000)
    with pytest.raises(ValueError):
        _defn(extra_word_count_x=256)


def test_extra_word_count_sums_x_and_y() -> None:
    d = _defn(extra_word_count_x=2, extra_word_count_y=1)
    assert d.extra_word_count == 3


def test_same_slot_ignores_names() -> None:
    assert _defn().same_slot(_defn(name="OTHER", action=""))
    assert not _defn().same_slot(_defn(mask=0xFFFF))


def test_split_format_a() -> None:
    assert InstructionFormat.A.split(0x0032) == OperandFields(ri=2, rj=3)


def test_split_format_b_and_c() -> None:
    assert InstructionFormat.B.split(0x2AB5) == OperandFields(ri=5, x=0xAB)
    assert InstructionFormat.C.split(0xA4C7) == OperandFields(ri=7, x=0xC)


def test_split_format_d_e_z_w() -> None:
    assert InstructionFormat.D.split(0xE2FE) == OperandFields(x=0xFE)
    assert InstructionFormat.E.split(0x971D) == OperandFields(ri=0xD)
    assert InstructionFormat.Z.split(0x9720) == OperandFields()
    assert InstructionFormat.W.split(0x1234) == OperandFields(x=0x1234)


def test_split_format_f_sign_extends_offset() -> None:
    assert InstructionFormat.F.split(0xD001).offset == 2
    assert InstructionFormat.F.split(0xD7FF).offset == -2
    assert InstructionFormat.F.split(0xD400).offset == -0x800


def test_split_rejects_out_of_range_word() -> None:
    with pytest.raises(ValueError):
        InstructionFormat.A.split(0x10000)
