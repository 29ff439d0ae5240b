from fr80.decoding.catalogs import BASE_CATALOG
from fr80.decoding.tokens import (
    ACTION_TOKENS,
    DISPLAY_TOKENS,
    FIXED_REGISTER_NAMES,
    ActionTokenKind,
    DisplayTokenKind,
    token_errors,
    unknown_action_tokens,
    unknown_display_tokens,
)


def test_literal_punctuation_is_display_literal() -> None:
    for ch in "#()+,-;@& ":
        assert DISPLAY_TOKENS[ch] is DisplayTokenKind.LITERAL


def test_fixed_registers_have_names() -> None:
    fixed = {
        ch
        for ch, kind in DISPLAY_TOKENS.items()
        if kind is DisplayTokenKind.FIXED_REGISTER
    }
    assert fixed == set(FIXED_REGISTER_NAMES)
    assert FIXED_REGISTER_NAMES["C"] == "CCR"
    assert FIXED_REGISTER_NAMES["M"] == "ILM"


def test_action_vocabulary_groups() -> None:
    flow = {ch for ch, k in ACTION_TOKENS.items() if k is ActionTokenKind.FLOW}
    assert flow == set("!?()")
    assert ACTION_TOKENS["_"] is ActionTokenKind.DELAY_SLOT
    effects = {ch for ch, k in ACTION_TOKENS.items() if k is ActionTokenKind.EFFECT}
    assert effects == set("wvx")


def test_unknown_tokens_reported() -> None:
    assert unknown_display_tokens("@(A&j),i") == []
    assert unknown_display_tokens("#u,%") == ["%"]
    assert unknown_action_tokens("_!") == []
    assert unknown_action_tokens("iwZ") == ["Z"]


def test_base_catalog_within_vocabulary() -> None:
    assert token_errors(BASE_CATALOG) == []


def test_flow_tokens_agree_with_definitions() -> None:
    for d in BASE_CATALOG:
        flow = [ch for ch in d.action if ACTION_TOKENS[ch] is ActionTokenKind.FLOW]
        if d.flow_type.name in ("JMP", "CALL", "RET", "BRA"):
            assert flow, d
        assert ("_" in d.action) == d.has_delay_slot
