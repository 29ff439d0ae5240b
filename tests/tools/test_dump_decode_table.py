import json
from pathlib import Path

import pytest

from fr80.config import OutputOption
from fr80.decoding.decode_map import DecodeTable
from fr80.tools import dump_decode_table as tool


def test_lookup_single_word(capsys: pytest.CaptureFixture[str]) -> None:
    assert tool.main(["--word", "0x9720"]) == 0
    (record,) = json.loads(capsys.readouterr().out)
    assert record["name"] == "RET"
    assert record["flow_type"] == "RET"
    assert record["mask"] == 0xFFFF
    assert record["word"] == 0x9720


def test_lookup_respects_options(capsys: pytest.CaptureFixture[str]) -> None:
    assert tool.main(["--options", "stack", "-w", "0x0700", "-w", "0xA625"]) == 0
    pop, add = json.loads(capsys.readouterr().out)
    assert pop["name"] == "POP"
    assert add["name"] == "ADD"
    assert add["fields"] == {"ri": 5, "rj": 2}


def test_full_table_to_file(tmp_path: Path) -> None:
    out = tmp_path / "table.json"
    assert tool.main(["--options", "all", "-o", str(out), "--pretty"]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["options"] == "stack,shift,dmov,specials"
    runs = data["runs"]
    assert runs[0][0] == 0
    assert runs[-1][1] == 0xFFFF
    names = {d["index"]: d["name"] for d in data["definitions"]}
    assert {names[run[2]] for run in runs} == set(names.values())
    assert "LDM0" not in names.values()
    assert "POP" in names.values()


def test_envelope_unknown_count_matches_table() -> None:
    table = DecodeTable.build(OutputOption.SHIFT)
    envelope = tool.table_envelope(table)
    assert envelope.unknown_words == table.unknown_count()
    assert envelope.options == "shift"


def test_bad_option_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    assert tool.main(["--options", "bogus"]) == 2
    assert "Unknown output option" in caplog.text


def test_bad_word_rejected() -> None:
    with pytest.raises(SystemExit):
        tool.main(["--word", "0x10000"])
