import json
import struct

import pytest

import scripts.dump_users as dump_users


def _block(handle: bytes, name: bytes, level: int = 1, strength: int = 0) -> bytes:
    data = bytearray(264)
    struct.pack_into(">d", data, 0x6C, 321.5)
    data[0x93] = level
    data[0x95] = strength
    return handle.ljust(26, b"\x00") + name.ljust(30, b"\x00") + bytes(data)


def test_prints_json_array(tmp_path, capsys):
    path = tmp_path / "USER"
    path.write_bytes(_block(b"alice", b"Alice", level=10, strength=12) + bytes(320))

    assert dump_users.main([str(path)]) == 0

    out = capsys.readouterr().out
    users = json.loads(out)
    assert len(users) == 1
    assert users[0]["handle"] == "alice"
    assert users[0]["level"] == 10
    assert users[0]["strength"] == 12
    assert users[0]["experience"] == 321.0
    assert users[0]["experience_needed"] == 563200.0
    assert users[0]["class"] is None
    assert users[0]["weapon"] == "None"


def test_output_is_single_line(tmp_path, capsys):
    path = tmp_path / "USER"
    path.write_bytes(_block(b"a", b"A") + _block(b"b", b"B"))

    assert dump_users.main([str(path)]) == 0
    assert capsys.readouterr().out.count("\n") == 1


def test_no_users_fails(tmp_path, capsys):
    path = tmp_path / "USER"
    path.write_bytes(bytes(320) + _block(b"sysop", b"Hack & Slash"))

    assert dump_users.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No users could be parsed" in captured.err


def test_truncated_file_fails_without_partial_output(tmp_path, capsys):
    path = tmp_path / "USER"
    path.write_bytes(_block(b"alice", b"Alice") + b"\x00")

    assert dump_users.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Truncated block" in captured.err


def test_missing_file_fails(tmp_path, capsys):
    assert dump_users.main([str(tmp_path / "nope")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_path_is_required():
    with pytest.raises(SystemExit) as excinfo:
        dump_users.main([])
    assert excinfo.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        dump_users.main(["--version"])
    assert excinfo.value.code == 0
    assert "0.1.0" in capsys.readouterr().out
