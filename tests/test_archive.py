import struct

import pytest

from psxfunk.archive import ArchiveError, entries, find


def build(files):
    header_len = 16 * (len(files) + 1)
    table = b""
    body = b""
    for name, data in files:
        table += struct.pack("<12sI", name.encode(), header_len + len(body))
        body += data
    return table + b"\0" * 16 + body


def test_entries_lists_names_and_offsets():
    arc = build([("A.TIM", b"aaaa"), ("B.TIM", b"bb")])
    assert list(entries(arc)) == [("A.TIM", 48), ("B.TIM", 52)]


def test_find_returns_data_from_offset():
    arc = build([("A.TIM", b"aaaa"), ("B.TIM", b"bb")])
    assert find(arc, "B.TIM") == b"bb"
    assert find(arc, "A.TIM")[:4] == b"aaaa"


def test_find_compares_only_twelve_bytes():
    arc = build([("ABCDEFGHIJKL", b"xyz")])
    assert find(arc, "ABCDEFGHIJKLMNOP") == b"xyz"


def test_find_prefix_does_not_match():
    arc = build([("ABC.TIM", b"xyz")])
    with pytest.raises(ArchiveError):
        find(arc, "ABC")


def test_missing_file_raises():
    arc = build([("A.TIM", b"aaaa")])
    with pytest.raises(ArchiveError):
        find(arc, "C.TIM")


def test_unterminated_table_raises():
    arc = struct.pack("<12sI", b"A.TIM", 16)
    with pytest.raises(ArchiveError):
        list(entries(arc))


def test_empty_archive_has_no_entries():
    assert list(entries(b"\0" * 16)) == []