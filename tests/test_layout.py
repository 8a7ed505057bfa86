from __future__ import annotations

from m64edit.layout import HEADER_FIELDS, HEADER_FIELDS_BY_NAME, HEADER_SIZE, TEXT_FIELDS


def test_header_fields_match_file_layout() -> None:
    expected = {
        "signature": (0x00, 4),
        "version": (0x04, 4),
        "uid": (0x08, 4),
        "vi_count": (0x0C, 4),
        "rerecord_count": (0x10, 4),
        "vi_per_second": (0x14, 1),
        "controller_count": (0x15, 1),
        "num_samples": (0x18, 4),
        "movie_start_type": (0x1C, 2),
        "controller_flags": (0x20, 4),
        "internal_name": (0xC4, 32),
        "crc32": (0xE4, 4),
        "country_code": (0xE8, 2),
        "video_plugin": (0x122, 64),
        "sound_plugin": (0x162, 64),
        "input_plugin": (0x1A2, 64),
        "rsp_plugin": (0x1E2, 64),
        "author": (0x222, 222),
        "movie_desc": (0x300, 256),
    }
    assert {f.name: (f.offset, f.width) for f in HEADER_FIELDS} == expected


def test_header_fields_do_not_overlap_and_fit_header() -> None:
    fields = sorted(HEADER_FIELDS, key=lambda f: f.offset)
    for prev, cur in zip(fields, fields[1:]):
        assert prev.end <= cur.offset, (prev.name, cur.name)
    assert fields[-1].end == HEADER_SIZE == 0x400


def test_field_kinds() -> None:
    assert HEADER_FIELDS_BY_NAME["uid"].signed
    assert not HEADER_FIELDS_BY_NAME["vi_count"].signed
    assert HEADER_FIELDS_BY_NAME["signature"].is_bytes
    assert "signature" not in TEXT_FIELDS
    assert TEXT_FIELDS == [
        "internal_name",
        "video_plugin",
        "sound_plugin",
        "input_plugin",
        "rsp_plugin",
        "author",
        "movie_desc",
    ]
