from typing import *
from dataclasses import dataclass
import struct


HEADER_SIZE = 0x400
SAMPLE_SIZE = 4
MAX_CONTROLLERS = 4

M64_SIGNATURE = b'\x4d\x36\x34\x1a'


@dataclass(frozen=True)
class HeaderField:
  name: str
  offset: int
  format: str
  text: bool = False

  @property
  def width(self) -> int:
    return struct.calcsize(self.format)

  @property
  def end(self) -> int:
    return self.offset + self.width

  @property
  def is_bytes(self) -> bool:
    return self.format.endswith('s')

  @property
  def signed(self) -> bool:
    return self.format[-1].islower() and not self.is_bytes


HEADER_FIELDS = [
  HeaderField('signature',        0x000, '4s'),
  HeaderField('version',          0x004, '<I'),
  HeaderField('uid',              0x008, '<i'),
  HeaderField('vi_count',         0x00C, '<I'),
  HeaderField('rerecord_count',   0x010, '<I'),
  HeaderField('vi_per_second',    0x014, '<B'),
  HeaderField('controller_count', 0x015, '<B'),
  HeaderField('num_samples',      0x018, '<I'),
  HeaderField('movie_start_type', 0x01C, '<H'),
  HeaderField('controller_flags', 0x020, '<I'),
  HeaderField('internal_name',    0x0C4, '32s', text=True),
  HeaderField('crc32',            0x0E4, '<I'),
  HeaderField('country_code',     0x0E8, '<H'),
  HeaderField('video_plugin',     0x122, '64s', text=True),
  HeaderField('sound_plugin',     0x162, '64s', text=True),
  HeaderField('input_plugin',     0x1A2, '64s', text=True),
  HeaderField('rsp_plugin',       0x1E2, '64s', text=True),
  HeaderField('author',           0x222, '222s', text=True),
  HeaderField('movie_desc',       0x300, '256s', text=True),
]

HEADER_FIELDS_BY_NAME = {field.name: field for field in HEADER_FIELDS}

TEXT_FIELDS = [field.name for field in HEADER_FIELDS if field.text]


__all__ = [
  'HEADER_SIZE',
  'SAMPLE_SIZE',
  'MAX_CONTROLLERS',
  'M64_SIGNATURE',
  'HeaderField',
  'HEADER_FIELDS',
  'HEADER_FIELDS_BY_NAME',
  'TEXT_FIELDS',
]
