from typing import *
from dataclasses import dataclass, replace
import struct

import m64edit.config as config
from m64edit.errors import BufferTooSmall, FieldTooLong, FieldOutOfRange, InvalidTextEncoding
from m64edit.layout import *
from m64edit.util import *


CRC_CODES = {
  'jp': 0x0E3DAA4E,
  'us': 0xFF2B5A63,
}

COUNTRY_CODES = {
  'jp': ord('J'),
  'us': ord('E'),
}

START_FROM_SNAPSHOT = 1
START_FROM_POWER_ON = 2


@dataclass(frozen=True)
class Header:
  signature: bytes = M64_SIGNATURE
  version: int = 3
  uid: int = 0
  vi_count: int = 0
  rerecord_count: int = 0
  vi_per_second: int = 0
  controller_count: int = 0
  num_samples: int = 0
  movie_start_type: int = 0
  controller_flags: int = 0
  internal_name: bytes = b''
  crc32: int = 0
  country_code: int = 0
  video_plugin: bytes = b''
  sound_plugin: bytes = b''
  input_plugin: bytes = b''
  rsp_plugin: bytes = b''
  author: bytes = b''
  movie_desc: bytes = b''

  @property
  def has_valid_signature(self) -> bool:
    return self.signature == M64_SIGNATURE

  def text(self, name: str) -> str:
    """Return a text field up to its first NUL, decoded as UTF-8 (invalid bytes are replaced)."""
    if name not in TEXT_FIELDS:
      raise KeyError(name)
    value = cast(bytes, getattr(self, name))
    return value.partition(b'\x00')[0].decode('utf-8', errors='replace')

  def with_text(self, **texts: str) -> 'Header':
    for name in texts:
      if name not in TEXT_FIELDS:
        raise KeyError(name)
    return replace(self, **{name: text.encode('utf-8') for name, text in texts.items()})


def _check_text(field: HeaderField, value: bytes, strict_ascii: bool) -> None:
  if strict_ascii and not is_ascii(value):
    raise InvalidTextEncoding(field.name)


def decode_header(buffer: bytes, strict_ascii: Optional[bool] = None) -> Header:
  """
  Decode the fixed header at the start of buffer.

  Bytes outside the declared fields are ignored. Text fields keep their raw
  bytes, minus the trailing zero padding.
  """
  strict_ascii = config.use_strict_ascii(strict_ascii)
  if len(buffer) < HEADER_SIZE:
    raise BufferTooSmall(len(buffer), HEADER_SIZE)

  values: Dict[str, object] = {}
  for field in HEADER_FIELDS:
    value = struct.unpack_from(field.format, buffer, field.offset)[0]
    if field.text:
      _check_text(field, value, strict_ascii)
      value = strip_padding(value)
    values[field.name] = value

  return Header(**values) # type: ignore


def encode_header(header: Header, strict_ascii: Optional[bool] = None) -> bytes:
  strict_ascii = config.use_strict_ascii(strict_ascii)
  buffer = bytearray(HEADER_SIZE)

  for field in HEADER_FIELDS:
    value = getattr(header, field.name)

    if field.is_bytes:
      value = bytes(value)
      if field.text:
        if len(value) > field.width:
          raise FieldTooLong(field.name, field.width, len(value))
        _check_text(field, value, strict_ascii)
      elif len(value) != field.width:
        raise FieldOutOfRange(field.name, value)
      value = pad_buffer(value, field.width)

    else:
      low, high = int_range(field.width, field.signed)
      if not isinstance(value, int) or not low <= value <= high:
        raise FieldOutOfRange(field.name, value)

    struct.pack_into(field.format, buffer, field.offset, value)

  return bytes(buffer)


def default_header(game_version: str = 'us') -> Header:
  return Header(
    signature=M64_SIGNATURE,
    version=3,
    uid=0,
    vi_count=0,
    rerecord_count=0,
    vi_per_second=60,
    controller_count=1,
    num_samples=0,
    movie_start_type=START_FROM_POWER_ON,
    controller_flags=0x1,
    internal_name=b'SUPER MARIO 64',
    crc32=CRC_CODES[game_version],
    country_code=COUNTRY_CODES[game_version],
  )


def game_version(header: Header) -> Optional[str]:
  version = dict_inverse(CRC_CODES).get(header.crc32)
  if version is None:
    version = dict_inverse(COUNTRY_CODES).get(header.country_code & 0xFF)
  return version


__all__ = [
  'CRC_CODES',
  'COUNTRY_CODES',
  'START_FROM_SNAPSHOT',
  'START_FROM_POWER_ON',
  'Header',
  'decode_header',
  'encode_header',
  'default_header',
  'game_version',
]
