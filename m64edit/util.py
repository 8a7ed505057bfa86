from typing import *

import m64edit.log as log

T = TypeVar('T')
S = TypeVar('S')

def dict_inverse(d: Dict[T, S]) -> Dict[S, T]:
  return {v: k for k, v in d.items()}

def pad_buffer(b: bytes, n: int) -> bytes:
  assert len(b) <= n, (len(b), n)
  return b.ljust(n, b'\x00')

def strip_padding(b: bytes) -> bytes:
  return b.rstrip(b'\x00')

def is_ascii(b: bytes) -> bool:
  return all(c < 0x80 for c in b)

def int_range(width: int, signed: bool) -> Tuple[int, int]:
  bits = 8 * width
  if signed:
    return (-(1 << (bits - 1)), (1 << (bits - 1)) - 1)
  else:
    return (0, (1 << bits) - 1)


__all__ = [
  'log',
  'dict_inverse',
  'pad_buffer',
  'strip_padding',
  'is_ascii',
  'int_range',
]
