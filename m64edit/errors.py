from typing import *


class M64Error(ValueError):
  pass


class BufferTooSmall(M64Error):
  def __init__(self, size: int, required: int) -> None:
    super().__init__(f'Buffer is {size} bytes, need at least {required} for the header')
    self.size = size
    self.required = required


class FieldTooLong(M64Error):
  def __init__(self, field: str, width: int, length: int) -> None:
    super().__init__(f'{field} is {length} bytes, field width is {width}')
    self.field = field
    self.width = width
    self.length = length


class FieldOutOfRange(M64Error):
  def __init__(self, field: str, value: object) -> None:
    super().__init__(f'{field} value {value!r} does not fit its field')
    self.field = field
    self.value = value


class InvalidTextEncoding(M64Error):
  def __init__(self, field: str) -> None:
    super().__init__(f'{field} contains non-ASCII bytes')
    self.field = field


class NoActiveControllers(M64Error):
  def __init__(self, flags: int) -> None:
    super().__init__(f'Controller flags 0x{flags:08X} select no controller')
    self.flags = flags


class TruncatedSampleData(M64Error):
  def __init__(self, size: int, multiple: int = 4, incomplete_rotation: bool = False) -> None:
    if incomplete_rotation:
      message = (
        f'Sample data is {size} bytes: incomplete controller rotation '
        f'({multiple} bytes per cycle of active controllers)'
      )
    else:
      message = f'Sample data is {size} bytes, not a multiple of {multiple}'
    super().__init__(message)
    self.size = size
    self.multiple = multiple
    self.incomplete_rotation = incomplete_rotation


class MismatchedControllerLengths(M64Error):
  def __init__(self, lengths: Dict[int, int]) -> None:
    desc = ', '.join(f'{c}: {n}' for c, n in sorted(lengths.items()))
    super().__init__(f'Controller input lengths differ ({desc})')
    self.lengths = lengths


__all__ = [
  'M64Error',
  'BufferTooSmall',
  'FieldTooLong',
  'FieldOutOfRange',
  'InvalidTextEncoding',
  'NoActiveControllers',
  'TruncatedSampleData',
  'MismatchedControllerLengths',
]
