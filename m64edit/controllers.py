from typing import *

from m64edit.errors import NoActiveControllers
from m64edit.layout import MAX_CONTROLLERS


def active_controllers(flags: int) -> List[int]:
  """
  Return the controller ports enabled in the header's controller flags, in
  ascending port order.

  Only bits 0-3 select controllers; higher bits are ignored.
  """
  controllers = [port for port in range(MAX_CONTROLLERS) if flags & (1 << port)]
  if len(controllers) == 0:
    raise NoActiveControllers(flags)
  return controllers


def controller_flags_for(controllers: Iterable[int]) -> int:
  flags = 0
  for port in controllers:
    if not 0 <= port < MAX_CONTROLLERS:
      raise ValueError('Invalid controller port: ' + str(port))
    flags |= 1 << port
  return flags
