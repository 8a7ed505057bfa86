from typing import *
import json
import os

from m64edit.util import log


version = (0, 1, 0)

strict_ascii: bool = False
echo_log: bool = False
settings_file: str = os.path.join(os.getcwd(), 'settings.json')


def version_str(delim: str) -> str:
  return delim.join(map(str, version))

def read_settings() -> Dict[str, Any]:
  if os.path.exists(settings_file):
    with open(settings_file, 'r') as f:
      return cast(Dict[str, Any], json.load(f))
  else:
    return {}

def init(root_dir: Optional[str] = None, echo: Optional[bool] = None) -> None:
  """
  Load settings.json from root_dir (default: the working directory).

  Recognized keys are strict_ascii and echo_log. An explicit echo argument
  overrides echo_log; when set, log messages are printed to stdout.
  """
  global settings_file, strict_ascii, echo_log
  if root_dir is None:
    root_dir = os.getcwd()
  settings_file = os.path.join(root_dir, 'settings.json')

  settings = read_settings()
  strict_ascii = bool(settings.get('strict_ascii', False))
  echo_log = bool(settings.get('echo_log', False)) if echo is None else echo

  log.unsubscribe(log.print_message)
  if echo_log:
    log.subscribe(log.print_message, log.LogLevel.INFO)
  if strict_ascii:
    log.info('Strict ASCII validation enabled')


def use_strict_ascii(override: Optional[bool]) -> bool:
  if override is None:
    return strict_ascii
  return override
