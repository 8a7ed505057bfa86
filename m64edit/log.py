from typing import *
from collections import deque
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
  DEBUG = 10
  INFO = 20
  WARN = 30
  ERROR = 40

class LogMessage:
  def __init__(self, level: LogLevel, timestamp: datetime, message: str) -> None:
    self.level = level
    self.timestamp = timestamp
    self.message = message

  def __str__(self) -> str:
    timestamp = self.timestamp.isoformat(' ')
    return f'[{timestamp}] [{self.level.name}] {self.message}'


Subscriber = Callable[[LogMessage], None]

HISTORY_LIMIT = 256

# Nothing is emitted unless a caller subscribes; config.init(echo=True) prints
history: Deque[LogMessage] = deque(maxlen=HISTORY_LIMIT)
subscribers: List[Tuple[Subscriber, LogLevel]] = []

def subscribe(callback: Subscriber, level: LogLevel = LogLevel.DEBUG) -> None:
  for message in history:
    if message.level.value >= level.value:
      callback(message)
  subscribers.append((callback, level))

def unsubscribe(callback: Subscriber) -> None:
  subscribers[:] = [(c, l) for c, l in subscribers if c != callback]

def print_message(message: LogMessage) -> None:
  print(message)


def log(message: LogMessage) -> None:
  for callback, level in list(subscribers):
    if message.level.value >= level.value:
      callback(message)
  history.append(message)

def log_join(level: LogLevel, *words: object) -> None:
  message = ' '.join(map(str, words))
  log(LogMessage(level, datetime.now(), message))


def debug(*words: object) -> None:
  log_join(LogLevel.DEBUG, *words)

def info(*words: object) -> None:
  log_join(LogLevel.INFO, *words)

def warn(*words: object) -> None:
  log_join(LogLevel.WARN, *words)

def error(*words: object) -> None:
  log_join(LogLevel.ERROR, *words)


__all__ = [
  'LogLevel',
  'LogMessage',
  'HISTORY_LIMIT',
  'subscribe',
  'unsubscribe',
  'print_message',
  'debug',
  'info',
  'warn',
  'error',
]
