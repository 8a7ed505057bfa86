INPUT_BUTTON_FLAGS = {
  'd_right': 0x0001,
  'd_left':  0x0002,
  'd_down':  0x0004,
  'd_up':    0x0008,
  'start':   0x0010,
  'z':       0x0020,
  'b':       0x0040,
  'a':       0x0080,
  'c_right': 0x0100,
  'c_left':  0x0200,
  'c_down':  0x0400,
  'c_up':    0x0800,
  'r':       0x1000,
  'l':       0x2000,
}

INPUT_BUTTON_LABELS = {
  'a': 'A',
  'b': 'B',
  'z': 'Z',
  'start': 'S',
  'l': 'L',
  'r': 'R',
  'c_up': 'C^',
  'c_left': 'C<',
  'c_right': 'C>',
  'c_down': 'Cv',
  'd_up': 'D^',
  'd_left': 'D<',
  'd_right': 'D>',
  'd_down': 'Dv',
}


def get_input_button_by_label(label: str) -> str:
  for button, value in INPUT_BUTTON_LABELS.items():
    if value.lower() == label.lower():
      return button
  raise KeyError('Invalid button: ' + label)
