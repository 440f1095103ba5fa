from .config import DEFAULT_CONFIG


class InputState:
    """Held keys and pointer position, written by host events and read once per tick."""

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG
        self.keys = {}
        self.pointer_x = self.config.width / 2
        self.pointer_active = False

    def key_down(self, key):
        self.keys[key] = True

    def key_up(self, key):
        self.keys[key] = False

    def release_all(self):
        self.keys.clear()

    def pointer_move(self, x):
        self.pointer_active = True
        self.pointer_x = x

    def pointer_enter(self):
        self.pointer_active = True

    def pointer_leave(self):
        self.pointer_active = False

    def is_start(self, key):
        return key in self.config.start_keys

    def is_left(self):
        return any(self.keys.get(k, False) for k in self.config.left_keys)

    def is_right(self):
        return any(self.keys.get(k, False) for k in self.config.right_keys)
