import pygame


class InputState:
    """
    Collects and normalizes raw input into logical viewer actions.

    - Zoom: continuous (hold)
    - Body selection and toggles: edge-triggered (press once)
    """

    def __init__(self):
        """
        :param self: The object itself
        """
        self.actions = {
            "zoom_in": False,
            "zoom_out": False,
            "next_body": False,
            "toggle_bounds": False,
            "world_space": False,
        }

        # previous key states for edge detection
        self._prev = {"next_body": False, "toggle_bounds": False, "world_space": False}

    def _edge(self, action: str, now: bool) -> bool:
        pressed = now and not self._prev[action]
        self._prev[action] = now
        return pressed

    def update(self, keys=None):
        """
        :param self: The object itself
        :param keys: key state sequence; read from pygame when omitted
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        # zoom (continuous)
        self.actions["zoom_in"] = bool(keys[pygame.K_EQUALS] or keys[pygame.K_KP_PLUS])
        self.actions["zoom_out"] = bool(keys[pygame.K_MINUS] or keys[pygame.K_KP_MINUS])

        # toggles (edge-triggered)
        self.actions["next_body"] = self._edge("next_body", bool(keys[pygame.K_TAB]))
        self.actions["toggle_bounds"] = self._edge("toggle_bounds", bool(keys[pygame.K_b]))
        self.actions["world_space"] = self._edge("world_space", bool(keys[pygame.K_w]))

        return self.actions
