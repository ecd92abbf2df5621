import numpy as np
import pygame

from bodysize.gameobjects.shapes import ShapeType
from bodysize.physics.sizer import body_bounds

BACKGROUND = (24, 24, 28)
GRID_COLOR = (40, 40, 48)
SHAPE_COLOR = (120, 200, 255)
SELECTED_COLOR = (255, 210, 90)
BOUNDS_COLOR = (255, 80, 80)


class Renderer:
    """
    Draws bodies in metres onto a pygame surface at a pixels-per-metre scale.
    World y points up; screen y points down.
    """

    def __init__(self, width: int, height: int, ppm: float):
        self.width = width
        self.height = height
        self.ppm = float(ppm)
        self.zoom = 1.0
        self.origin = np.array([width * 0.5, height * 0.5], dtype=np.float32)

    # =========================
    # Coordinate mapping
    # =========================

    @property
    def scale(self) -> float:
        return self.ppm * self.zoom

    def to_screen(self, points) -> np.ndarray:
        """
        Map (N, 2) world points (metres) to screen pixels.
        """
        pts = np.asarray(points, dtype=np.float32).reshape(-1, 2)
        screen = pts * self.scale
        screen[:, 1] *= -1.0
        return screen + self.origin

    def zoom_by(self, factor: float):
        self.zoom = float(np.clip(self.zoom * factor, 0.05, 20.0))

    # =========================
    # Drawing
    # =========================

    def clear(self, surface):
        surface.fill(BACKGROUND)
        step = self.scale
        if step < 4:
            return
        ox, oy = self.origin
        for x in np.arange(ox % step, self.width, step):
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, self.height))
        for y in np.arange(oy % step, self.height, step):
            pygame.draw.line(surface, GRID_COLOR, (0, y), (self.width, y))

    def draw_body(self, surface, body, selected=False, show_bounds=True, world_space=False):
        color = SELECTED_COLOR if selected else SHAPE_COLOR
        transform = body.transform

        for fixture in body.fixtures:
            shape = fixture.shape
            if shape.type is ShapeType.CIRCLE:
                center = self.to_screen(transform.apply(shape.points()))[0]
                radius = max(1, int(round(shape.radius * self.scale)))
                pygame.draw.circle(surface, color, center.tolist(), radius, 1)
            elif shape.vertex_count >= 2:
                pts = self.to_screen(transform.apply(shape.points())).tolist()
                closed = shape.type is ShapeType.POLYGON or getattr(shape, "loop", False)
                pygame.draw.lines(surface, color, closed, pts, 1)

        if show_bounds:
            self.draw_bounds(surface, body, world_space)

    def draw_bounds(self, surface, body, world_space=False):
        """
        Outline the bounding box of body.

        Local bounds are drawn rotated with the body, world bounds axis-aligned.
        """
        bounds = body_bounds(body, world=world_space)
        if bounds is None:
            return

        corners = bounds.corners()
        if not world_space:
            corners = body.transform.apply(corners)
        pygame.draw.lines(surface, BOUNDS_COLOR, True, self.to_screen(corners).tolist(), 1)
