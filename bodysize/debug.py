import pygame


class DebugHUD:
    def __init__(self, font_size: int = 16):
        """
        Text overlay drawn in the top-left corner of the viewer.

        :param self: The object itself
        :param font_size: Point size of the HUD font
        """
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", font_size)
        self.enabled = True
        self.color = (255, 255, 255)

    @staticmethod
    def lines_for(body, size, ppm, world_space, fps=None):
        lines = []
        if fps is not None:
            lines.append(f"FPS: {fps:.1f}")
        if body is None:
            lines.append("No bodies loaded")
            return lines

        pos = body.transform.position
        lines += [
            f"Body: {body.name} ({len(body.fixtures)} fixtures)",
            f"Pos: x={pos[0]:.2f} y={pos[1]:.2f} angle={body.transform.angle:.2f}",
            f"Size: {size[0]:.1f} x {size[1]:.1f} px @ {ppm:.1f} ppm",
            f"Size: {size[0] / ppm:.3f} x {size[1] / ppm:.3f} m",
            f"Bounds: {'world' if world_space else 'local'}",
        ]
        return lines

    def draw(self, surface, lines):
        """
        :param self: The object itself
        :param surface: The surface to draw onto
        :param lines: Text lines, top to bottom
        """
        if not self.enabled:
            return

        x, y = 10, 10
        for line in lines:
            text = self.font.render(line, True, self.color)
            surface.blit(text, (x, y))
            y += text.get_height() + 4
