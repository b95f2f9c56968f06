import pygame
from maze_carver.core.grid import Grid
from maze_carver.viz.bitmap import render, to_rgb

class PreviewWindow:
    """Live pygame view of the bitmap while a generator carves the grid."""
    COLOR_BG = (10, 10, 10)
    COLOR_TEXT = (255, 60, 60)

    def __init__(self, grid: Grid, generator=None, width=1280, height=720, steps_per_frame=1000):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Carver - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def fit_rect(self, img_w: int, img_h: int) -> pygame.Rect:
        """Largest integer-scaled rect for the bitmap, centered with padding."""
        padding = 40
        available_w = max(1, self.screen_width - padding * 2)
        available_h = max(1, self.screen_height - padding * 2)
        scale = max(1, min(available_w // img_w, available_h // img_h))
        w, h = img_w * scale, img_h * scale
        return pygame.Rect((self.screen_width - w) // 2, (self.screen_height - h) // 2, w, h)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

    def draw_maze(self):
        self.surface.fill(self.COLOR_BG)

        # surfarray expects (w, h, 3)
        rgb = to_rgb(render(self.grid)).transpose(1, 0, 2)
        maze_surface = pygame.surfarray.make_surface(rgb)
        rect = self.fit_rect(maze_surface.get_width(), maze_surface.get_height())
        self.surface.blit(pygame.transform.scale(maze_surface, rect.size), rect.topleft)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.width * self.grid.height
        status = "Done" if self.gen_finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            # Step Generator
            if gen_iter and not self.gen_finished:
                try:
                    for _ in range(self.steps_per_frame):
                        next(gen_iter)
                except StopIteration:
                    self.gen_finished = True

            self.draw_maze()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()

        # Window closed early: finish carving so the caller gets a complete maze
        if gen_iter and not self.gen_finished:
            for _ in gen_iter:
                pass
            self.gen_finished = True
