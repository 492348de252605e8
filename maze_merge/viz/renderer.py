import pygame

from maze_merge.core.cell import CellKind
from maze_merge.core.grid import Grid
from maze_merge.viz.recorder import GenerationRecorder


class Renderer:
    """Pygame window that animates a merge engine filling in a grid."""

    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_PASSAGE = (60, 100, 160)   # Blue tint
    COLOR_LAST = (255, 215, 0)       # Gold, most recently tested wall

    def __init__(self, grid: Grid, generator=None, width=800, height=800,
                 steps_per_frame=1, record=False, output_file=None):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = max(1, steps_per_frame)

        # Camera
        self.cell_size = 20.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = GenerationRecorder(active=record, output_file=output_file)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = False
        self.last_attempt = None
        self.merges = 0

    def fit_to_screen(self):
        """Zoom and pan so the whole grid is visible with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)
        self.cell_size = min(available_w / self.grid.size, available_h / self.grid.size)

        total = self.grid.size * self.cell_size
        self.offset_x = (self.screen_width - total) / 2
        self.offset_y = (self.screen_height - total) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Merge - {self.grid.size}x{self.grid.size}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.5, min(200.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def cell_color(self, x: int, y: int):
        if self.last_attempt is not None and (x, y) == tuple(self.last_attempt.wall):
            return self.COLOR_LAST
        if self.grid.kinds[y, x] == CellKind.WALL:
            return self.COLOR_WALL
        return self.COLOR_PASSAGE

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        # Culling: visible cell range only
        start_x = max(0, int(-self.offset_x / self.cell_size))
        start_y = max(0, int(-self.offset_y / self.cell_size))
        end_x = min(self.grid.size, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.size, int((self.screen_height - self.offset_y) / self.cell_size) + 1)

        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                px = int(x * self.cell_size + self.offset_x)
                py = int(y * self.cell_size + self.offset_y)
                pygame.draw.rect(self.surface, self.cell_color(x, y), (px, py, size, size))

    def draw_hud(self):
        status = "Done" if self.gen_finished else "Running"
        remaining = self.last_attempt.remaining if self.last_attempt else "-"
        info = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Size: {self.grid.size}x{self.grid.size}",
            f"Walls left: {remaining}",
            f"Merges: {self.merges}",
            f"Status: {status}",
            "REC" if self.recorder.active else "",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self, gen_iter):
        try:
            for _ in range(self.steps_per_frame):
                self.last_attempt = next(gen_iter)
                self.merges += self.last_attempt.merges
        except StopIteration:
            self.gen_finished = True
            self.last_attempt = None

    def run_loop(self, fps=30):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                self.step(gen_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active and not self.gen_finished:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(fps)

        self.recorder.stop()
        pygame.quit()
