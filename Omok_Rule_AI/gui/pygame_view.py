"""Pygame-based board renderer and input loop driving a GameSession."""

try:
    from Board import AI, HUMAN
except ImportError:
    from Omok_Rule_AI.Board import AI, HUMAN


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (240, 217, 181)
    COLOR_GRID = (51, 51, 51)
    COLOR_TEXT = (230, 230, 230)
    COLOR_RED = (200, 0, 0)
    COLOR_WIN = (230, 60, 60)
    COLOR_STONES = {HUMAN: (20, 20, 20), AI: (245, 245, 245)}

    PANEL_HEIGHT = 80
    MARGIN_RATIO = 23 / 540
    FRAME_DELAY_MS = 10

    def __init__(self, board_size=15, window_size=800):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Omok Rule AI")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        # The board sits below the info panel
        self.board_display_size = window_size - self.PANEL_HEIGHT
        self.margin_px = self.board_display_size * self.MARGIN_RATIO
        self.board_surface = self._build_board_surface(self.board_display_size)
        self.tile_size = (self.board_display_size - 2 * self.margin_px) / (board_size - 1)
        self.stone_radius = self.tile_size * 0.45

        self.board_origin = (
            (window_size - self.board_display_size) // 2,
            self.PANEL_HEIGHT,
        )

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def _cell_center(self, row, col):
        gx, gy = self._grid_origin()
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px))
        surf.fill(self.COLOR_WOOD)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        tile = (grid_end - grid_start) / (self.board_size - 1)
        for i in range(self.board_size):
            offset = grid_start + i * tile
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        return surf

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stones(self, snapshot):
        for r, row in enumerate(snapshot.board):
            for c, stone in enumerate(row):
                if stone not in self.COLOR_STONES:
                    continue
                center = self._cell_center(r, c)
                self._pygame.draw.circle(self.screen, self.COLOR_STONES[stone], center, self.stone_radius)
                self._pygame.draw.circle(self.screen, self.COLOR_GRID, center, self.stone_radius, 1)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        # A simple red dot in the center of the stone
        self._pygame.draw.circle(self.screen, self.COLOR_RED, self._cell_center(*last_move), self.tile_size * 0.15)

    def _draw_win_line(self, win_line):
        if not win_line:
            return
        for r, c in win_line:
            self._pygame.draw.circle(self.screen, self.COLOR_WIN, self._cell_center(r, c), self.stone_radius, 3)
        start = self._cell_center(*win_line[0])
        end = self._cell_center(*win_line[-1])
        self._pygame.draw.line(self.screen, self.COLOR_WIN, start, end, 3)

    def _draw_info_panel(self, snapshot):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)

        font = self.font_large if snapshot.is_over else self.font_medium
        self._draw_text(snapshot.status_text, font, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT * 0.4))
        self._draw_text("U: undo   R: restart", self.font_small, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT * 0.8))

    def render(self, snapshot):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(snapshot)
        self._draw_win_line(snapshot.win_line)
        self._draw_last_move_marker(snapshot.last_move)
        self._draw_info_panel(snapshot)

        self._pygame.display.flip()

    def coords_from_mouse(self, pos):
        """Map a pixel position to (row, col), or None when outside the grid."""
        mx, my = pos
        gx, gy = self._grid_origin()

        half = self.tile_size / 2
        span = self.tile_size * (self.board_size - 1)
        if not (gx - half <= mx <= gx + span + half and gy - half <= my <= gy + span + half):
            return None

        col = int(round((mx - gx) / self.tile_size))
        row = int(round((my - gy) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def run(self, session):
        """Event loop: clicks submit moves, U undoes, R restarts; the session's timer is pumped each frame."""
        pygame = self._pygame
        unsubscribe = session.subscribe(self.render)
        self.render(session.snapshot)
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        coords = self.coords_from_mouse(event.pos)
                        if coords:
                            session.submit_move(*coords)
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_u:
                            session.undo()
                        elif event.key == pygame.K_r:
                            session.restart()
                        elif event.key in (pygame.K_ESCAPE, pygame.K_q):
                            return

                session.tick()
                pygame.time.delay(self.FRAME_DELAY_MS)
        finally:
            unsubscribe()

    def close(self):
        self._pygame.quit()
