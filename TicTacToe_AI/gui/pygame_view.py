"""Pygame-based board renderer and mouse input loop."""

try:
    from Player import Player
    from engine import rules
    from engine.rules import GameState
except ImportError:
    from TicTacToe_AI.Player import Player
    from TicTacToe_AI.engine import rules
    from TicTacToe_AI.engine.rules import GameState


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (30, 30, 30)
    COLOR_PANEL = (53, 53, 53)
    COLOR_GRID = (85, 85, 85)
    COLOR_TEXT = (230, 230, 230)
    COLOR_HUMAN = (200, 60, 60)
    COLOR_COMPUTER = (138, 202, 255)
    COLOR_WIN = (255, 215, 0)

    PANEL_HEIGHT = 60
    LEFT_BUTTON = 1
    FPS = 30

    def __init__(self, game, window_size=480, delay=0.5):
        import pygame

        self.game = game
        self.window_size = window_size
        self.delay_ms = max(1, int(delay * 1000))
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT))
        pygame.display.set_caption("Tic Tac Toe")

        self.font_large = pygame.font.Font(None, 44)
        self.font_medium = pygame.font.Font(None, 30)
        self.cell_px = window_size / game.board.SIZE
        self.computer_event = pygame.USEREVENT + 1

    def _cell_center(self, index):
        row, col = divmod(index, self.game.board.SIZE)
        return (col + 0.5) * self.cell_px, self.PANEL_HEIGHT + (row + 0.5) * self.cell_px

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        top = self.PANEL_HEIGHT
        for i in range(1, self.game.board.SIZE):
            offset = i * self.cell_px
            pygame.draw.line(self.screen, self.COLOR_GRID, (offset, top), (offset, top + self.window_size), 4)
            pygame.draw.line(self.screen, self.COLOR_GRID, (0, top + offset), (self.window_size, top + offset), 4)

    def _draw_marks(self, board):
        pygame = self._pygame
        radius = self.cell_px * 0.3
        for index, cell in enumerate(board.cells):
            if cell is None:
                continue
            cx, cy = self._cell_center(index)
            if cell is Player.HUMAN:
                pygame.draw.line(self.screen, self.COLOR_HUMAN, (cx - radius, cy - radius), (cx + radius, cy + radius), 8)
                pygame.draw.line(self.screen, self.COLOR_HUMAN, (cx + radius, cy - radius), (cx - radius, cy + radius), 8)
            else:
                pygame.draw.circle(self.screen, self.COLOR_COMPUTER, (cx, cy), radius, 8)

    def _draw_win_line(self, game):
        if game.state is GameState.HUMAN_WIN:
            line = rules.winning_line(game.board, Player.HUMAN)
        elif game.state is GameState.COMPUTER_WIN:
            line = rules.winning_line(game.board, Player.COMPUTER)
        else:
            return
        start = self._cell_center(line[0])
        end = self._cell_center(line[-1])
        self._pygame.draw.line(self.screen, self.COLOR_WIN, start, end, 6)

    def _draw_info_panel(self, game):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)
        center = (self.window_size / 2, self.PANEL_HEIGHT / 2)

        if game.alert is not None:
            self._draw_text(f"{game.alert.title} (click to {game.alert.button_title.lower()})", self.font_medium, self.COLOR_TEXT, center)
        elif game.is_board_disabled:
            self._draw_text("Computer is thinking...", self.font_medium, self.COLOR_TEXT, center)
        else:
            self._draw_text("Your move", self.font_large, self.COLOR_TEXT, center)

    def render(self, game):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_info_panel(game)
        self._draw_grid()
        self._draw_marks(game.board)
        self._draw_win_line(game)
        self._pygame.display.flip()

    def _get_index_from_mouse(self, pos):
        mx, my = pos
        my -= self.PANEL_HEIGHT
        if not (0 <= mx < self.window_size and 0 <= my < self.window_size):
            return None
        size = self.game.board.SIZE
        col = min(int(mx // self.cell_px), size - 1)
        row = min(int(my // self.cell_px), size - 1)
        return row * size + col

    def _on_change(self, game):
        if game.is_board_disabled and not game.is_over:
            self._pygame.time.set_timer(self.computer_event, self.delay_ms, loops=1)
        self.render(game)

    def _reset(self):
        self._pygame.time.set_timer(self.computer_event, 0)
        self.game.reset_game()

    def run(self):
        pygame = self._pygame
        clock = pygame.time.Clock()
        self.game.subscribe(self._on_change)
        self.render(self.game)
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == self.computer_event:
                        self.game.computer_move()
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            return
                        if event.key == pygame.K_r:
                            self._reset()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == self.LEFT_BUTTON:
                        if self.game.is_over:
                            self._reset()
                            continue
                        index = self._get_index_from_mouse(event.pos)
                        if index is not None and self.game.is_human_turn:
                            self.game.process_move(index)
                clock.tick(self.FPS)
        finally:
            self.game.unsubscribe(self._on_change)
            self.close()

    def close(self):
        self._pygame.quit()
