"""
client.py

pygame window for the game: renders GameState snapshots and forwards input
to the GameController. Holds no game logic.
"""

import pygame

from .config import GameConfig
from .constants import RENDER_FPS
from .controller import GameController
from .data_models import GameState
from .logger import get_logger

logger = get_logger(__name__)

SKY = (0, 122, 255)
PIPE_COLOR = (52, 199, 89)
BIRD_COLOR = (255, 204, 0)
WHITE = (255, 255, 255)
RED = (255, 59, 48)


class FlappyClient:
    def __init__(self, controller: GameController):
        self.controller = controller
        self.config: GameConfig = controller.config
        self.width = int(self.config.viewport_width)
        self.height = int(self.config.viewport_height)

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)

    def run(self):
        """The main client loop: input, then draw the latest snapshot."""
        self.controller.reset()
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) \
                        or (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1):
                    self.controller.start_and_jump()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    if self.controller.snapshot().game_over:
                        self.controller.restart()

            self._draw(self.controller.snapshot())

        self.controller.close()
        pygame.quit()

    def _to_screen(self, x: float, y: float):
        return self.width / 2 + x, self.height / 2 + y

    def _draw(self, state: GameState):
        cfg = self.config
        screen = self.screen
        screen.fill(SKY)

        # Pipes
        for pipe in state.pipes:
            # A pipe covers [x, x + pipe_width]
            left, _ = self._to_screen(pipe.x, 0)
            pygame.draw.rect(screen, PIPE_COLOR, (left, 0, cfg.pipe_width, pipe.gap_top))
            bottom_y = pipe.gap_top + cfg.gap_height
            pygame.draw.rect(screen, PIPE_COLOR, (left, bottom_y, cfg.pipe_width, self.height - bottom_y))

        # Bird
        bx, by = self._to_screen(cfg.bird_x, state.bird.offset)
        pygame.draw.circle(screen, BIRD_COLOR, (int(bx), int(by)), int(cfg.bird_radius))

        # HUD
        score_text = self.large_font.render(f"Score: {state.score}", True, WHITE)
        screen.blit(score_text, (self.width // 2 - score_text.get_width() // 2, 30))

        if state.game_over:
            over = self.large_font.render("Game Over", True, RED)
            screen.blit(over, (self.width // 2 - over.get_width() // 2, self.height // 2 - 40))
            hint = self.font.render("R = Restart", True, WHITE)
            screen.blit(hint, (self.width // 2 - hint.get_width() // 2, self.height // 2 + 10))
        elif not state.playing:
            hint = self.font.render("Space / Click = Jump", True, WHITE)
            screen.blit(hint, (self.width // 2 - hint.get_width() // 2, self.height // 2 + 60))

        pygame.display.flip()
