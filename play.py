"""
Классическая змейка на pygame.

Использование:
    python play.py                  # Обычная игра
    python play.py --speed 8        # Стартовый уровень скорости (1-10)
    python play.py --db scores.db   # Другой файл рекорда
    python play.py --seed 42        # Воспроизводимое появление еды

Управление:
    Стрелки / WASD  направление
    SPACE           старт / пауза
    R               рестарт
    + / -           скорость
    1..9, 0         уровень скорости 1..10
    ESC             выход
"""
import argparse

import numpy as np
import pygame

from config import (GRID_COUNT, CELL_SIZE, WIDTH, HEIGHT, PANEL_WIDTH, FPS,
                    BACKGROUND, GRID, SNAKE, SNAKE_HIGHLIGHT, HEAD, HEAD_HIGHLIGHT,
                    FOOD, FOOD_HIGHLIGHT, PANEL, WHITE, MUTED, OVERLAY,
                    UP, DOWN, LEFT, RIGHT, DEFAULT_SPEED_LEVEL, HIGH_SCORE_DB)
from controller import GameController
from database import HighScoreStore
from game_state import GameState, RunState

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

# 1..9 -> уровни 1..9, 0 -> уровень 10
KEY_SPEED_LEVELS = {getattr(pygame, f"K_{i}"): i for i in range(1, 10)}
KEY_SPEED_LEVELS[pygame.K_0] = 10


class SnakeWindow:
    def __init__(self, controller, fps=FPS):
        pygame.init()
        self.controller = controller

        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28, bold=True)
        self.fps = fps

    def draw_grid(self):
        for i in range(GRID_COUNT + 1):
            pygame.draw.line(self.screen, GRID, (i * CELL_SIZE, 0), (i * CELL_SIZE, HEIGHT))
            pygame.draw.line(self.screen, GRID, (0, i * CELL_SIZE), (WIDTH, i * CELL_SIZE))

    def draw_snake(self, body):
        for i, (x, y) in enumerate(body):
            # Голова другим цветом
            color, highlight = (HEAD, HEAD_HIGHLIGHT) if i == 0 else (SNAKE, SNAKE_HIGHLIGHT)
            outer = pygame.Rect(x * CELL_SIZE + 1, y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
            inner = pygame.Rect(x * CELL_SIZE + 3, y * CELL_SIZE + 3, CELL_SIZE - 6, CELL_SIZE - 6)
            pygame.draw.rect(self.screen, color, outer)
            pygame.draw.rect(self.screen, highlight, inner)

    def draw_food(self, food):
        if food is None:
            return
        x, y = food
        center = (x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)
        pygame.draw.circle(self.screen, FOOD, center, CELL_SIZE // 2 - 2)
        pygame.draw.circle(self.screen, FOOD_HIGHLIGHT, (center[0] - 3, center[1] - 3), 3)

    def draw_game_over(self, score):
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.screen.blit(overlay, (0, 0))

        lines = [
            (self.big_font, "GAME OVER"),
            (self.font, f"Score: {score}"),
            (self.font, "SPACE to play again"),
        ]
        y = HEIGHT // 2 - 40
        for font, text in lines:
            surf = font.render(text, True, WHITE)
            self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, y)))
            y += 35

    def draw_panel(self, snapshot):
        panel = pygame.Rect(WIDTH, 0, PANEL_WIDTH, HEIGHT)
        pygame.draw.rect(self.screen, PANEL, panel)

        stats = [
            f"Score: {snapshot.score}",
            f"Best: {snapshot.high_score}",
            f"Length: {len(snapshot.body)}",
            f"Speed: {snapshot.speed_level} ({snapshot.tick_interval} ms)",
            "",
            self.controller.status_text(),
            "",
            "--- Controls ---",
            "Arrows/WASD Move",
            "SPACE Start/Pause",
            "R Restart",
            "+/- 1-0 Speed",
            "ESC Quit",
        ]

        for i, text in enumerate(stats):
            color = MUTED if text.startswith("---") else WHITE
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (WIDTH + 10, 20 + i * 25))

    def draw(self):
        snapshot = self.controller.snapshot()

        self.screen.fill(BACKGROUND)
        self.draw_grid()
        self.draw_snake(snapshot.body)
        self.draw_food(snapshot.food)
        if snapshot.run_state is RunState.OVER:
            self.draw_game_over(snapshot.score)
        self.draw_panel(snapshot)

        pygame.display.flip()

    def handle_events(self):
        """Обработка событий. False = выход."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key in KEY_DIRECTIONS:
                self.controller.press_direction(KEY_DIRECTIONS[event.key])
            elif event.key == pygame.K_SPACE:
                self.controller.press_space()
            elif event.key == pygame.K_r:
                self.controller.restart()
            elif event.key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
                self.controller.speed_up()
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self.controller.slow_down()
            elif event.key in KEY_SPEED_LEVELS:
                self.controller.set_speed_level(KEY_SPEED_LEVELS[event.key])

        return True

    def play(self):
        running = True
        while running:
            running = self.handle_events()
            self.controller.update()
            self.draw()
            self.clock.tick(self.fps)

        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Classic Snake")
    parser.add_argument("--speed", "-s", type=int, default=DEFAULT_SPEED_LEVEL,
                        help="Speed level 1-10")
    parser.add_argument("--db", type=str, default=HIGH_SCORE_DB,
                        help="Path to the high score database")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frames per second for drawing")
    args = parser.parse_args(argv)

    store = HighScoreStore(args.db)
    high_score = store.load_high_score()
    print(f"High score: {high_score}")

    rng = np.random.RandomState(args.seed) if args.seed is not None else None
    state = GameState(high_score=high_score, rng=rng)
    controller = GameController(state, store=store, clock=pygame.time.get_ticks)
    controller.set_speed_level(args.speed)

    try:
        SnakeWindow(controller, fps=args.fps).play()
    finally:
        store.close()

    print(f"Best: {controller.state.high_score}")


if __name__ == "__main__":
    main()
