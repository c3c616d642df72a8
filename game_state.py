"""
Состояние игры «Змейка» на квадратном поле.

Матрица поля (индексы [y, x]):
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова

Жизненный цикл партии:
  IDLE -> start -> RUNNING <-> PAUSED
  RUNNING -> столкновение -> OVER -> start -> RUNNING
"""
from collections import namedtuple
from enum import Enum

import numpy as np

from config import (GRID_COUNT, UP, DOWN, LEFT, RIGHT, NEUTRAL, SCORE_FOR_FOOD,
                    INITIAL_SNAKE_LENGTH, SPEED_TABLE, DEFAULT_SPEED_LEVEL,
                    RESET_SPEED_ON_RESTART)

EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 7

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# Снимок для отрисовки (только чтение)
Snapshot = namedtuple("Snapshot", [
    "body", "food", "score", "high_score", "run_state",
    "speed_level", "tick_interval",
])


def opposite(direction):
    return (-direction[0], -direction[1])


def speed_interval(level):
    """Интервал тика в мс для уровня скорости (невалидный уровень -> по умолчанию)"""
    return SPEED_TABLE[normalize_speed_level(level)]


def normalize_speed_level(level):
    """Уровни вне 1..10 и мусор заменяются на уровень по умолчанию"""
    if isinstance(level, bool):
        return DEFAULT_SPEED_LEVEL
    try:
        number = float(level)
    except (TypeError, ValueError):
        return DEFAULT_SPEED_LEVEL
    # Дробные уровни (9.5) не округляются
    if not number.is_integer():
        return DEFAULT_SPEED_LEVEL
    level = int(number)
    if level not in SPEED_TABLE:
        return DEFAULT_SPEED_LEVEL
    return level


class GameState:
    def __init__(self, grid_count=GRID_COUNT, high_score=0, rng=None,
                 on_high_score=None):
        """
        grid_count: размер стороны поля в клетках
        high_score: рекорд, прочитанный из хранилища
        rng: генератор с numpy-подобным randint (по умолчанию numpy.random)
        on_high_score: вызывается с новым рекордом при каждом его росте
        """
        self.grid_count = grid_count
        self.rng = rng if rng is not None else np.random
        self.on_high_score = on_high_score
        self._high_score = max(0, int(high_score or 0))
        self._speed_level = DEFAULT_SPEED_LEVEL

        # Новая игра: змейка из одной клетки в центре, стоит на месте
        c = grid_count // 2
        self._place([(c, c)], NEUTRAL, NEUTRAL)
        self.score = 0
        self.run_state = RunState.IDLE

    # --- Свойства -------------------------------------------------------

    @property
    def high_score(self):
        return self._high_score

    def restore_high_score(self, value):
        """Поднять рекорд до значения из хранилища (без сигнала на сохранение)"""
        self._high_score = max(self._high_score, max(0, int(value or 0)))
        return self._high_score

    @property
    def speed_level(self):
        return self._speed_level

    @property
    def tick_interval(self):
        return speed_interval(self._speed_level)

    @property
    def head(self):
        return self.snake[0]

    # --- Операции -------------------------------------------------------

    def set_pending_direction(self, direction):
        """
        Запомнить направление для следующего тика.
        Разворот на 180° относительно текущего направления молча игнорируется.
        """
        if self.run_state in (RunState.PAUSED, RunState.OVER):
            return
        try:
            direction = tuple(direction)
        except TypeError:
            return
        if direction not in DIRECTIONS:
            return
        if direction == opposite(self.direction):
            return
        self.next_direction = direction

    def tick(self):
        """Один шаг симуляции. Возвращает RunState после шага."""
        if self.run_state is not RunState.RUNNING:
            return self.run_state

        self.direction = self.next_direction
        dx, dy = self.direction
        head_x, head_y = self.snake[0]
        new_x, new_y = head_x + dx, head_y + dy

        if self._collides(new_x, new_y):
            self.run_state = RunState.OVER
            return self.run_state

        ate = (new_x, new_y) == self.food

        # Старая голова становится телом
        self.grid[head_y, head_x] = BODY
        self.snake.insert(0, (new_x, new_y))
        self.grid[new_y, new_x] = HEAD

        if ate:
            self.score += SCORE_FOR_FOOD
            if self.score > self._high_score:
                self._high_score = self.score
                if self.on_high_score is not None:
                    self.on_high_score(self._high_score)
            self._put_food(self._spawn_food())
        else:
            tail_x, tail_y = self.snake.pop()
            self.grid[tail_y, tail_x] = EMPTY

        return self.run_state

    def reset(self):
        """Сброс партии. Рекорд сохраняется."""
        c = self.grid_count // 2
        body = [(c - i, c) for i in range(INITIAL_SNAKE_LENGTH)]
        self._place(body, NEUTRAL, RIGHT)
        self.score = 0
        self.run_state = RunState.IDLE
        if RESET_SPEED_ON_RESTART:
            self._speed_level = DEFAULT_SPEED_LEVEL
        return self.run_state

    def start(self):
        if self.run_state is RunState.PAUSED:
            return self.toggle_pause()
        if self.run_state not in (RunState.IDLE, RunState.OVER):
            return self.run_state
        self.reset()
        self.direction = RIGHT
        self.run_state = RunState.RUNNING
        return self.run_state

    def toggle_pause(self):
        if self.run_state is RunState.RUNNING:
            self.run_state = RunState.PAUSED
        elif self.run_state is RunState.PAUSED:
            self.run_state = RunState.RUNNING
        return self.run_state

    def set_speed_level(self, level):
        """Новый уровень скорости. Возвращает интервал тика в мс."""
        self._speed_level = normalize_speed_level(level)
        return self.tick_interval

    def set_layout(self, body, direction, food=None):
        """
        Явно расставить змейку и еду (для тестов и сценариев).
        direction становится и текущим, и следующим направлением.
        """
        body = [tuple(cell) for cell in body]
        if not body:
            raise ValueError("body must contain at least one cell")
        if len(set(body)) != len(body):
            raise ValueError("body cells must be distinct")
        for x, y in body:
            if not self._inside(x, y):
                raise ValueError(f"cell {(x, y)} is outside the grid")
        direction = tuple(direction)
        if direction not in DIRECTIONS and direction != NEUTRAL:
            raise ValueError(f"bad direction {direction}")
        if food is not None:
            food = tuple(food)
            if food in body or not self._inside(*food):
                raise ValueError(f"food {food} must be a free cell on the grid")

        self._place(body, direction, direction, food)

    def snapshot(self):
        return Snapshot(
            body=tuple(self.snake),
            food=self.food,
            score=self.score,
            high_score=self._high_score,
            run_state=self.run_state,
            speed_level=self._speed_level,
            tick_interval=self.tick_interval,
        )

    # --- Внутреннее -----------------------------------------------------

    def _place(self, body, direction, next_direction, food=None):
        """Пересобрать матрицу поля с нуля"""
        self.grid = np.zeros((self.grid_count, self.grid_count), dtype=np.int8)
        self.snake = list(body)
        for x, y in self.snake:
            self.grid[y, x] = BODY
        head_x, head_y = self.snake[0]
        self.grid[head_y, head_x] = HEAD

        self.direction = direction
        self.next_direction = next_direction
        self.food = None
        self._put_food(food if food is not None else self._spawn_food())

    def _put_food(self, food):
        self.food = food
        if food is not None:
            self.grid[food[1], food[0]] = FOOD

    def _inside(self, x, y):
        return 0 <= x < self.grid_count and 0 <= y < self.grid_count

    def _collides(self, x, y):
        if not self._inside(x, y):
            return True
        # Хвост тоже считается: он ещё не сдвинулся
        return self.grid[y, x] in (BODY, HEAD)

    def _spawn_food(self):
        """Случайная свободная клетка, None если поле занято целиком"""
        n = self.grid_count
        for _ in range(n * n):
            x = int(self.rng.randint(n))
            y = int(self.rng.randint(n))
            if self.grid[y, x] == EMPTY:
                return (x, y)

        # Змейка почти заполнила поле: выбираем из реально свободных клеток
        empty = np.argwhere(self.grid == EMPTY)
        if len(empty) == 0:
            return None
        y, x = empty[int(self.rng.randint(len(empty)))]
        return (int(x), int(y))
