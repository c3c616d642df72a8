# Настройки игры
# Поле 20x20 клеток по 20 пикселей
GRID_COUNT = 20
CELL_SIZE = 20
WIDTH = GRID_COUNT * CELL_SIZE   # 400
HEIGHT = GRID_COUNT * CELL_SIZE  # 400
PANEL_WIDTH = 200

# Цвета
BACKGROUND = (26, 32, 44)
GRID = (45, 55, 72)
SNAKE = (45, 90, 39)
SNAKE_HIGHLIGHT = (74, 124, 89)
HEAD = (255, 107, 53)
HEAD_HIGHLIGHT = (255, 140, 66)
FOOD = (229, 62, 62)
FOOD_HIGHLIGHT = (252, 129, 129)
PANEL = (40, 40, 40)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
MUTED = (150, 150, 150)
OVERLAY = (0, 0, 0, 180)

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
NEUTRAL = (0, 0)

# Очки за еду
SCORE_FOR_FOOD = 10

# Начальная длина змейки после рестарта
INITIAL_SNAKE_LENGTH = 3

# Скорость: уровень -> интервал тика в мс (чем выше уровень, тем быстрее)
SPEED_TABLE = {
    1: 300,  # самый медленный
    2: 250,
    3: 200,
    4: 175,
    5: 150,  # по умолчанию
    6: 125,
    7: 100,
    8: 80,
    9: 60,
    10: 40,  # самый быстрый
}
MIN_SPEED_LEVEL = 1
MAX_SPEED_LEVEL = 10
DEFAULT_SPEED_LEVEL = 5

# Сбрасывать ли скорость на уровень по умолчанию при рестарте
RESET_SPEED_ON_RESTART = False

# Рекорд
HIGH_SCORE_DB = "snake_scores.db"
HIGH_SCORE_KEY = "snakeHighScore"

# Частота кадров отрисовки (тики игры идут по своему таймеру)
FPS = 60
