"""
Связка игры: состояние + таймер тиков + хранилище рекорда.

Команды ввода (направление, пробел, рестарт, скорость) превращаются
в вызовы GameState, а таймер запускается и останавливается вместе с партией.
"""
from game_state import GameState, RunState
from scheduler import TickScheduler
from config import MIN_SPEED_LEVEL, MAX_SPEED_LEVEL


class GameController:
    def __init__(self, state=None, store=None, clock=None):
        self.store = store
        if state is None:
            state = GameState()
        if store is not None:
            state.restore_high_score(store.load_high_score())
        self.state = state
        self.state.on_high_score = self._on_high_score
        self.scheduler = TickScheduler(self._on_tick, self.state.tick_interval,
                                       clock=clock)

    # --- Команды ввода --------------------------------------------------

    def press_direction(self, direction):
        """Стрелка: если игра не идёт, сначала запускаем её"""
        if self.state.run_state in (RunState.IDLE, RunState.OVER):
            self.start_game()
        if self.state.run_state is RunState.PAUSED:
            return
        self.state.set_pending_direction(direction)

    def press_space(self):
        if self.state.run_state in (RunState.IDLE, RunState.OVER):
            self.start_game()
        else:
            self.toggle_pause()

    def start_game(self):
        if self.state.start() is RunState.RUNNING and not self.scheduler.active:
            self.scheduler.start()

    def toggle_pause(self):
        run_state = self.state.toggle_pause()
        if run_state is RunState.PAUSED:
            self.scheduler.stop()
        elif run_state is RunState.RUNNING:
            self.scheduler.start()

    def restart(self):
        self.scheduler.stop()
        self.state.reset()

    def set_speed_level(self, level):
        interval = self.state.set_speed_level(level)
        self.scheduler.set_interval(interval)
        return self.state.speed_level

    def speed_up(self):
        return self.set_speed_level(min(MAX_SPEED_LEVEL, self.state.speed_level + 1))

    def slow_down(self):
        return self.set_speed_level(max(MIN_SPEED_LEVEL, self.state.speed_level - 1))

    # --- Цикл -----------------------------------------------------------

    def update(self):
        """Вызывается каждый кадр. True, если прошёл тик."""
        return self.scheduler.poll()

    def status_text(self):
        run_state = self.state.run_state
        if run_state is RunState.RUNNING:
            return "Playing"
        if run_state is RunState.PAUSED:
            return "Paused"
        if run_state is RunState.OVER:
            return f"Game over! Final score: {self.state.score}"
        return "Press SPACE to start"

    def snapshot(self):
        return self.state.snapshot()

    def _on_tick(self):
        if self.state.tick() is RunState.OVER:
            self.scheduler.stop()
            print(f"Game over: Score {self.state.score} | Best: {self.state.high_score}")

    def _on_high_score(self, value):
        print(f"New record: {value}")
        if self.store is not None:
            self.store.save_high_score(value)
