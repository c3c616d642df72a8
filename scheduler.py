"""
Таймер тиков игры.

Вызывает callback раз в interval миллисекунд. Смена интервала отменяет
ожидающий тик и планирует следующий заново. Работает в потоке вызывающего:
главный цикл pygame опрашивает его через poll().
"""
import time


def monotonic_ms():
    return int(time.monotonic() * 1000)


class TickScheduler:
    def __init__(self, callback, interval_ms, clock=None):
        self.callback = callback
        self.clock = clock or monotonic_ms
        self._interval = interval_ms
        self._due = None  # время следующего тика, None = остановлен

    @property
    def interval(self):
        return self._interval

    @property
    def active(self):
        return self._due is not None

    def start(self):
        self._due = self.clock() + self._interval

    def stop(self):
        self._due = None

    def set_interval(self, interval_ms):
        self._interval = interval_ms
        if self.active:
            self.start()

    def poll(self):
        """Вызвать callback, если подошло время. Не больше одного тика за вызов."""
        if self._due is None:
            return False
        now = self.clock()
        if now < self._due:
            return False

        self._due = now + self._interval
        self.callback()
        return True
