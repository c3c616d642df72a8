"""
SQLite база данных для хранения рекорда.
"""
import sqlite3

from config import HIGH_SCORE_DB, HIGH_SCORE_KEY


class HighScoreStore:
    def __init__(self, db_path=HIGH_SCORE_DB, key=HIGH_SCORE_KEY):
        self.db_path = db_path
        self.key = key
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        self.conn = sqlite3.connect(self.db_path)
        cursor = self.conn.cursor()

        # Таблица настроек: ключ -> значение
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        self.conn.commit()

    def load_high_score(self):
        """Прочитать рекорд (0, если записи нет или она испорчена)"""
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT value FROM settings WHERE key = ?
        ''', (self.key,))
        row = cursor.fetchone()
        if row is None:
            return 0
        try:
            value = int(row[0])
        except (TypeError, ValueError):
            return 0
        return max(0, value)

    def save_high_score(self, value):
        """Сохранить рекорд. Сохранённое значение никогда не уменьшается."""
        value = max(value, self.load_high_score())
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO settings (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value = excluded.value,
                updated_at = CURRENT_TIMESTAMP
        ''', (self.key, str(int(value))))
        self.conn.commit()
        return value

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None
