"""SqliteFeedbackRepository: FeedbackRepository backed by a SQLite file."""

import sqlite3
from collections.abc import Sequence
from pathlib import Path

from feedback_triage.batch.domain.item import FeedbackItem
from feedback_triage.feedback.domain.record import FeedbackRecord, NewFeedback
from feedback_triage.feedback.domain.stats import (
    FeedbackStats,
    SentimentCount,
    SourceCount,
    UrgencySummary,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS feedback (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  source TEXT NOT NULL,
  content TEXT NOT NULL,
  author TEXT,
  created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
  sentiment TEXT,
  urgency INTEGER DEFAULT 3,
  themes TEXT
);
CREATE INDEX IF NOT EXISTS idx_source ON feedback(source);
CREATE INDEX IF NOT EXISTS idx_sentiment ON feedback(sentiment);
CREATE INDEX IF NOT EXISTS idx_created_at ON feedback(created_at);
CREATE INDEX IF NOT EXISTS idx_urgency ON feedback(urgency);
"""

_INSERT = (
    "INSERT INTO feedback (source, content, author, sentiment, urgency, themes) "
    "VALUES (?, ?, ?, ?, ?, ?)"
)

_MEMORY = ":memory:"


class SqliteFeedbackRepository:
    """Stores feedback in a single ``feedback`` table, creating it on first use.

    Satisfies the FeedbackRepository protocol structurally. Pass ``":memory:"``
    as the path for a throwaway in-process database.
    """

    def __init__(self, path: Path | str) -> None:
        if str(path) != _MEMORY:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(path))
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def close(self) -> None:
        self._conn.close()

    def add(self, feedback: NewFeedback) -> int:
        with self._conn:
            cur = self._conn.execute(_INSERT, _insert_params(feedback))
        return int(cur.lastrowid or 0)

    def add_many(self, feedback: Sequence[NewFeedback]) -> int:
        with self._conn:
            self._conn.executemany(_INSERT, [_insert_params(f) for f in feedback])
        return len(feedback)

    def list_feedback(
        self,
        source: str | None = None,
        sentiment: str | None = None,
        limit: int = 50,
    ) -> list[FeedbackRecord]:
        """Return feedback newest first, optionally filtered by source and sentiment."""
        query = "SELECT * FROM feedback WHERE 1=1"
        params: list[str | int] = []
        if source:
            query += " AND source = ?"
            params.append(source)
        if sentiment:
            query += " AND sentiment = ?"
            params.append(sentiment)
        query += " ORDER BY created_at DESC, id DESC LIMIT ?"
        params.append(limit)

        rows = self._conn.execute(query, params).fetchall()
        return [FeedbackRecord.model_validate(dict(row)) for row in rows]

    def get_content(self, feedback_id: int) -> str | None:
        row = self._conn.execute(
            "SELECT content FROM feedback WHERE id = ?", (feedback_id,)
        ).fetchone()
        return None if row is None else str(row["content"])

    def update_classification(
        self, feedback_id: int, sentiment: str, urgency: int
    ) -> bool:
        """Write sentiment and urgency onto a row. Returns False if no row matched."""
        with self._conn:
            cur = self._conn.execute(
                "UPDATE feedback SET sentiment = ?, urgency = ? WHERE id = ?",
                (sentiment, urgency, feedback_id),
            )
        return cur.rowcount > 0

    def list_unscored(self, limit: int = 50) -> list[FeedbackItem]:
        """Return rows that have not been classified yet, oldest first."""
        rows = self._conn.execute(
            "SELECT id, content FROM feedback WHERE sentiment IS NULL ORDER BY id LIMIT ?",
            (limit,),
        ).fetchall()
        return [FeedbackItem(id=row["id"], content=row["content"]) for row in rows]

    def stats(self) -> FeedbackStats:
        by_source = self._conn.execute(
            "SELECT source, COUNT(*) AS count FROM feedback GROUP BY source"
        ).fetchall()
        by_sentiment = self._conn.execute(
            "SELECT sentiment, COUNT(*) AS count FROM feedback "
            "WHERE sentiment IS NOT NULL GROUP BY sentiment"
        ).fetchall()
        urgency = self._conn.execute(
            "SELECT AVG(urgency) AS avg_urgency, MIN(urgency) AS min_urgency, "
            "MAX(urgency) AS max_urgency FROM feedback WHERE urgency IS NOT NULL"
        ).fetchone()
        total = self._conn.execute("SELECT COUNT(*) AS total FROM feedback").fetchone()

        return FeedbackStats(
            total=int(total["total"]),
            by_source=[SourceCount.model_validate(dict(row)) for row in by_source],
            by_sentiment=[
                SentimentCount.model_validate(dict(row)) for row in by_sentiment
            ],
            urgency=UrgencySummary.model_validate(dict(urgency)),
        )


def _insert_params(
    feedback: NewFeedback,
) -> tuple[str, str, str | None, str | None, int, str | None]:
    return (
        feedback.source,
        feedback.content,
        feedback.author,
        feedback.sentiment,
        feedback.urgency,
        feedback.themes,
    )
