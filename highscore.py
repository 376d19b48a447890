import json
import logging
from pathlib import Path

from config import HIGHSCORE_FILE, HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Persists the best score as a single key in a small JSON file.

    Unreadable or malformed files count as a high score of 0; write failures
    are logged and the game carries on.
    """

    def __init__(self, path: Path = HIGHSCORE_FILE, key: str = HIGHSCORE_KEY):
        self.path = Path(path)
        self.key = key
        self._best: int | None = None

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed high score file %s", self.path)
            return {}
        return raw

    def load(self) -> int:
        value = self._read_all().get(self.key, 0)
        try:
            best = max(0, int(value))
        except (TypeError, ValueError):
            logger.warning("Ignoring non-integer high score %r", value)
            best = 0
        self._best = best
        return best

    def save(self, score: int) -> bool:
        """Write ``score`` if it beats the stored value. Returns True on write."""
        best = self.load() if self._best is None else self._best
        if score <= best:
            return False

        data = self._read_all()
        data[self.key] = score
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return False

        self._best = score
        logger.info("New high score %d saved", score)
        return True
