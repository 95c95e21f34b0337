"""Where the client keeps its access/refresh token pair."""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class TokenStore:
    """
    Interface for token persistence.

    Subclasses implement ``load`` and ``save``; the accessors are shared.
    """

    def load(self) -> dict:
        raise NotImplementedError

    def save(self, tokens: dict) -> None:
        raise NotImplementedError

    def get_access_token(self) -> Optional[str]:
        return self.load().get('access_token')

    def get_refresh_token(self) -> Optional[str]:
        return self.load().get('refresh_token')

    def set_tokens(self, access_token: str, refresh_token: str, expires_in: Optional[int] = None) -> None:
        self.save({
            'access_token': access_token,
            'refresh_token': refresh_token,
            'expires_in': expires_in,
        })

    def clear(self) -> None:
        self.save({})


class MemoryTokenStore(TokenStore):

    def __init__(self):
        self._tokens = {}

    def load(self) -> dict:
        return dict(self._tokens)

    def save(self, tokens: dict) -> None:
        self._tokens = dict(tokens)


class FileTokenStore(TokenStore):
    """Tokens in a small JSON file. A missing or unreadable file means signed out."""

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def load(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Could not read token file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, tokens: dict) -> None:
        if not tokens:
            self.path.unlink(missing_ok=True)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(tokens), encoding='utf-8')
