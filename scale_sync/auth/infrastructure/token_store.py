"""JSON file persistence for OAuth tokens."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ...errors import DeserializationError, TokenIOError
from ...models.token import Token


class TokenFileStore:
    """Read and atomically rewrite a single token file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> Token:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TokenIOError(f"Cannot read token file {self._path}: {exc}") from exc

        try:
            return Token.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise DeserializationError(
                f"Token file {self._path} is malformed: {exc}"
            ) from exc

    def dump(self, token: Token) -> None:
        """Write ``token`` to a sibling temp file and move it over the target."""

        data = json.dumps(token.model_dump(), indent=2)
        directory = self._path.parent if str(self._path.parent) else Path(".")
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(data)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise TokenIOError(f"Cannot write token file {self._path}: {exc}") from exc


__all__ = ["TokenFileStore"]
