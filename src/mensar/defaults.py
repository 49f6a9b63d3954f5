"""Persisted user defaults (default mensa and language).

Defaults live in a small JSON document in the per-user data directory.
A missing file simply means "use the built-in defaults"; a file that exists
but cannot be parsed is an error the user has to fix (or delete).
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mensar.errors import DefaultsError
from mensar.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MENSA = "polyterrasse"
DEFAULT_LANG = "en"


class Defaults(BaseModel):
    """Stored preferences; missing fields fall back to the built-ins."""

    model_config = ConfigDict(extra="ignore")

    mensa: str = Field(default=DEFAULT_MENSA, min_length=1)
    lang: str = Field(default=DEFAULT_LANG, min_length=1)


class Overrides(BaseModel):
    """Per-invocation values from the command line; None means not given."""

    mensa: str | None = None
    lang: str | None = None


class Settings(BaseModel):
    """Effective mensa and language for one invocation."""

    mensa: str
    lang: str


BUILTIN_DEFAULTS = Defaults()


def effective(
    overrides: Overrides,
    stored: Defaults | None,
    builtins: Defaults = BUILTIN_DEFAULTS,
) -> Settings:
    """Merge command-line overrides, stored defaults and built-ins.

    Precedence per field: override, then stored value, then built-in. Empty
    override strings count as not given.
    """
    layers = [overrides, stored, builtins]
    values = {}
    for field in ("mensa", "lang"):
        values[field] = next(
            getattr(layer, field)
            for layer in layers
            if layer is not None and getattr(layer, field)
        )
    return Settings(**values)


class DefaultsStore:
    """Reads and writes the defaults file.

    The file is read at most once per instance; ``set_mensa``/``set_lang``
    reuse the loaded value so one invocation writes the file at most once.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._loaded: Defaults | None = None

    def load(self) -> Defaults:
        """Load stored defaults.

        Returns:
            Stored defaults, with built-ins for any field not in the file.

        Raises:
            DefaultsError: If the file exists but is unreadable or invalid.
        """
        if self._loaded is not None:
            return self._loaded

        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("defaults_missing", path=str(self.path))
            self._loaded = Defaults()
            return self._loaded
        except OSError as e:
            raise DefaultsError(f"cannot read {self.path}: {e}") from e

        try:
            self._loaded = Defaults.model_validate_json(raw)
        except ValidationError as e:
            logger.info("defaults_corrupt", path=str(self.path), errors=e.error_count())
            raise DefaultsError(f"{self.path} is not a valid defaults file") from e

        logger.debug("defaults_loaded", path=str(self.path), **self._loaded.model_dump())
        return self._loaded

    def store(self, defaults: Defaults) -> None:
        """Write ``defaults`` to disk, creating the data directory if needed.

        Raises:
            DefaultsError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(defaults.model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise DefaultsError(f"cannot write {self.path}: {e}") from e

        self._loaded = defaults
        logger.info("defaults_stored", path=str(self.path), **defaults.model_dump())

    def set_mensa(self, name: str) -> Defaults:
        return self._update(mensa=name)

    def set_lang(self, name: str) -> Defaults:
        return self._update(lang=name)

    def _update(self, **changes: str) -> Defaults:
        current = self.load()
        try:
            updated = Defaults.model_validate({**current.model_dump(), **changes})
        except ValidationError as e:
            raise DefaultsError(", ".join(err["msg"] for err in e.errors())) from e
        self.store(updated)
        return updated
