"""JSON persistence for the selected location."""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from tidetimes.core.config import StoreSettings, get_settings
from tidetimes.data.location import Location

logger = logging.getLogger(__name__)


class LocationStore:
    """Stores a single selected location in a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def create(cls, settings: StoreSettings | None = None) -> "LocationStore":
        """Create a store at the configured state file."""
        if settings is None:
            settings = get_settings().store
        return cls(settings.state_file)

    def save(self, location: Location) -> Path:
        """Save the location atomically. Returns the file path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_name(self.path.name + ".tmp")
        temp_file.write_text(location.model_dump_json(indent=2), encoding="utf-8")
        os.replace(temp_file, self.path)
        logger.debug("Saved location %s to %s", location.name, self.path)
        return self.path

    def load(self) -> Location | None:
        """Load the saved location, or None if missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            return Location.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable location file %s: %s", self.path, e)
            return None

    def clear(self) -> None:
        """Forget the saved location."""
        if self.path.exists():
            self.path.unlink()
