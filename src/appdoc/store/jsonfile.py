import json

from pathlib import Path

from appdoc import logger
from appdoc.error import ConfigurationError

from .memory import InMemoryApplicationStore


class JsonFileApplicationStore(InMemoryApplicationStore):
    ''' Load applications from a JSON file. The file holds either a list of
        application objects or an object with an ``applications`` list.
    '''

    def __init__(self, filepath):
        self._filepath = Path(filepath)
        super().__init__(self.load_records(self._filepath))

    @property
    def filepath(self):
        return self._filepath

    @staticmethod
    def load_records(filepath):
        try:
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Unable to load application store: {filepath}", details=str(e)
            ) from e

        if isinstance(data, dict):
            data = data.get("applications", [])

        if not isinstance(data, list):
            raise ConfigurationError(
                f"Invalid application store data [{filepath}]: expected a list of applications."
            )

        logger.info("Loaded %d application(s) from [%s]", len(data), filepath)
        return data
