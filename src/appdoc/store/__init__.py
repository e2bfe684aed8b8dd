from appdoc import logger
from appdoc.error import IntegrityViolationError

_STORE_REGISTRY = {}


class ApplicationStore(object):
    ''' Look up application records by identifier.

        Subclasses only implement `query`, which yields every record
        carrying the identifier. `find` turns that into exactly one record,
        None, or an integrity fault.
    '''

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        key = cls.__name__
        if key in _STORE_REGISTRY:
            raise ValueError(f'Application store already registered: {key}')

        _STORE_REGISTRY[key] = cls
        logger.debug('Registered application store: %s => %s', key, cls)

    def query(self, application_id):
        raise NotImplementedError('ApplicationStore.query is not implemented.')

    def find(self, application_id):
        matches = list(self.query(application_id))

        if not matches:
            return None

        if len(matches) > 1:
            raise IntegrityViolationError(
                f"Multiple applications share the identifier '{application_id}'.",
                details={"application_id": str(application_id), "matches": len(matches)},
            )

        return matches[0]

    @classmethod
    def get_store(cls, name, **kwargs):
        if name not in _STORE_REGISTRY:
            raise ValueError(f'Application store not found: {name}')

        return _STORE_REGISTRY[name](**kwargs)


from .memory import InMemoryApplicationStore  # noqa: E402
from .jsonfile import JsonFileApplicationStore  # noqa: E402

__all__ = (
    "ApplicationStore",
    "InMemoryApplicationStore",
    "JsonFileApplicationStore",
)
