from appdoc import logger
from appdoc.datadef import Application, identifier_factory

from . import ApplicationStore


class InMemoryApplicationStore(ApplicationStore):
    ''' Records are kept in insertion order. Duplicate identifiers are
        accepted on insert so that lookups can report them.
    '''

    def __init__(self, records=()):
        self._records = []
        for record in records:
            self.insert(record)

    def insert(self, record_or_data):
        record = record_or_data
        if not isinstance(record, Application):
            record = Application.create(record_or_data)

        self._records.append(record)
        return record

    def query(self, application_id):
        try:
            application_id = identifier_factory(application_id)
        except ValueError:
            # No record can carry an identifier that does not parse.
            logger.debug("Invalid application identifier: %r", application_id)
            return ()

        return (record for record in self._records if record.id == application_id)

    def __len__(self):
        return len(self._records)
