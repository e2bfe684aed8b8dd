import enum
import uuid

from datetime import date, datetime
from decimal import Decimal

from dateutil import parser
from pyrsistent import PClass, PRecord, field, pvector_field


def identifier_factory(value):
    ''' Coerce a value to an application identifier.
        Strings that are not UUIDs map to a stable uuid5 so fixtures
        may use readable keys.
    '''
    if isinstance(value, uuid.UUID):
        return value

    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        if value and isinstance(value, str):
            return uuid.uuid5(uuid.NAMESPACE_URL, value)

        raise ValueError(f"Invalid application identifier: {value!r}")


def money_factory(value):
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def date_factory(value):
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value

    if isinstance(value, datetime):
        return value.date()

    return parser.parse(value).date()


def optional(record_cls):
    def _factory(value):
        if value is None or isinstance(value, record_cls):
            return value

        return record_cls.create(value)

    return _factory


class ApplicationState(enum.Enum):
    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"

    @property
    def description(self):
        return STATE_DESCRIPTIONS[self]


STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
}


def state_factory(value):
    ''' Known states become ApplicationState members, anything else is kept
        as the raw value so it can be reported downstream.
    '''
    if isinstance(value, ApplicationState):
        return value

    try:
        return ApplicationState(value)
    except ValueError:
        return str(value)


def describe_state(state):
    if isinstance(state, ApplicationState):
        return state.description

    return str(state)


class Person(PClass):
    first_name = field(type=str, mandatory=True)
    surname = field(type=str, mandatory=True)

    @property
    def full_name(self):
        return f"{self.first_name} {self.surname}"


class LegalEntity(PClass):
    name = field(type=str, mandatory=True)
    registration_number = field(type=(str, type(None)), initial=None)
    vat_number = field(type=(str, type(None)), initial=None)
    address = field(type=(str, type(None)), initial=None)


class Fund(PClass):
    name = field(type=(str, type(None)), initial=None)
    amount = field(type=Decimal, factory=money_factory, mandatory=True)
    fees = field(type=Decimal, factory=money_factory, initial=Decimal(0))


class Product(PClass):
    name = field(type=(str, type(None)), initial=None)
    funds = pvector_field(Fund)


class Review(PClass):
    reason = field(type=(str, type(None)), initial=None)
    reviewed_by = field(type=(str, type(None)), initial=None)
    reviewed_on = field(type=(date, type(None)), factory=date_factory, initial=None)
    notes = field(type=(str, type(None)), initial=None)


class Application(PClass):
    id = field(type=uuid.UUID, factory=identifier_factory, mandatory=True)
    reference_number = field(type=str, mandatory=True)
    state = field(type=(ApplicationState, str), factory=state_factory, mandatory=True)
    person = field(type=Person, factory=optional(Person), mandatory=True)
    date = field(type=date, factory=date_factory, mandatory=True)
    is_legal_entity = field(type=bool, initial=False)
    legal_entity = field(type=(LegalEntity, type(None)), factory=optional(LegalEntity), initial=None)
    products = pvector_field(Product)
    current_review = field(type=(Review, type(None)), factory=optional(Review), initial=None)


class DocumentConfig(PRecord):
    ''' Constants threaded through the document model builder. '''
    support_email = field(type=str, mandatory=True)
    signature = field(type=str, mandatory=True)
    tax_rate = field(type=Decimal, factory=money_factory, mandatory=True)

    @classmethod
    def from_config(cls, config):
        return cls(
            support_email=config.SUPPORT_EMAIL,
            signature=config.SIGNATURE,
            tax_rate=config.TAX_RATE,
        )
