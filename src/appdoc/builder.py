""" Document model builder.

Maps an application record to the template it should be rendered with and
the view model that template receives. Everything here is a pure function of
``(application, config)``; no store, renderer or packager is touched.
"""

from decimal import Decimal
from itertools import chain

from pyrsistent import PClass, field

from appdoc import logger

from .datadef import ApplicationState, describe_state
from .viewmodel import (
    ActivatedApplicationViewModel,
    ClosedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)

URI_SEPARATOR = "/"

IN_REVIEW_PREFIX = "Your application has been placed in review"
IN_REVIEW_SUFFIXES = (
    ("address", " pending outstanding address verification for FICA purposes."),
    ("bank", " pending outstanding bank account verification."),
)
IN_REVIEW_DEFAULT_SUFFIX = " because of suspicious account behaviour. Please contact support ASAP."


class DocumentModel(PClass):
    template_key = field(type=str, mandatory=True)
    view_model = field(mandatory=True)


def normalize_base_uri(base_uri):
    if base_uri.endswith(URI_SEPARATOR):
        return base_uri[:-len(URI_SEPARATOR)]

    return base_uri


def portfolio_funds(application):
    return tuple(chain.from_iterable(product.funds for product in application.products))


def portfolio_total_amount(application, tax_rate):
    return sum(
        ((fund.amount - fund.fees) * tax_rate for fund in portfolio_funds(application)),
        Decimal(0),
    )


def in_review_message(review):
    ''' First matching keyword in the review reason decides the suffix.
        The order of IN_REVIEW_SUFFIXES matters.
    '''
    reason = review.reason if review is not None else None

    for keyword, suffix in IN_REVIEW_SUFFIXES:
        if reason and keyword in reason:
            return IN_REVIEW_PREFIX + suffix

    return IN_REVIEW_PREFIX + IN_REVIEW_DEFAULT_SUFFIX


def common_fields(application, config):
    return dict(
        reference_number=application.reference_number,
        state=describe_state(application.state),
        full_name=application.person.full_name,
        applied_on=application.date,
        support_email=config.support_email,
        signature=config.signature,
    )


def portfolio_fields(application, config):
    return dict(
        legal_entity=application.legal_entity if application.is_legal_entity else None,
        portfolio_funds=portfolio_funds(application),
        portfolio_total_amount=portfolio_total_amount(application, config.tax_rate),
    )


def __closure__():
    STATE_BUILDERS = {}

    def register_state_builder(state, template_key):
        def decorator(func):
            if state in STATE_BUILDERS:
                raise ValueError("State builder is already registered: %s" % state)

            STATE_BUILDERS[state] = (template_key, func)
            logger.debug("Registered state builder [%s] => %s", state.value, template_key)
            return func

        return decorator

    def build_document_model(application, config):
        ''' Return the DocumentModel for the application's state, or None
            when no document is defined for that state.
        '''
        try:
            template_key, builder = STATE_BUILDERS[application.state]
        except KeyError:
            logger.warning(
                "The application is in state '%s' and no valid document can be generated for it.",
                application.state,
            )
            return None

        return DocumentModel(
            template_key=template_key,
            view_model=builder(application, config),
        )

    def list_state_builders():
        return {state: template_key for state, (template_key, _) in STATE_BUILDERS.items()}

    return register_state_builder, build_document_model, list_state_builders


register_state_builder, build_document_model, list_state_builders = __closure__()


@register_state_builder(ApplicationState.PENDING, "PendingApplication")
def build_pending(application, config):
    return PendingApplicationViewModel.create(common_fields(application, config))


@register_state_builder(ApplicationState.ACTIVATED, "ActivatedApplication")
def build_activated(application, config):
    return ActivatedApplicationViewModel.create({
        **common_fields(application, config),
        **portfolio_fields(application, config),
    })


@register_state_builder(ApplicationState.IN_REVIEW, "InReviewApplication")
def build_in_review(application, config):
    return InReviewApplicationViewModel.create({
        **common_fields(application, config),
        **portfolio_fields(application, config),
        "in_review_message": in_review_message(application.current_review),
        "in_review_information": application.current_review,
    })


@register_state_builder(ApplicationState.CLOSED, "ClosedApplication")
def build_closed(application, config):
    return ClosedApplicationViewModel.create({
        **common_fields(application, config),
        **portfolio_fields(application, config),
    })
