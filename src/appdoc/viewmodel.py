""" View models handed to the template renderer, one per application state.

Each view model is a flat, immutable record. Templates address the fields
directly (``{{ full_name }}``, ``{{ portfolio_total_amount }}``).
"""

from datetime import date
from decimal import Decimal

from pyrsistent import PRecord, field, pvector_field

from .datadef import Fund, LegalEntity, Review


class PendingApplicationViewModel(PRecord):
    reference_number = field(type=str, mandatory=True)
    state = field(type=str, mandatory=True)
    full_name = field(type=str, mandatory=True)
    applied_on = field(type=date, mandatory=True)
    support_email = field(type=str, mandatory=True)
    signature = field(type=str, mandatory=True)


class ActivatedApplicationViewModel(PendingApplicationViewModel):
    legal_entity = field(type=(LegalEntity, type(None)), initial=None)
    portfolio_funds = pvector_field(Fund)
    portfolio_total_amount = field(type=Decimal, mandatory=True)


class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    in_review_message = field(type=str, mandatory=True)
    in_review_information = field(type=(Review, type(None)), initial=None)


class ClosedApplicationViewModel(ActivatedApplicationViewModel):
    pass
