import os

DEBUG = False

SUPPORT_EMAIL = "support@example.com"
SIGNATURE = "The Client Services Team"
TAX_RATE = 0.15
CURRENCY_SYMBOL = "R"

# Directory holding the bundled HTML templates. The CLI uses it as the
# default base URI.
TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

# Logical template key => location relative to the base URI.
TEMPLATE_PATHS = {
    "PendingApplication": "/pending_application.html",
    "ActivatedApplication": "/activated_application.html",
    "InReviewApplication": "/in_review_application.html",
    "ClosedApplication": "/closed_application.html",
}

# Timeout (seconds) when fetching templates from an http(s) base URI.
TEMPLATE_FETCH_TIMEOUT = 10

DEFAULT_STORE = "JsonFileApplicationStore"
