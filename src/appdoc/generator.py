""" Application document generator.

Resolves an application record, builds the document model for its state,
renders the state template and packages the markup as a PDF::

    generator = ApplicationDocumentGenerator(store)
    pdf_bytes = generator.generate(application_id, "https://cdn.example.com/templates/")

`generate` returns None when nothing can be produced (unknown application,
unsupported state). Integrity, rendering and packaging faults are raised.
"""

from appdoc import config, logger

from .builder import build_document_model, normalize_base_uri
from .datadef import DocumentConfig
from .engine import TemplateLocator, jinja2renderer
from .error import ConfigurationError
from .packager import APPLICATION_PDF_OPTIONS, WkHtml2PdfPackager
from .store import ApplicationStore


def _required(name, value):
    if value is None:
        raise ConfigurationError(f"ApplicationDocumentGenerator requires [{name}].")

    return value


class ApplicationDocumentGenerator(object):
    def __init__(
        self,
        store,
        locator=None,
        renderer=None,
        packager=None,
        document_config=None,
        pdf_options=APPLICATION_PDF_OPTIONS,
    ):
        self._store = _required("store", store)
        self._locator = locator or TemplateLocator()
        self._renderer = renderer or jinja2renderer
        self._packager = packager or WkHtml2PdfPackager()
        self._document_config = document_config or DocumentConfig.from_config(config)
        self._pdf_options = _required("pdf_options", pdf_options)

    @property
    def document_config(self):
        return self._document_config

    def resolve(self, application_id):
        application = self._store.find(application_id)
        if application is None:
            logger.warning("No application found for id '%s'", application_id)

        return application

    def template_location(self, base_uri, template_key):
        return normalize_base_uri(_required("base_uri", base_uri)) + self._locator.resolve(template_key)

    def render(self, application_id, base_uri):
        ''' Return the rendered markup, or None when no document applies. '''
        application = self.resolve(application_id)
        if application is None:
            return None

        return self.render_application(application, base_uri)

    def render_application(self, application, base_uri):
        document = build_document_model(application, self._document_config)
        if document is None:
            return None

        location = self.template_location(base_uri, document.template_key)
        logger.info(
            "Rendering [%s] for application [%s] from [%s]",
            document.template_key, application.reference_number, location,
        )
        return self._renderer.render(location, dict(document.view_model))

    def package(self, markup):
        pdf = self._packager.from_markup(markup, self._pdf_options)
        return pdf.to_bytes()

    def generate(self, application_id, base_uri):
        markup = self.render(application_id, base_uri)
        if markup is None:
            return None

        return self.package(markup)

    def generate_application(self, application, base_uri):
        markup = self.render_application(application, base_uri)
        if markup is None:
            return None

        return self.package(markup)


def generate_document(application_id, base_uri=None, store=None, **kwargs):
    ''' Shortcut building a generator from configuration defaults. '''
    if store is None:
        raise ConfigurationError("generate_document requires an application store.")

    if isinstance(store, str):
        store = ApplicationStore.get_store(config.DEFAULT_STORE, filepath=store)

    generator = ApplicationDocumentGenerator(store, **kwargs)
    return generator.generate(application_id, base_uri or config.TEMPLATE_DIR)
