from appdoc import config, logger


DEBUG_APP_EXCEPTION = config.DEBUG_APP_EXCEPTION


class AppdocException(Exception):
    status_code = 500
    label = "Internal Error"
    errcode = "A00.000"

    def __init__(self, message, details=None, errcode=None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.errcode = errcode or self.errcode

        DEBUG_APP_EXCEPTION and logger.exception(message)

    def __str__(self):
        if self.details is None:
            return f"{self.errcode} [{self.status_code}] >> {self.message}"

        return f"{self.errcode} [{self.status_code}] >> {self.message} >> {self.details}"

    @property
    def content(self):
        if not self.details:
            return {"errcode": self.errcode, "message": self.message}

        return {"errcode": self.errcode, "message": self.message, "details": self.details}


class NotFoundError(AppdocException):
    label = "Not Found"
    status_code = 404
    errcode = "A00.404"


class ApplicationNotFoundError(NotFoundError):
    label = "Application Not Found"
    errcode = "A01.404"


class IntegrityViolationError(AppdocException):
    label = "Integrity Violation"
    status_code = 409
    errcode = "A00.409"


class UnsupportedStateError(AppdocException):
    label = "Unsupported Application State"
    status_code = 422
    errcode = "A00.422"


class ConfigurationError(AppdocException):
    label = "Configuration Error"
    status_code = 500
    errcode = "A00.500"


class RenderingError(AppdocException):
    label = "Rendering Failed"
    status_code = 502
    errcode = "A00.502"


class PackagingError(AppdocException):
    label = "Packaging Failed"
    status_code = 503
    errcode = "A00.503"
