# ============================================================================
# FILE: audioryx/core/errors.py
# ============================================================================
"""
Error taxonomy shared by services and the HTTP layer.

Every AudioryxError carries the HTTP status and the short machine-readable
tag that the global exception handler in main.py sends back to the client.
"""


class ConfigurationError(RuntimeError):
    """Raised at startup when the service must not run with its configuration"""


class AudioryxError(Exception):
    status_code = 500
    error = "error"
    detail = "Request failed"
    headers = None

    def __init__(self, detail: str = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class InvalidInput(AudioryxError):
    status_code = 400
    error = "invalid_input"
    detail = "Missing or malformed fields"


class DuplicateEmail(AudioryxError):
    status_code = 400
    error = "duplicate_email"
    detail = "Email already registered"


class InvalidCredentials(AudioryxError):
    status_code = 400
    error = "invalid_credentials"
    detail = "Invalid email or password"


class NoFile(AudioryxError):
    status_code = 400
    error = "no_file"
    detail = "No file uploaded"


class Unauthorized(AudioryxError):
    status_code = 401
    error = "unauthorized"
    detail = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(AudioryxError):
    status_code = 403
    error = "forbidden"
    detail = "Not allowed for this identity"


class NotConfigured(AudioryxError):
    status_code = 500
    error = "not_configured"
    detail = "Employee login is not configured"


class PersistenceFailure(AudioryxError):
    status_code = 500
    error = "persistence_failure"
    detail = "Storage operation failed"


class TokenError(Exception):
    """Token verification failure, turned into Unauthorized by the guard"""


class MissingToken(TokenError):
    pass


class InvalidToken(TokenError):
    pass
