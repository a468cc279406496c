"""Domain errors raised by the services and rendered by the app error handlers."""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 400
    message = 'Request could not be processed'

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.errors = errors

    def to_dict(self):
        body = {'success': False, 'message': self.message}
        if self.errors:
            body['errors'] = self.errors
        return body


class ValidationFailed(ServiceError):
    message = 'Validation failed'

    def __init__(self, errors, message=None):
        super().__init__(message, errors=list(errors))


class InvalidStatus(ServiceError):
    message = 'Invalid status'


class DuplicateIdentity(ServiceError):
    message = 'This username or email is already in use'


class DuplicateName(ServiceError):
    message = 'This product name is already in use'


class NotFound(ServiceError):
    status_code = 404
    message = 'Resource not found'


class Unauthenticated(ServiceError):
    status_code = 401
    message = 'Authentication required'


class BadCredential(Unauthenticated):
    message = 'Invalid username or password'


class TokenMissing(Unauthenticated):
    message = 'Access token required'


class TokenInvalid(Unauthenticated):
    message = 'Invalid or expired token'


class TokenExpired(TokenInvalid):
    pass


class Forbidden(ServiceError):
    status_code = 403
    message = 'Admin privileges required'


class InternalError(ServiceError):
    status_code = 500
    message = 'An unexpected error occurred'


class DeliveryFailed(Exception):
    """Notification could not be delivered. Never reaches the client."""
