class SyncError(Exception):
    """Base class for rejections of a sync request.

    ``message`` is what the client sees; keep it free of detail that would
    help probe the verifier.
    """
    status_code = 400
    message = 'Bad request'

    def __init__(self, reason: str = ''):
        super().__init__(reason or self.message)
        self.reason = reason or self.message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(SyncError):
    status_code = 400
    message = 'Missing data'


class MalformedPayload(SyncError):
    status_code = 400
    message = 'Invalid JSON'


class AuthError(SyncError):
    status_code = 403
    message = 'Invalid initData'


class RateLimitError(SyncError):
    status_code = 429
    message = 'Too fast'
