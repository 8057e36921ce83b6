class FeedError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FeedError):
    status_code = 400


class NotFoundError(FeedError):
    status_code = 404
