class BisClientError(Exception):
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

class UsageError(BisClientError):
    def __init__(self, code: str, message: str):
        super().__init__(code, message)

class InvalidArgumentError(BisClientError):
    def __init__(self, message: str):
        super().__init__("INVALID_PROGRAM", message)

class CatalogRequestError(BisClientError):
    def __init__(self, code: str, message: str):
        super().__init__(code, message)
