class WifiSpotsError(Exception):
    """Base error; its message is shown to the end user as is."""


class ValidationError(WifiSpotsError):
    pass


class NotFoundError(WifiSpotsError):
    pass


class StorageError(WifiSpotsError):
    pass


class AuthorizationError(WifiSpotsError):
    pass
