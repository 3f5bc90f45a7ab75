"""
Custom exceptions for the battle helper API
"""
class PokeBattleException(Exception):
    """Base exception for the battle helper API"""
    status_code = 500

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

class ClientInputError(PokeBattleException):
    """Request is missing a required field or cannot be served as asked"""
    status_code = 400

class CollaboratorError(PokeBattleException):
    """An external service call failed"""
    status_code = 500

class StoreError(CollaboratorError):
    """Realtime Database read or write failed"""
    pass

class ReasoningError(CollaboratorError):
    """Gemini call failed or returned nothing usable"""
    pass
