from typing import Dict


class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class FormatError(DomainError):
    pass


class ValidationError(DomainError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = dict(errors)


class EditConflictError(DomainError):
    pass


class PersistenceError(DomainError):
    pass
