"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidCardConfigError(DomainException):
    """Card billing days, credit limit or usage are out of range"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction amount or category is malformed"""

    pass


class OrphanReferenceError(DomainException):
    """Transaction references a card that is not in the wallet"""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"No card with id {card_id!r} in wallet")


class CardNotFoundError(DomainException):
    """Requested card does not exist"""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card {card_id!r} not found")


class DuplicateCardError(DomainException):
    """A card with the same id is already in the wallet"""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card {card_id!r} already exists")
