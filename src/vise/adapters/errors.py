class InvalidPayloadError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EligibilityRejectedError(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ClientDoesNotExistError(Exception):
    def __init__(self, id: int) -> None:
        super().__init__(f"Client {id} is not registered")
        self.id = id


class CountryRestrictedError(Exception):
    def __init__(self, card_type: str, country: str) -> None:
        super().__init__(
            f"Clients with a {card_type} card cannot make purchases from {country}"
        )
        self.card_type = card_type
        self.country = country
