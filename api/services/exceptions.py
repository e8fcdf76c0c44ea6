"""
Errors raised by the service layer. Routes map these onto HTTP responses.
"""


class PetBattleError(RuntimeError):
    pass


# Undecodable or unsupported image payload; a client error.
class CodecError(PetBattleError):
    pass


# NSFW classifier unreachable or erroring; absorbed by the failure policy.
class ClassificationUnavailable(PetBattleError):
    pass


class NotFoundError(PetBattleError):
    def __init__(self, cat_id: str):
        super().__init__(f"Cat '{cat_id}' not found")
        self.cat_id = cat_id


# Store read/write failure; a server error.
class PersistenceError(PetBattleError):
    pass
