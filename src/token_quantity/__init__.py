__version__ = "0.0.1"

from token_quantity.domain.quantity.quantity import Quantity
from token_quantity.domain.token.token import Token, is_quantity_of
from token_quantity.domain.token.token_info import TokenInfo

__all__ = ["Quantity", "Token", "TokenInfo", "is_quantity_of"]
