from .random_gen  import SecureRandom
from .key_manager import KeyManager
from .sources     import get_reader, get_content, open_source

__all__ = ["SecureRandom", "KeyManager",
           "get_reader", "get_content", "open_source"]
