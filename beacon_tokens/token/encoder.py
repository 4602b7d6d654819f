"""Map random bytes onto the ambiguity-free token alphabet."""

from __future__ import annotations

from ..config import GENERATION_ALPHABET, TOKEN_LENGTH


class TokenEncoder:
    """Encode one byte per symbol using ``alphabet[byte % len(alphabet)]``.

    With the default 32-symbol alphabet the reduction is exact. Alphabets whose
    size does not divide 256 over-represent the lowest indices slightly.
    """

    def __init__(self, alphabet: str = GENERATION_ALPHABET, token_length: int = TOKEN_LENGTH) -> None:
        self.alphabet = alphabet
        self.token_length = token_length

    @property
    def alphabet_size(self) -> int:
        return len(self.alphabet)

    def encode(self, data: bytes) -> str:
        if len(data) != self.token_length:
            raise ValueError(f"Expected {self.token_length} bytes, got {len(data)}.")
        size = len(self.alphabet)
        return "".join(self.alphabet[b % size] for b in data)
