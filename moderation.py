"""
Chirp moderation: length check and banned word masking.

Both functions are pure so they can be called from any request thread
without locking.
"""
from dataclasses import dataclass

MASK = "****"


class ValidationError(Exception):
    """Raised when a chirp cannot be accepted. `message` goes back to the client."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ChirpTooLong(ValidationError):
    def __init__(self, message="Chirp too large"):
        super().__init__(message)


@dataclass(frozen=True)
class CleanedChirp:
    cleaned_body: str


def clean_body(text, banned_words):
    """
    Replaces every banned word with ****.
    Only a single space separates words, so double spaces survive as empty
    tokens and a word followed by punctuation ("kerfuffle!") is left alone.
    """
    banned = [word.lower() for word in banned_words]
    tokens = text.split(" ")
    for i, token in enumerate(tokens):
        if token.lower() in banned:
            tokens[i] = MASK
    return " ".join(tokens)


def validate_chirp(body, banned_words, max_length=140):
    """Rejects bodies over max_length UTF-8 bytes, otherwise returns the cleaned body."""
    if len(body.encode("utf-8")) > max_length:
        raise ChirpTooLong()
    return CleanedChirp(cleaned_body=clean_body(body, banned_words))
