import secrets
import string


REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


def generate_booking_reference(*, prefix: str, length: int) -> str:
    """Short human-readable booking code, e.g. `CT7K2M9QXA`. Uniqueness is checked by the store."""
    return prefix + ''.join(secrets.choice(REFERENCE_ALPHABET) for _ in range(length))
