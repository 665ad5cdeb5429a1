"""Short code encoding utility

This module provides the codec between numeric record ids and the short
codes that appear at the end of short URLs. Codes are plain positional
base62 numerals over the alphabet [a-zA-Z0-9] ('a' is the zero digit).

Every non-negative integer has exactly one canonical code: the shortest
numeral, i.e. without leading zero digits. `decode_code()` rejects anything
that isn't canonical, which makes the pair a true bijection:

    decode_code(encode_id(n)) == n
    encode_id(decode_code(code)) == code

Functions:
    encode_id(identifier, alphabet=ALPHABET) -> str:
        Encode a non-negative integer id into its canonical short code.
    decode_code(code, alphabet=ALPHABET) -> int:
        Decode a canonical short code back into its id.

Example:
    >>> from microurl.utils import encode_id, decode_code
    >>> encode_id(123456)
    'Gho'
    >>> decode_code('Gho')
    123456
"""

import string

from microurl.exceptions import InvalidIdError, InvalidCodeError


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def _check_alphabet(alphabet: str) -> None:
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if len(alphabet) < 2 or len(set(alphabet)) != len(alphabet):
        raise ValueError(f'Alphabet must contain at least 2 unique characters (given value: {alphabet!r}).')


def encode_id(identifier: int, alphabet: str = ALPHABET) -> str:
    """Encode a record id into its canonical short code.

    Args:
        identifier (int):
            Non-negative integer id issued by an id generator.

        alphabet (str, optional):
            Digit symbols, where position equals digit value.
            Defaults to the base62 alphabet [a-zA-Z0-9].

    Returns:
        str: The shortest numeral representing `identifier`.

    Raises:
        InvalidIdError:
            If `identifier` is not an integer or is negative.

    Example:
        >>> encode_id(0)
        'a'
        >>> encode_id(62)
        'ba'
    """
    _check_alphabet(alphabet)
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        raise InvalidIdError(f'Id must be of type integer (given type: {type(identifier)}).')
    if identifier < 0:
        raise InvalidIdError(f'Id must be a non-negative integer (given value: {identifier}).')

    base = len(alphabet)
    if identifier == 0:
        return alphabet[0]

    digits = []
    while identifier:
        identifier, remainder = divmod(identifier, base)
        digits.append(alphabet[remainder])
    return ''.join(reversed(digits))


def decode_code(code: str, alphabet: str = ALPHABET) -> int:
    """Decode a canonical short code back into its record id.

    Args:
        code (str):
            Short code, e.g. the last path segment of a short URL.

        alphabet (str, optional):
            Digit symbols used by `encode_id()`. Defaults to [a-zA-Z0-9].

    Returns:
        int: The id `code` encodes.

    Raises:
        TypeError:
            If `code` is not a string.
        InvalidCodeError:
            If `code` is empty, contains characters outside the alphabet,
            or has a leading zero digit.

    Example:
        >>> decode_code('ba')
        62
        >>> decode_code('!!!')
        Traceback (most recent call last):
            ...
        microurl.exceptions.InvalidCodeError: Code '!!!' contains characters outside the alphabet: '!'.
    """
    _check_alphabet(alphabet)
    if not isinstance(code, str):
        raise TypeError(f'Code must be of type string (given type: {type(code)}).')
    if not code:
        raise InvalidCodeError('Code must be a non-empty string.')

    values = {character: value for value, character in enumerate(alphabet)}
    invalid = sorted(set(code) - values.keys())
    if invalid:
        raise InvalidCodeError(f"Code {code!r} contains characters outside the alphabet: {''.join(invalid)!r}.")
    # NOTE: 'aab' would decode to the same id as 'b'; only the shortest form is a valid code
    if len(code) > 1 and code[0] == alphabet[0]:
        raise InvalidCodeError(f'Code {code!r} is not canonical (leading {alphabet[0]!r}).')

    base = len(alphabet)
    identifier = 0
    for character in code:
        identifier = identifier * base + values[character]
    return identifier
