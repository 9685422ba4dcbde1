import re

from .errors import ParseError, InvalidCapacity

_SEPARATORS = re.compile(r"[\s,;]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_refs(text):
    """Split a reference string on commas, semicolons or whitespace.

    Blank input yields an empty sequence. Any token that is not a signed
    decimal integer raises ParseError carrying that token.
    """
    if text is None:
        return ()
    refs = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        if not _INTEGER.fullmatch(token):
            raise ParseError(token)
        refs.append(int(token))
    return tuple(refs)


def validate_frames(frames):
    if isinstance(frames, bool) or not isinstance(frames, int) or frames < 0:
        raise InvalidCapacity(frames)
    return frames
