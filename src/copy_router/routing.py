# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Path patterns for object keys.

A pattern is a '/' separated list of segments. A segment starting with ':' captures
the key segment at the same position under that name; every other segment must
match literally. Leading and trailing separators are ignored on both sides, so
'/:ignore/livemode/:table' and ':ignore/livemode/:table' are the same pattern.
"""

from collections import namedtuple
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import PatternCompileError

SEPARATOR = '/'
CAPTURE_PREFIX = ':'

Segment = namedtuple('Segment', ['value', 'is_capture'])
Match = namedtuple('Match', ['pattern', 'handle', 'captures'])

def split_path(path: str) -> List[str]:
    return path.strip(SEPARATOR).split(SEPARATOR)

class Pattern:
    def __init__(self, source: str):
        self.source = source

        if not source.strip(SEPARATOR):
            raise PatternCompileError(f'Pattern "{source}" has no segments')

        segments = []
        names = set()
        for part in split_path(source):
            if part.startswith(CAPTURE_PREFIX):
                name = part[len(CAPTURE_PREFIX):]
                if not name:
                    raise PatternCompileError(f'Pattern "{source}" has a capture without a name')
                if name in names:
                    raise PatternCompileError(f'Pattern "{source}" captures "{name}" more than once')
                names.add(name)
                segments.append(Segment(name, True))
            else:
                segments.append(Segment(part, False))

        self.segments = tuple(segments)

    def match(self, key: str) -> Optional[Dict[str, str]]:
        """ Returns the captured segments if the key lines up with this pattern, otherwise None. """
        parts = split_path(key)
        if len(parts) != len(self.segments):
            return None

        captures = {}
        for segment, part in zip(self.segments, parts):
            if segment.is_capture:
                if not part:
                    return None
                captures[segment.value] = part
            elif segment.value != part:
                return None
        return captures

    def __repr__(self):
        return f'Pattern({self.source!r})'

def _compile_route(route) -> Tuple[Pattern, Any]:
    pattern, handle = route if isinstance(route, tuple) else (route, None)
    if not isinstance(pattern, Pattern):
        pattern = Pattern(pattern)
    return pattern, handle

class Router:
    """
    Ordered, read-only patterns; the first one that matches a key wins.

    Each route is a pattern (str or Pattern) or a (pattern, handle) pair.
    """
    def __init__(self, routes: Iterable[Union[str, Pattern, Tuple[Union[str, Pattern], Any]]] = ()):
        self._routes = tuple(_compile_route(route) for route in routes)

    def match(self, key: str) -> Optional[Match]:
        for pattern, handle in self._routes:
            captures = pattern.match(key)
            if captures is not None:
                return Match(pattern, handle, captures)
        return None

    @property
    def patterns(self):
        return tuple(pattern for pattern, _ in self._routes)

    def __len__(self):
        return len(self._routes)

def captured_parameters(router: Router, key: str) -> Optional[Dict[str, str]]:
    match = router.match(key)
    if match is None:
        return None
    return dict(match.captures)
