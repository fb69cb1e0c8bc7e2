from dataclasses import dataclass, field, fields
from typing import List, Optional, Tuple


@dataclass
class SortOptions:
    """Options for SORT.

    by_pattern: sort by external keys, e.g. 'weight_*'.
    limit: (start, count).
    get_patterns: external keys to return instead of the elements.
    ascending: when False (the default once options are given) DESC is sent.
    lexicographically: compare elements as strings (ALPHA).
    """
    by_pattern: Optional[str] = None
    limit: Optional[Tuple[int, int]] = None
    get_patterns: List[str] = field(default_factory=list)
    ascending: bool = False
    lexicographically: bool = False


# camelCase spellings of the option names.
_ALIASES = {
    'byPattern': 'by_pattern',
    'getPatterns': 'get_patterns',
}


def _options_from_mapping(options):
    valid = {f.name for f in fields(SortOptions)}
    kwargs = {}
    for name, value in options.items():
        name = _ALIASES.get(name, name)
        if name not in valid:
            raise ValueError(f"Unknown sort option {name!r}; valid options are {', '.join(sorted(valid))}")
        kwargs[name] = value
    return SortOptions(**kwargs)


def sort_args(key, options=None):
    """Build the argument list for SORT. options is a SortOptions or a dict of its fields."""
    args = [key]
    if options is None:
        return args
    if not isinstance(options, SortOptions):
        options = _options_from_mapping(options)

    if options.by_pattern:
        args.extend(["BY", options.by_pattern])
    if options.limit:
        start, count = options.limit
        args.extend(["LIMIT", start, count])
    for pattern in options.get_patterns or ():
        args.extend(["GET", pattern])
    if not options.ascending:
        args.append("DESC")
    if options.lexicographically:
        args.append("ALPHA")
    return args
