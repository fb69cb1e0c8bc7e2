from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandInfo:
    """Table entry for one supported command."""
    name: str
    doc: str
    post_process: Optional[str] = None


def command(name, doc, post_process=None):
    return CommandInfo(name, doc, post_process)


def build_table(*groups):
    """Merge per-category command lists into one name -> CommandInfo mapping."""
    table = {}
    for group in groups:
        for info in group:
            if info.name in table:
                raise ValueError(f"Duplicate command: {info.name}")
            table[info.name] = info
    return table
