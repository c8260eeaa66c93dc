import json
from pathlib import Path
from typing import NotRequired, TypedDict


class Sponsor(TypedDict):
    name: str
    github: NotRequired[str]


def load_sponsors(path: Path) -> list[Sponsor]:
    """
    Load the ordered sponsor list from the `sponsors` key of a JSON file.

    Records are not validated; a missing file, bad JSON or a missing
    `sponsors` key propagates to the caller.
    """
    data = json.loads(path.read_bytes())
    return data["sponsors"]
