import json
from pathlib import Path
from unittest.mock import MagicMock

import requests
from requests.structures import CaseInsensitiveDict


def write_sponsors(path: Path, sponsors: list[dict]) -> Path:
    path.write_text(json.dumps({"sponsors": sponsors}))
    return path


def fake_response(
    status: int = 200,
    *,
    headers: dict[str, str] | None = None,
    chunks: list[bytes] | None = None,
) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    response.iter_content.return_value = iter(chunks or [])
    return response


def fake_session(*responses) -> MagicMock:
    """A session whose successive `get` calls return (or raise) `responses`."""
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = list(responses)
    session.__enter__.return_value = session
    session.__exit__.return_value = False
    return session


def requested_urls(session: MagicMock) -> list[str]:
    return [call.args[0] for call in session.get.call_args_list]
