# Avatar URLs, plus the fetch-and-embed path used for self-contained SVGs.

import base64
from urllib.parse import quote, urljoin

import requests

from sponsorsvg._log import LOG
from sponsorsvg.sponsors import Sponsor

_GITHUB = "https://github.com"
_PLACEHOLDER_URL = "https://ui-avatars.com/api/?name={name}&background=random&size=128"

# ui-avatars.com rejects requests that don't look like they come from a browser.
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT = 30.0

_CHUNK_SIZE = 8192


class FetchError(Exception):
    """An avatar could not be retrieved."""


class TooManyRedirects(FetchError):
    pass


def fallback_avatar_url(name: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    return _PLACEHOLDER_URL.format(name=quote(name, safe="!~*'()"))


def avatar_url(sponsor: Sponsor) -> str:
    if handle := sponsor.get("github"):
        return f"{_GITHUB}/{handle}.png"
    return fallback_avatar_url(sponsor["name"])


def profile_url(sponsor: Sponsor) -> str:
    if handle := sponsor.get("github"):
        return f"{_GITHUB}/{handle}"
    return "#"


def fetch_data_uri(
    session: requests.Session,
    url: str,
    *,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Fetch `url` and return its body as a `data:` URI.

    301 and 302 responses are followed by hand, up to `max_redirects` hops;
    any other non-200 status is a `FetchError`. The content type defaults to
    `image/png` when the response doesn't send one.
    """
    for _ in range(max_redirects + 1):
        try:
            response = session.get(
                url,
                headers={"User-Agent": USER_AGENT},
                allow_redirects=False,
                stream=True,
                timeout=timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"request for {url} failed: {e}") from e

        with response:
            match response.status_code:
                case 301 | 302:
                    location = response.headers.get("Location")
                    if not location:
                        raise FetchError(f"redirect from {url} has no Location")
                    url = urljoin(url, location)
                case 200:
                    try:
                        body = b"".join(response.iter_content(chunk_size=_CHUNK_SIZE))
                    except requests.RequestException as e:
                        raise FetchError(f"reading {url} failed: {e}") from e

                    content_type = response.headers.get("Content-Type", "image/png")
                    payload = base64.b64encode(body).decode("ascii")
                    return f"data:{content_type};base64,{payload}"
                case status:
                    raise FetchError(f"{url} returned HTTP {status}")

    raise TooManyRedirects(f"gave up after {max_redirects} redirects, last at {url}")


def resolve_avatar(
    session: requests.Session,
    sponsor: Sponsor,
    *,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Embeddable avatar for `sponsor`.

    If the primary avatar can't be fetched, the placeholder for the sponsor's
    name is tried once. A failure there propagates.
    """
    try:
        return fetch_data_uri(
            session, avatar_url(sponsor), max_redirects=max_redirects, timeout=timeout
        )
    except FetchError as e:
        LOG.warn(f"{e}; falling back to placeholder avatar")

    return fetch_data_uri(
        session,
        fallback_avatar_url(sponsor["name"]),
        max_redirects=max_redirects,
        timeout=timeout,
    )


def resolve_avatars(
    sponsors: list[Sponsor],
    *,
    session: requests.Session | None = None,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[str]:
    """Fetch every sponsor's avatar, one at a time, in list order."""
    if session is None:
        with requests.Session() as session:
            return resolve_avatars(
                sponsors, session=session, max_redirects=max_redirects, timeout=timeout
            )

    avatars = []
    for sponsor in sponsors:
        with LOG.scope(sponsor["name"]):
            LOG.info("fetching avatar")
            avatars.append(
                resolve_avatar(
                    session, sponsor, max_redirects=max_redirects, timeout=timeout
                )
            )
    return avatars
