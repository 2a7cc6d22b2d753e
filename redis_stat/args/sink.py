"""
Elasticsearch sink URL normalization for redis-stat

Accepts [http://]HOST[:PORT][/INDEX] and splits it into the server URL and
the index name that samples are written to.
"""

import re
from urllib.parse import urlsplit, urlunsplit

from requests.utils import requote_uri

from ..errors import FlagError
from .models import DEFAULT_ES_INDEX, ElasticsearchTarget

HTTP_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def parse_sink_url(url: str) -> ElasticsearchTarget:
    """
    Normalize an --es value

    Args:
        url: Value given on the command line

    Returns:
        ElasticsearchTarget with a path-less URL and the index name

    Raises:
        FlagError: If no host can be found in the URL
    """
    if not HTTP_SCHEME_PATTERN.match(url):
        url = "http://" + url

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise FlagError(f"Invalid Elasticsearch URL: {url} ({e})") from e

    if not parts.hostname:
        raise FlagError(f"Invalid Elasticsearch URL: {url}")

    segments = [segment for segment in parts.path.split("/") if segment]
    index = segments[-1] if segments else DEFAULT_ES_INDEX

    base_url = urlunsplit((parts.scheme, parts.netloc, "", "", ""))
    return ElasticsearchTarget(url=requote_uri(base_url), index=index)
