"""Configuration constants for the Nuage REST session layer."""

import os

# Credentials and endpoint can also be supplied via environment variables
DEFAULT_URL          = os.environ.get("NUAGE_URL", "")
DEFAULT_USER         = os.environ.get("NUAGE_USERNAME", "csproot")
DEFAULT_PASSWORD     = os.environ.get("NUAGE_PASSWORD", "")
DEFAULT_ORGANIZATION = os.environ.get("NUAGE_ORGANIZATION", "csp")
DEFAULT_CERT         = os.environ.get("NUAGE_CERT", "")
DEFAULT_KEY          = os.environ.get("NUAGE_KEY", "")

DEFAULT_API_PREFIX  = "nuage/api"
DEFAULT_API_VERSION = "6"

EVENTS_PATH        = "/events"
RESPONSE_CHOICE    = "responseChoice=1"

REQUEST_TIMEOUT           = 60     # seconds per CRUD request
EVENTS_TIMEOUT            = None   # long-poll: wait until the server answers
MAX_CHOICE_RESUBMISSIONS  = 1      # 300 Multiple Choices resubmissions per request
EVENT_RETRY_DELAY         = 5.0    # listener pause after a failed poll (seconds)
EVENT_STOP_TIMEOUT        = 5.0    # listener stop() wait for the polling thread (seconds)

DEFAULT_PAGE_SIZE = 50

# Request headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE  = "Content-Type"
HEADER_ORGANIZATION  = "X-Nuage-Organization"
HEADER_PAGE_SIZE     = "X-Nuage-PageSize"
HEADER_PAGE          = "X-Nuage-Page"
HEADER_FILTER        = "X-Nuage-Filter"
HEADER_FILTER_TYPE   = "X-Nuage-FilterType"
HEADER_ORDER_BY      = "X-Nuage-OrderBy"
HEADER_GROUP_BY      = "X-Nuage-GroupBy"
HEADER_ATTRIBUTES    = "X-Nuage-Attributes"
HEADER_COUNT         = "X-Nuage-Count"

JSON_CONTENT_TYPE = "application/json"
AUTH_SCHEME       = "XREST"

# Statuses handled by the dispatcher
SUCCESS_STATUSES   = frozenset([200, 201, 204])
ERROR_BODY_STATUSES = frozenset([404, 409])
MULTIPLE_CHOICES   = 300


def build_api_url(
    endpoint: str,
    prefix: str = DEFAULT_API_PREFIX,
    version: str = DEFAULT_API_VERSION,
) -> str:
    """
    Build the API base URL from the controller endpoint.

    ``build_api_url("https://vsd:8443", version="5.0")``
    → ``https://vsd:8443/nuage/api/v5_0``
    """
    version = str(version).replace(".", "_")
    return f"{endpoint.rstrip('/')}/{prefix.strip('/')}/v{version}"
