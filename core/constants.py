"""
Common HTTP constants shared by controllers: status codes, formats and headers.

Formats are the DRF renderer `format` names (`?format=json`, `/settings.json`),
so they can be compared directly against `request.accepted_renderer.format`.
"""

# HTTP status code 406: the server has no representation matching the
# `Accept` header sent by the client.
STATUSCODE_NOT_ACCEPTABLE = 406
# HTTP status code 409: the request conflicts with the current state.
STATUSCODE_CONFLICT = 409

FORMAT_JSON = "json"
FORMAT_HTML = "html"

HEADER_ACCEPT = "Accept"
HEADER_LOCATION = "Location"
HEADER_LINK = "Link"
HEADER_IF_MODIFIED_SINCE = "If-Modified-Since"
HEADER_VARY = "Vary"
HEADER_AUTHENTICATE = "WWW-Authenticate"
HEADER_AUTHORIZATION = "Authorization"
HEADER_REQUESTED_WITH = "X-Requested-With"

# Value browsers' XHR libraries send in `X-Requested-With`.
AJAX_REQUESTED_WITH = "XMLHttpRequest"

# Templates rendered by the error paths.
TEMPLATE_BAD_REQUEST_HTML = "errors/400.html"
TEMPLATE_BAD_REQUEST_JSON = "tags/Core/body.json"
TEMPLATE_NOT_ACCEPTABLE = "errors/406.html"
