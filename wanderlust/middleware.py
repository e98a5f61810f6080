import json
import logging
import time

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger("requests")

# Credentials pass through these; only the status line is logged for them.
AUTH_PATHS = ("/api/token/", "/api/accounts/register/")
UNLOGGED_PREFIXES = ("/static/", "/media/", "/admin/")


def _route(request):
    """URL name and object id of the resolved view, e.g. ("listing-like", "12")."""
    match = getattr(request, "resolver_match", None)
    if match is None:
        return None, None
    return match.url_name, match.kwargs.get("pk")


def _actor(request):
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return f"user_id={user.pk}"
    return "anon"


class RequestLogMiddleware(MiddlewareMixin):
    """
    One ``requests`` log line per API call with the route name, object id,
    status, actor and elapsed time. Request bodies are never logged.
    """

    def process_request(self, request):
        request._log_started = time.monotonic()

    def process_response(self, request, response):
        if request.path.startswith(UNLOGGED_PREFIXES):
            return response

        started = getattr(request, "_log_started", None)
        elapsed_ms = round((time.monotonic() - started) * 1000) if started is not None else None

        if request.path.startswith(AUTH_PATHS):
            logger.info(
                "HTTP %s %s -> %s [%s] %sms",
                request.method, request.path, response.status_code, _actor(request), elapsed_ms,
            )
            return response

        route, object_id = _route(request)
        entry = {
            "method": request.method,
            "path": request.path,
            "route": route,
            "status": response.status_code,
            "user": _actor(request),
            "duration_ms": elapsed_ms,
        }
        if object_id is not None:
            entry["pk"] = object_id
        query = request.META.get("QUERY_STRING")
        if query:
            entry["query"] = query
        logger.info(json.dumps(entry, ensure_ascii=False))
        return response
