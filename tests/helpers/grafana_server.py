"""Local stub Grafana served with aiohttp.web."""

from __future__ import annotations

from aiohttp import web

API_KEY = "secret"
TOTAL_ROWS = 12


def _authorized(request: web.Request) -> bool:
    return request.headers.get("Authorization") == f"Bearer {API_KEY}"


async def _query(request: web.Request) -> web.Response:
    if not _authorized(request):
        return web.json_response({"message": "Unauthorized"}, status=401)
    offset = int(request.query["offset"])
    limit = int(request.query["limit"])
    rows = [[t, t * 10.0] for t in range(offset, min(offset + limit, TOTAL_ROWS))]
    return web.json_response({"columns": ["time", "value"], "values": rows})


async def _bad_gateway(request: web.Request) -> web.Response:
    return web.json_response({"message": "datasource is down"}, status=502)


async def _server_error(request: web.Request) -> web.Response:
    return web.Response(text="internal error", status=500)


def make_app() -> web.Application:
    """Grafana under the ``/org1`` sub path with three proxied datasources.

    Datasource 1 serves ``TOTAL_ROWS`` rows by offset/limit, 2 answers 502
    and 3 answers 500.
    """
    app = web.Application()
    app.router.add_get("/org1/api/datasources/proxy/1/query", _query)
    app.router.add_get("/org1/api/datasources/proxy/2/query", _bad_gateway)
    app.router.add_get("/org1/api/datasources/proxy/3/query", _server_error)
    return app
