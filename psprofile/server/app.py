"""
HTTP gateway: chart page assets plus the `/data` endpoint.
"""
import csv
import io

from flask import Flask, Response, abort, request

from psprofile.models.errors import ProfileError
from psprofile.server.assets import AssetProvider, PackageAssetProvider
from psprofile.service.chart.chart_responder import write_chart
from psprofile.service.store.row_store import RowStore
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)

INDEX_ASSET = "index.html"
FETCH_ERROR_MESSAGE = "can't fetch data"


def create_app(store: RowStore, assets: AssetProvider = None) -> Flask:
    """
    Build the Flask application.

    Args:
        store: Profile store re-read on every `/data` request
        assets: Provider for the chart page files (default: bundled package data)
    """
    app = Flask(__name__, static_folder=None)
    assets = assets or PackageAssetProvider()

    def serve_asset(name: str) -> Response:
        content = assets.get(name)
        if content is None:
            abort(404)
        return Response(content, mimetype=assets.content_type(name))

    @app.route("/")
    def index():
        return serve_asset(INDEX_ASSET)

    @app.route("/<path:name>")
    def static_asset(name: str):
        return serve_asset(name)

    @app.route("/data")
    def data():
        logger.info("Inside data handler")
        # Accepted for compatibility with the chart page, not used
        _ = request.args.get("symbol")

        try:
            table = store.read_table()
        except (OSError, csv.Error, ProfileError) as e:
            logger.error(f"{FETCH_ERROR_MESSAGE}: {e}")
            return Response(FETCH_ERROR_MESSAGE, status=500, mimetype="text/plain")

        # Encoded in full before anything is sent; on failure the body stays empty
        body = io.StringIO()
        try:
            write_chart(table, body)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"table: {e}")
        return Response(body.getvalue(), mimetype="application/json")

    return app
