"""
Centralized Blueprint Registration
All blueprints MUST be registered inside register_all_blueprints(app)
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException


def register_all_blueprints(app):

    # Root (health)
    from cropmarket.routes.root_routes import root_bp
    app.register_blueprint(root_bp)

    # API
    prefix = app.config.get("API_PREFIX") or None

    from cropmarket.routes.crop_routes import crop_bp
    from cropmarket.routes.interest_routes import interest_bp
    from cropmarket.routes.my_routes import my_bp

    app.register_blueprint(crop_bp, url_prefix=prefix)
    app.register_blueprint(interest_bp, url_prefix=prefix)
    app.register_blueprint(my_bp, url_prefix=prefix)

    app.logger.info("All blueprints registered")


def register_error_handlers(app):
    """Every failure leaves as {"error": ...} JSON, never an HTML page."""

    @app.errorhandler(HTTPException)
    def _http_error(e):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e):
        app.logger.exception("Unhandled error: %s", e)
        return jsonify({"error": "Internal server error"}), 500
