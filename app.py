# app.py (gunicorn app:app, or python app.py for local dev)

from flask import Flask
from flask_cors import CORS

from cropmarket.app_config import load_config
from cropmarket.mongo import get_crops_collection, init_mongo
from cropmarket.register_blueprints import register_all_blueprints, register_error_handlers
from cropmarket.services.catalog_service import CropCatalogService
from cropmarket.services.crop_store import CropStore
from cropmarket.services.interest_service import InterestService
from cropmarket.services.projection_service import ProjectionService


def _wire_services(app, crop_store):
    """One store handle, shared by every service for the app's lifetime."""
    app.extensions["cropmarket"] = {
        "store": crop_store,
        "catalog": CropCatalogService(crop_store),
        "interests": InterestService(crop_store),
        "projections": ProjectionService(crop_store),
    }


def create_app(config=None, crop_store=None):
    app = Flask(__name__)

    # -------------------------
    # Config
    # -------------------------
    load_config(app, config)

    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})

    # -------------------------
    # Store (injected, or Mongo)
    # -------------------------
    if crop_store is None:
        if app.config["DISABLE_MONGO"]:
            app.logger.warning("Mongo disabled by DISABLE_MONGO=1; API routes will answer 500")
        elif init_mongo(app) is not None:
            crop_store = CropStore(get_crops_collection(app))

    if crop_store is not None:
        _wire_services(app, crop_store)

    # -------------------------
    # Blueprints
    # -------------------------
    register_all_blueprints(app)
    register_error_handlers(app)

    return app


# gunicorn entrypoint
app = create_app()


# Local run only
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"], threaded=True)
