# cropmarket/app_config.py

import logging
import os


def load_config(app, overrides=None):
    """
    Load all Flask configuration in a clean centralized way.
    Environment first, then explicit overrides (tests, embedding apps).
    """
    # ------------------------------
    # Mongo
    # ------------------------------
    app.config["MONGO_URI"] = os.getenv(
        "MONGO_URI",
        "mongodb://localhost:27017/cropsService"
    )
    app.config["MONGO_DB_NAME"] = os.getenv("MONGO_DB_NAME", "cropsService")
    app.config["CROPS_COLLECTION"] = os.getenv("CROPS_COLLECTION", "Crops")
    app.config["DISABLE_MONGO"] = os.getenv("DISABLE_MONGO", "0") == "1"

    # ------------------------------
    # HTTP surface
    # ------------------------------
    app.config["API_PREFIX"] = os.getenv("API_PREFIX", "/api")
    app.config["CORS_ORIGINS"] = os.getenv("CORS_ORIGINS", "*")
    app.config["PORT"] = int(os.getenv("PORT", "3000"))

    # legacy clients expect 400 for "already sent"
    app.config["DUPLICATE_INTEREST_STATUS"] = int(os.getenv("DUPLICATE_INTEREST_STATUS", "409"))

    # ------------------------------
    # Logging
    # ------------------------------
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO").upper()

    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))
    app.logger.info("Config loaded (collection=%s, prefix=%s)",
                    app.config["CROPS_COLLECTION"], app.config["API_PREFIX"])
