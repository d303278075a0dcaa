# cropmarket/mongo.py
from __future__ import annotations

from flask_pymongo import PyMongo

mongo = PyMongo()


def init_mongo(app):
    """
    Initializes Flask-PyMongo from app.config["MONGO_URI"].
    Call this during app startup (create_app).
    """
    if not app.config.get("MONGO_URI"):
        app.logger.warning("MONGO_URI not set. Mongo will not be initialized.")
        return None

    mongo.init_app(app)
    app.logger.info("Mongo initialized")
    return mongo


def get_crops_collection(app):
    """
    Returns the crops collection for this app.
    Falls back to MONGO_DB_NAME when the URI does not name a database.
    """
    db = mongo.db
    if db is None:
        db = mongo.cx[app.config["MONGO_DB_NAME"]]
    return db[app.config["CROPS_COLLECTION"]]
