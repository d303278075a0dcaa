# cropmarket/routes/root_routes.py

from flask import Blueprint

# Root blueprint
root_bp = Blueprint("root", __name__)


# -----------------------------
# HEALTH
# -----------------------------
@root_bp.get("/")
def home():
    return "Server running", 200, {"Content-Type": "text/plain; charset=utf-8"}
