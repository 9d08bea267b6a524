from flask import request, g, jsonify
from storebuilder.models.store import Store

# Endpoints reachable without a store context
PUBLIC_ENDPOINTS = {"v1.health_check", "openapi_spec", "static"}


def store_middleware(app):
    @app.before_request
    def load_store():
        g.current_store = None
        if request.endpoint in PUBLIC_ENDPOINTS or (request.blueprint or "").startswith("swagger"):
            return None

        store_id = request.headers.get('X-Store-ID')
        if not store_id:
            return jsonify({"error": "X-Store-ID header is missing"}), 400

        store = Store.query.filter_by(id=store_id, is_active=True).first()
        if not store:
            return jsonify({"error": "Invalid store"}), 404

        # Attach store to global context
        g.current_store = store
