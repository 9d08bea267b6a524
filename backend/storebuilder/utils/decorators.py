from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity

def store_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        store = g.current_store
        if not store:
            return jsonify({"error": "Store context missing"}), 400

        if get_jwt().get("store_id") != store.id:
            return jsonify({"error": "Store mismatch"}), 403

        g.current_user_id = get_jwt_identity()
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if get_jwt().get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
