from flask import request, jsonify, g
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from storebuilder.models.user import User
from . import v1_bp


def issue_tokens(user, store):
    claims = {"store_id": store.id, "role": user.role}
    return {
        "access_token": create_access_token(identity=user.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=user.id, additional_claims=claims),
    }


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Invalid request body"}), 400

    email, password = data.get("email"), data.get("password")
    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    store = g.current_store
    user = User.query.filter_by(email=email, store_id=store.id).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    return jsonify(issue_tokens(user, store)), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    store = g.current_store
    if get_jwt().get("store_id") != store.id:
        return jsonify({"error": "Store mismatch"}), 403

    # role may have changed since the refresh token was issued
    user = User.query.filter_by(id=get_jwt_identity(), store_id=store.id).first()
    if not user or not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"store_id": store.id, "role": user.role},
    )
    return jsonify({"access_token": access_token}), 200
