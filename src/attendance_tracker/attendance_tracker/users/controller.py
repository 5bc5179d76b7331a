from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .schemas import CredentialsRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        req = CredentialsRequest.from_json(json_body())
        logger.info("register request username=%s", req.username)

        try:
            user = container.auth_service.register(req.username, req.password)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            logger.exception("Error registering user")
            return error_response("Registration failed", 400, e)

        return jsonify({"message": "User registered successfully", "user": user.to_public()})

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        req = CredentialsRequest.from_json(json_body())
        logger.info("login request username=%s", req.username)

        try:
            user = container.auth_service.authenticate(req.username, req.password)
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except Exception as e:
            logger.exception("Login error")
            return error_response("Login error", 500, e)

        return jsonify({"message": "Login successful", "user": user.to_public()})
