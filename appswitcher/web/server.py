"""
Flask server exposing the switcher views.
"""
from flask import Flask
from typing import Any
from .routes import SwitcherRoutes


def create_app(service: Any) -> Flask:
    """
    Create Flask app serving the switcher API.

    Args:
        service: AppSwitcherService (or anything with most_used/recent/get)
    """
    app = Flask(__name__)

    routes = SwitcherRoutes(service)
    for rule, endpoint, handler in routes.get_routes():
        app.add_url_rule(rule, endpoint=endpoint, view_func=handler, methods=['GET'])

    return app
