"""
appswitcher/web/routes.py

Flask route handlers for the switcher API.
"""
from flask import jsonify
from typing import Any, List
from ..models import UsageRecord


def _serialize(records: List[UsageRecord]) -> List[dict[str, Any]]:
    return [record.to_dict() for record in records]


class SwitcherRoutes:
    """Flask route handlers exposing the switcher views read-only."""

    def __init__(self, service: Any) -> None:
        self.service = service

    def api_most_used(self) -> Any:
        """Get the most used apps, highest count first."""
        try:
            return jsonify(_serialize(self.service.most_used()))
        except Exception as e:
            print(f"Error in api_most_used: {e}")
            import traceback
            traceback.print_exc()
            return jsonify({"error": str(e)}), 500

    def api_recent(self) -> Any:
        """Get the recently used apps, latest first."""
        try:
            return jsonify(_serialize(self.service.recent()))
        except Exception as e:
            print(f"Error in api_recent: {e}")
            import traceback
            traceback.print_exc()
            return jsonify({"error": str(e)}), 500

    def api_app(self, component: str) -> Any:
        """Get a single app by its "package/class" component name."""
        try:
            record = self.service.get(component)
            if record is None:
                return jsonify({"error": f"Unknown application: {component}"}), 404
            return jsonify(record.to_dict())
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            print(f"Error in api_app: {e}")
            import traceback
            traceback.print_exc()
            return jsonify({"error": str(e)}), 500

    def get_routes(self) -> list[tuple[str, str, Any]]:
        """Return (rule, endpoint, handler) tuples."""
        return [
            ("/api/switcher/most_used", "most_used", self.api_most_used),
            ("/api/switcher/recent", "recent", self.api_recent),
            ("/api/switcher/apps/<path:component>", "app", self.api_app),
        ]
