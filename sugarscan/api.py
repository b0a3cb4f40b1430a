"""
Flask-based Web API for SugarScan.

Exposes factory method scans over HTTP so that a sugar generator running
in another process can fetch descriptors as JSON. Scanning imports the
named module, so only run this against code you trust.

Endpoints:
    POST /api/scan - Scan a class or module for factory methods
    GET /api/health - Health check endpoint
"""

from typing import Any

from flask import Flask, Response, jsonify, request

from sugarscan import __version__
from sugarscan.capabilities import CapabilityError, CapabilityResolver
from sugarscan.config import ScanOptions
from sugarscan.readers import create_reader_registry

app = Flask(__name__)


def scan_to_dict(type_name: str, target: str, options: ScanOptions) -> dict[str, Any]:
    """
    Scan a named class or module and build the response payload.

    Args:
        type_name: Qualified name of the class or module to scan
        target: Exclusion target id
        options: Capability names

    Returns:
        Dictionary with the scanned type, methods and warnings

    Raises:
        ValueError: If the scan target cannot be resolved or scanned
        CapabilityError: If the matcher core cannot be loaded
    """
    resolver = CapabilityResolver()
    scan_target = resolver.resolve(type_name)
    reader = create_reader_registry().create_reader(scan_target, target, options, resolver)
    methods = [m.to_dict() for m in reader]
    return {
        "type": type_name,
        "target": target,
        "reader": reader.name,
        "methods": methods,
        "warnings": reader.get_warnings(),
    }


@app.route("/api/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({"status": "healthy", "version": __version__})


@app.route("/api/scan", methods=["POST"])
def scan() -> tuple[Response, int]:
    """
    Scan a class or module for factory methods.

    JSON body:
        - type: Qualified name of the class or module (required)
        - target: Exclusion target id (default: "")
        - marker: Qualified name of the marker type (optional)
        - matcher: Qualified name of the matcher type (optional)

    Returns:
        JSON response with:
            - success: True
            - methods: List of method descriptors
            - warnings: Any warnings from the scan
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    type_name = data.get("type")
    if not type_name:
        return jsonify({"error": "'type' is required"}), 400

    options = ScanOptions.from_env(
        marker_type=data.get("marker"),
        matcher_type=data.get("matcher"),
    )

    try:
        payload = scan_to_dict(type_name, data.get("target", ""), options)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except CapabilityError as e:
        return jsonify({"error": str(e)}), 500

    payload["success"] = True
    return jsonify(payload), 200


@app.errorhandler(500)
def internal_server_error(error):
    """Handle internal server errors."""
    return jsonify({"error": "Internal server error"}), 500


def create_app() -> Flask:
    """
    Application factory for creating the Flask app.

    Returns:
        Configured Flask application instance.
    """
    return app


def main() -> None:
    """Run the development server."""
    print("Starting SugarScan API server...")
    print()
    print("API Endpoints:")
    print("  POST /api/scan   - Scan a class or module")
    print("  GET  /api/health - Health check")
    print()
    app.run(host="127.0.0.1", port=5002, debug=True)


if __name__ == "__main__":
    main()
