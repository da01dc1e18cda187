"""Flask application factory for the SentCut web UI."""

from flask import Flask, jsonify

from sentcut.processor import DEFAULT_GAP_THRESHOLD


def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config["WEBHOOK_TIMEOUT"] = 60.0
    app.config["USE_FALLBACK"] = True
    app.config["GAP_THRESHOLD"] = DEFAULT_GAP_THRESHOLD
    if config:
        app.config.update(config)

    from sentcut.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({"error": "Bad request"}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({"error": "Failed to analyze video"}), 500

    return app
