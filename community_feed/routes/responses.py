from flask import current_app, jsonify


def success(status=200, **payload):
    return jsonify({"success": True, **payload}), status


def failure(message, status):
    return jsonify({"success": False, "error": message}), status


def feed_error_response(error):
    current_app.logger.warning("%s: %s", type(error).__name__, error.message)
    return failure(error.message, error.status_code)
