from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException


def handle_http_error(e):
    return jsonify({'error': e.description or e.name}), e.code


def handle_unexpected_error(e):
    current_app.logger.exception('Unhandled error: %s', e)
    return jsonify({'error': 'Internal server error'}), 500


def register_error_handlers(app):
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
