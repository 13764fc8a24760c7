from flask import Blueprint, current_app, jsonify, request

wishlist_bp = Blueprint('wishlist_bp', __name__)

# (method, path pattern, gateway operation)
ROUTES = (
    ('GET', '/<email>', 'list_wishlist'),
    ('POST', '/<email>', 'add_entry'),
    ('PUT', '/<email>/<name>', 'update_entry'),
    ('DELETE', '/<email>/<name>', 'delete_entry'),
)

BODY_METHODS = ('POST', 'PUT')


def get_gateway():
    return current_app.extensions['wishlist_gateway']


def make_view(method, operation):
    def view(**path_args):
        if method in BODY_METHODS:
            path_args['payload'] = request.get_json(silent=True)
        credential = request.headers.get('Authorization')
        outcome = getattr(get_gateway(), operation)(credential, **path_args)
        return jsonify(outcome.body), outcome.status

    view.__name__ = operation
    return view


for method, rule, operation in ROUTES:
    wishlist_bp.add_url_rule(rule, endpoint=operation, view_func=make_view(method, operation), methods=[method])
